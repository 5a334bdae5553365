"""
Tests para los modelos de dominio.

Verifican validaciones, propiedades derivadas e inmutabilidad.
"""

from decimal import Decimal

import pytest

from sie_metrics.domain.models import (
    CUENTA_RESULTADO,
    ErrorRecuperable,
    MetricasFinancieras,
    PartidaBalance,
    ProblemaLogico,
    Transaccion,
    Verificacion,
)


def _metricas(patrimonio_total: str, capital_social: str = "25000", **kwargs) -> MetricasFinancieras:
    valores = dict(
        nombre_empresa="Bolaget AB",
        inicio_ejercicio="20230101",
        fin_ejercicio="20231231",
        capital_social=Decimal(capital_social),
        patrimonio_total=Decimal(patrimonio_total),
        liquidez_total=Decimal("0"),
        liquidez_inicial=Decimal("0"),
        activos=(),
        pasivos=(),
        partidas_patrimonio=(),
        eventos_timeline=(),
        verificaciones=(),
    )
    valores.update(kwargs)
    return MetricasFinancieras(**valores)


class TestVerificacion:

    def test_suma_y_cantidad(self):
        verificacion = Verificacion(
            id="A-1",
            fecha="20230115",
            descripcion="Försäljning",
            transacciones=(
                Transaccion("1910", Decimal("500")),
                Transaccion("3010", Decimal("-400")),
            ),
        )
        assert verificacion.suma == Decimal("100")
        assert verificacion.num_transacciones == 2

    def test_sin_transacciones_suma_cero(self):
        assert Verificacion("A-1", "20230115", "Tom").suma == Decimal("0")

    def test_es_inmutable(self):
        verificacion = Verificacion("A-1", "20230115", "X")
        with pytest.raises(AttributeError):
            verificacion.id = "B-1"  # type: ignore


class TestProblemaLogico:

    def test_crear_basico(self):
        problema = ProblemaLogico(tipo="Voucher", severidad="error", mensaje="X")
        assert problema.detalles is None
        assert problema.es_error is True

    def test_tipo_reservado_date_es_valido(self):
        assert ProblemaLogico(tipo="Date", severidad="warning", mensaje="X").tipo == "Date"

    def test_tipo_invalido_lanza_error(self):
        with pytest.raises(ValueError, match="Tipo de problema"):
            ProblemaLogico(tipo="Otro", severidad="error", mensaje="X")

    def test_severidad_invalida_lanza_error(self):
        with pytest.raises(ValueError, match="Severidad"):
            ProblemaLogico(tipo="Voucher", severidad="info", mensaje="X")


class TestErrorRecuperable:

    def test_corregir_sustituye_la_linea(self):
        error = ErrorRecuperable(
            linea_problematica="#TRANS 1910 {} 1.234.56",
            contenido_original="#KONTO 1910 Kassa\n#TRANS 1910 {} 1.234.56\n",
            mensaje_error="X",
        )
        assert error.corregir("#TRANS 1910 {} 1234.56") == (
            "#KONTO 1910 Kassa\n#TRANS 1910 {} 1234.56\n"
        )

    def test_corregir_solo_la_primera_aparicion(self):
        error = ErrorRecuperable(
            linea_problematica="#TRANS 1910 {} x",
            contenido_original="#TRANS 1910 {} x\n#TRANS 1910 {} x",
            mensaje_error="X",
        )
        assert error.corregir("#TRANS 1910 {} 1") == "#TRANS 1910 {} 1\n#TRANS 1910 {} x"

    def test_corregir_no_modifica_el_original(self):
        error = ErrorRecuperable("a", "a b", "X")
        error.corregir("c")
        assert error.contenido_original == "a b"


class TestMetricasFinancieras:

    def test_totales(self):
        metricas = _metricas(
            "600",
            activos=(PartidaBalance("1910", "Kassa", Decimal("1000")),),
            pasivos=(PartidaBalance("2440", "Lev", Decimal("400")),),
            partidas_patrimonio=(PartidaBalance("2081", "AK", Decimal("600")),),
        )
        assert metricas.total_activos == Decimal("1000")
        assert metricas.total_pasivos == Decimal("400")
        assert metricas.total_pasivos_y_patrimonio == Decimal("1000")

    def test_resultado_ejercicio(self):
        metricas = _metricas(
            "0",
            partidas_patrimonio=(PartidaBalance(CUENTA_RESULTADO, "Årets resultat", Decimal("-50")),),
        )
        assert metricas.resultado_ejercicio == Decimal("-50")

    @pytest.mark.parametrize(
        "patrimonio, estado",
        [
            ("10000", "critico"),
            ("12500", "advertencia"),
            ("18749", "advertencia"),
            ("18750", "estable"),
            ("40000", "estable"),
        ],
    )
    def test_estado_capital(self, patrimonio, estado):
        assert _metricas(patrimonio).estado_capital == estado

    def test_capital_no_positivo_ratio_cero(self):
        metricas = _metricas("10000", capital_social="0")
        assert metricas.ratio_capital == Decimal("0")
        assert metricas.estado_capital == "critico"

    def test_es_inmutable(self):
        with pytest.raises(AttributeError):
            _metricas("0").nombre_empresa = "Otro"  # type: ignore
