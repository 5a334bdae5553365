"""
Tests para el validador lógico.

Las métricas se construyen directamente para controlar los totales.
"""

from decimal import Decimal

import pytest

from sie_metrics.domain.models.metricas_financieras import MetricasFinancieras
from sie_metrics.domain.models.partida_balance import PartidaBalance
from sie_metrics.domain.models.verificacion import Transaccion, Verificacion
from sie_metrics.domain.services.logical_validator import validate_financial_metrics
from sie_metrics.domain.services.tag_reducer import ADVERTENCIA_SALDOS_DERIVADOS


def _metricas(
    activos: str = "0",
    pasivos: str = "0",
    patrimonio: str = "0",
    verificaciones: tuple[Verificacion, ...] = (),
    advertencias: tuple[str, ...] = (),
) -> MetricasFinancieras:
    return MetricasFinancieras(
        nombre_empresa="Bolaget AB",
        inicio_ejercicio="20230101",
        fin_ejercicio="20231231",
        capital_social=Decimal("25000"),
        patrimonio_total=Decimal(patrimonio),
        liquidez_total=Decimal("0"),
        liquidez_inicial=Decimal("0"),
        activos=(PartidaBalance("1910", "Kassa", Decimal(activos)),),
        pasivos=(PartidaBalance("2440", "Leverantörsskulder", Decimal(pasivos)),),
        partidas_patrimonio=(PartidaBalance("2081", "Aktiekapital", Decimal(patrimonio)),),
        eventos_timeline=(),
        verificaciones=verificaciones,
        advertencias=advertencias,
    )


def _verificacion(id_: str, *montos: str) -> Verificacion:
    return Verificacion(
        id=id_,
        fecha="20230115",
        descripcion=f"Verifikation {id_}",
        transacciones=tuple(Transaccion("1910", Decimal(m)) for m in montos),
    )


class TestBalance:

    def test_balance_cuadrado_sin_problemas(self):
        assert validate_financial_metrics(_metricas("1000", "400", "600")) == []

    @pytest.mark.parametrize("activos", ["1001", "999", "1000.99"])
    def test_diferencia_dentro_de_tolerancia(self, activos):
        assert validate_financial_metrics(_metricas(activos, "400", "600")) == []

    def test_descuadre_genera_un_error(self):
        problemas = validate_financial_metrics(_metricas("1000", "400", "500"))

        assert len(problemas) == 1
        problema = problemas[0]
        assert problema.tipo == "BalanceSheet"
        assert problema.severidad == "error"
        assert problema.detalles["total_activos"] == Decimal("1000")
        assert problema.detalles["total_pasivos_y_patrimonio"] == Decimal("900")
        assert problema.detalles["diferencia"] == Decimal("100")

    def test_diferencia_con_signo(self):
        problemas = validate_financial_metrics(_metricas("900", "400", "601.25"))
        assert problemas[0].detalles["diferencia"] == Decimal("-101.25")


class TestVerificaciones:

    def test_verificacion_cuadrada(self):
        metricas = _metricas(verificaciones=(_verificacion("A-1", "500", "-500"),))
        assert validate_financial_metrics(metricas) == []

    def test_descuadre_menor_a_tolerancia(self):
        metricas = _metricas(verificaciones=(_verificacion("A-1", "500", "-499.99"),))
        assert validate_financial_metrics(metricas) == []

    def test_descuadre_reporta_id_y_detalles(self):
        metricas = _metricas(verificaciones=(_verificacion("A-7", "500", "-400"),))
        problemas = validate_financial_metrics(metricas)

        assert len(problemas) == 1
        problema = problemas[0]
        assert problema.tipo == "Voucher"
        assert "A-7" in problema.mensaje
        assert problema.detalles == {
            "id_verificacion": "A-7",
            "descripcion": "Verifikation A-7",
            "descuadre": Decimal("100"),
            "num_transacciones": 2,
        }

    def test_reporta_todas_las_verificaciones_descuadradas(self):
        metricas = _metricas(
            verificaciones=(
                _verificacion("A-1", "1"),
                _verificacion("A-2", "5", "-5"),
                _verificacion("A-3", "-2"),
            )
        )
        ids = [p.detalles["id_verificacion"] for p in validate_financial_metrics(metricas)]
        assert ids == ["A-1", "A-3"]


class TestAmbiguedad:

    def test_advertencia_de_saldos_derivados(self):
        metricas = _metricas(advertencias=(ADVERTENCIA_SALDOS_DERIVADOS,))
        problemas = validate_financial_metrics(metricas)

        assert len(problemas) == 1
        assert problemas[0].tipo == "Ambiguity"
        assert problemas[0].severidad == "warning"
        assert problemas[0].es_error is False

    def test_otras_advertencias_no_cuentan(self):
        metricas = _metricas(advertencias=("Otra advertencia",))
        assert validate_financial_metrics(metricas) == []

    def test_una_sola_vez(self):
        metricas = _metricas(advertencias=(ADVERTENCIA_SALDOS_DERIVADOS, ADVERTENCIA_SALDOS_DERIVADOS))
        assert len(validate_financial_metrics(metricas)) == 1


class TestOrdenDeProblemas:

    def test_balance_verificaciones_ambiguedad(self):
        metricas = _metricas(
            "1000",
            "0",
            "0",
            verificaciones=(_verificacion("A-1", "10"),),
            advertencias=(ADVERTENCIA_SALDOS_DERIVADOS,),
        )
        tipos = [p.tipo for p in validate_financial_metrics(metricas)]
        assert tipos == ["BalanceSheet", "Voucher", "Ambiguity"]

    def test_no_modifica_las_metricas(self):
        metricas = _metricas("1000", "0", "0")
        validate_financial_metrics(metricas)
        assert validate_financial_metrics(metricas) == validate_financial_metrics(metricas)
