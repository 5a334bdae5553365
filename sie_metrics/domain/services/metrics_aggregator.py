"""
Servicio de dominio: Agregador de métricas financieras.

Convierte el AcumuladorSie de un parseo exitoso en MetricasFinancieras:

1. Saldo final = saldo inicial + cambio del periodo, para cada cuenta conocida.
2. Clasificación por dígitos iniciales (plan de cuentas BAS):
   - 1xxx → activo. 19xx además suma a la liquidez.
   - 20xx → patrimonio, con signo invertido (haber).
   - 2xxx → pasivo, con signo invertido.
   - >= 3000 → resultado del ejercicio (se acumula, no es partida propia).
3. El resultado acumulado, invertido, se agrega como 'Årets resultat'.
4. Capital social, patrimonio total y liquidez inicial.
5. Línea de tiempo: efecto de cada verificación sobre resultado y caja.
6. Orden lexicográfico de partidas y verificaciones por su clave.
"""

import re
from decimal import Decimal

from sie_metrics.domain.models.evento_timeline import EventoTimeline
from sie_metrics.domain.models.metricas_financieras import (
    CUENTA_RESULTADO,
    MetricasFinancieras,
)
from sie_metrics.domain.models.partida_balance import PartidaBalance
from sie_metrics.domain.models.verificacion import Verificacion
from sie_metrics.domain.services.tag_reducer import AcumuladorSie
from sie_metrics.domain.shared.sie_date import parse_sie_date

_LEADING_DIGITS = re.compile(r"\d+")


def _valor_numerico(numero_cuenta: str) -> int | None:
    """Valor de los dígitos iniciales del número de cuenta, o None."""
    match = _LEADING_DIGITS.match(numero_cuenta)
    return int(match.group()) if match else None


def es_cuenta_resultado(numero_cuenta: str) -> bool:
    """True si la cuenta pertenece al estado de resultados (>= 3000)."""
    valor = _valor_numerico(numero_cuenta)
    return valor is not None and valor >= MetricsAggregator.INICIO_CUENTAS_RESULTADO


def es_cuenta_liquidez(numero_cuenta: str) -> bool:
    """True si la cuenta es de caja/banco (prefijo 19)."""
    return numero_cuenta.startswith("19")


class MetricsAggregator:
    """Construye MetricasFinancieras a partir de un AcumuladorSie."""

    UMBRAL_RUIDO: Decimal = Decimal("0.01")
    """Partidas con |monto| menor a esto no se listan en el balance."""

    INICIO_CUENTAS_RESULTADO: int = 3000

    CUENTA_CAPITAL_SOCIAL: str = "2081"

    CAPITAL_SOCIAL_POR_DEFECTO: Decimal = Decimal("25000")
    """Se usa cuando la cuenta 2081 no tiene saldo inicial."""

    NOMBRE_RESULTADO: str = "Årets resultat"

    def aggregate(self, acumulador: AcumuladorSie) -> MetricasFinancieras:
        """Calcula las métricas. El acumulador no se modifica."""
        saldos_finales = self._calcular_saldos_finales(acumulador)

        activos: list[PartidaBalance] = []
        pasivos: list[PartidaBalance] = []
        patrimonio: list[PartidaBalance] = []
        resultado = Decimal("0")
        liquidez_total = Decimal("0")

        for numero, saldo in saldos_finales.items():
            categoria = self._clasificar(numero)
            if categoria == "activo" and es_cuenta_liquidez(numero):
                liquidez_total += saldo
            elif categoria == "resultado":
                resultado += saldo
                continue

            if categoria is None or abs(saldo) < self.UMBRAL_RUIDO:
                continue

            nombre = self._nombre_cuenta(acumulador, numero)
            if categoria == "activo":
                activos.append(PartidaBalance(numero, nombre, saldo))
            elif categoria == "patrimonio":
                patrimonio.append(PartidaBalance(numero, nombre, -saldo))
            else:
                pasivos.append(PartidaBalance(numero, nombre, -saldo))

        resultado_final = -resultado
        if abs(resultado_final) > self.UMBRAL_RUIDO:
            patrimonio.append(
                PartidaBalance(CUENTA_RESULTADO, self.NOMBRE_RESULTADO, resultado_final)
            )

        capital_social_ib = acumulador.saldos_iniciales.get(
            self.CUENTA_CAPITAL_SOCIAL, Decimal("0")
        )
        capital_social = abs(capital_social_ib) or self.CAPITAL_SOCIAL_POR_DEFECTO

        liquidez_inicial = sum(
            (saldo for numero, saldo in acumulador.saldos_iniciales.items()
             if es_cuenta_liquidez(numero)),
            Decimal("0"),
        )

        verificaciones = [v.congelar() for v in acumulador.verificaciones]

        return MetricasFinancieras(
            nombre_empresa=acumulador.nombre_empresa,
            inicio_ejercicio=acumulador.inicio_ejercicio,
            fin_ejercicio=acumulador.fin_ejercicio,
            capital_social=capital_social,
            patrimonio_total=sum((p.monto for p in patrimonio), Decimal("0")),
            liquidez_total=liquidez_total,
            liquidez_inicial=liquidez_inicial,
            activos=self._ordenar_partidas(activos),
            pasivos=self._ordenar_partidas(pasivos),
            partidas_patrimonio=self._ordenar_partidas(patrimonio),
            eventos_timeline=self._construir_timeline(verificaciones),
            verificaciones=tuple(sorted(verificaciones, key=lambda v: v.id)),
            advertencias=tuple(acumulador.advertencias),
        )

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _clasificar(numero: str) -> str | None:
        """Devuelve activo, patrimonio, pasivo, resultado o None (cuenta inerte)."""
        if numero.startswith("1"):
            return "activo"
        if numero.startswith("20"):
            return "patrimonio"
        if numero.startswith("2"):
            return "pasivo"
        if es_cuenta_resultado(numero):
            return "resultado"
        return None

    @staticmethod
    def _calcular_saldos_finales(acumulador: AcumuladorSie) -> dict[str, Decimal]:
        """saldo_final = saldo_inicial + cambio_periodo, para toda cuenta conocida."""
        return {
            numero: acumulador.saldos_iniciales.get(numero, Decimal("0"))
            + acumulador.cambios_periodo.get(numero, Decimal("0"))
            for numero in acumulador.cuentas_conocidas
        }

    @staticmethod
    def _nombre_cuenta(acumulador: AcumuladorSie, numero: str) -> str:
        cuenta = acumulador.cuentas.get(numero)
        return cuenta.nombre if cuenta is not None else f"Konto {numero}"

    @staticmethod
    def _ordenar_partidas(partidas: list[PartidaBalance]) -> tuple[PartidaBalance, ...]:
        # Orden lexicográfico del número de cuenta como string, no numérico.
        return tuple(sorted(partidas, key=lambda p: p.numero_cuenta))

    def _construir_timeline(
        self, verificaciones: list[Verificacion]
    ) -> tuple[EventoTimeline, ...]:
        """Un evento por verificación con efecto en resultado o caja."""
        eventos: list[EventoTimeline] = []

        for verificacion in sorted(verificaciones, key=lambda v: v.fecha):
            cambio_resultado = Decimal("0")
            cambio_caja = Decimal("0")
            for transaccion in verificacion.transacciones:
                if es_cuenta_resultado(transaccion.numero_cuenta):
                    cambio_resultado -= transaccion.monto
                if es_cuenta_liquidez(transaccion.numero_cuenta):
                    cambio_caja += transaccion.monto

            if abs(cambio_resultado) < self.UMBRAL_RUIDO and abs(cambio_caja) < self.UMBRAL_RUIDO:
                continue

            eventos.append(
                EventoTimeline(
                    fecha=parse_sie_date(verificacion.fecha),
                    descripcion=verificacion.descripcion,
                    cambio_resultado=cambio_resultado,
                    cambio_caja=cambio_caja,
                )
            )

        return tuple(eventos)
