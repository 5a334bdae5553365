"""
Modelo de dominio: Métricas financieras de una exportación SIE.

Este es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE el agregador de métricas al final de un parseo exitoso.
- Lo CONSUME el validador lógico.
- Lo CONSUME el OutputWriter (Excel) y la bitácora.

Se produce una sola vez por parseo y es inmutable: todas las
secuencias son tuplas.
"""

from dataclasses import dataclass
from decimal import Decimal

from sie_metrics.domain.models.evento_timeline import EventoTimeline
from sie_metrics.domain.models.partida_balance import PartidaBalance
from sie_metrics.domain.models.verificacion import Verificacion

CUENTA_RESULTADO = "result"
"""Clave de la partida sintética 'Årets resultat' en el patrimonio."""


@dataclass(frozen=True)
class MetricasFinancieras:
    """Modelo financiero completo derivado de una exportación SIE."""

    nombre_empresa: str

    inicio_ejercicio: str
    """Inicio del ejercicio (YYYYMMDD). Vacío si no hubo '#RAR 0'."""

    fin_ejercicio: str

    capital_social: Decimal

    patrimonio_total: Decimal
    """Suma de partidas_patrimonio, incluida la línea del resultado."""

    liquidez_total: Decimal
    """Suma de saldos finales de cuentas 19xx."""

    liquidez_inicial: Decimal
    """Suma de saldos iniciales de cuentas 19xx."""

    activos: tuple[PartidaBalance, ...]

    pasivos: tuple[PartidaBalance, ...]

    partidas_patrimonio: tuple[PartidaBalance, ...]

    eventos_timeline: tuple[EventoTimeline, ...]
    """Ordenados por fecha."""

    verificaciones: tuple[Verificacion, ...]
    """Ordenadas por id (orden lexicográfico)."""

    advertencias: tuple[str, ...] = ()
    """Advertencias en texto libre generadas durante el parseo."""

    # --- Totales derivados ---

    @property
    def total_activos(self) -> Decimal:
        return sum((p.monto for p in self.activos), Decimal("0"))

    @property
    def total_pasivos(self) -> Decimal:
        return sum((p.monto for p in self.pasivos), Decimal("0"))

    @property
    def total_pasivos_y_patrimonio(self) -> Decimal:
        return self.total_pasivos + sum(
            (p.monto for p in self.partidas_patrimonio), Decimal("0")
        )

    @property
    def resultado_ejercicio(self) -> Decimal:
        """Monto de la línea 'Årets resultat', 0 si no existe."""
        for partida in self.partidas_patrimonio:
            if partida.numero_cuenta == CUENTA_RESULTADO:
                return partida.monto
        return Decimal("0")

    # --- Salud del patrimonio ---

    @property
    def ratio_capital(self) -> Decimal:
        """Patrimonio total / capital social. 0 si el capital no es positivo."""
        if self.capital_social <= 0:
            return Decimal("0")
        return self.patrimonio_total / self.capital_social

    @property
    def estado_capital(self) -> str:
        """Clasifica el ratio de capital.

        - 'critico':     menos de la mitad del capital social.
        - 'advertencia': menos del 75% del capital social.
        - 'estable':     el resto.
        """
        ratio = self.ratio_capital
        if ratio < Decimal("0.5"):
            return "critico"
        if ratio < Decimal("0.75"):
            return "advertencia"
        return "estable"
