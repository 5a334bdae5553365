"""
Modelo de dominio: Partida del balance.

Cada partida sale del saldo final de una cuenta. Las de pasivo y
patrimonio ya vienen con el signo invertido (convención de haber),
así que todas las partidas de un balance sano son positivas.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PartidaBalance:
    """Una línea de activos, pasivos o patrimonio."""

    numero_cuenta: str
    """Número de cuenta, o 'result' para la línea sintética del resultado."""

    nombre: str

    monto: Decimal
