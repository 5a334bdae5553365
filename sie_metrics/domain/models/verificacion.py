"""
Modelo de dominio: Verificación (asiento contable) y sus transacciones.

Una verificación es un encabezado (#VER) más las líneas #TRANS que lo
siguen. Mientras se lee la exportación, la verificación abierta se va
llenando en el acumulador; al terminar se congela en este modelo, con
las transacciones como tupla para que nadie pueda agregarle líneas.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Transaccion:
    """Una línea de una verificación: cuenta + monto con signo."""

    numero_cuenta: str
    monto: Decimal
    """Positivo = debe, negativo = haber (convención SIE)."""


@dataclass(frozen=True)
class Verificacion:
    """Un asiento contable completo."""

    id: str
    """Identificador compuesto 'serie-numero' (ej: 'A-1')."""

    fecha: str
    """Fecha YYYYMMDD tal como viene en el SIE. Texto para poder ordenar
    sin convertir."""

    descripcion: str

    transacciones: tuple[Transaccion, ...] = ()

    @property
    def suma(self) -> Decimal:
        """Suma de todas las transacciones. Debería ser 0 si cuadra."""
        return sum((t.monto for t in self.transacciones), Decimal("0"))

    @property
    def num_transacciones(self) -> int:
        return len(self.transacciones)
