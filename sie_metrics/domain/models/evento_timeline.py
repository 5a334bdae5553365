"""
Modelo de dominio: Evento de la línea de tiempo.

Se deriva de una verificación: cuánto movió el resultado del ejercicio
y cuánto movió la caja. No se construye a mano.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class EventoTimeline:
    """Efecto de una verificación sobre resultado y caja."""

    fecha: date

    descripcion: str

    cambio_resultado: Decimal
    """Menos la suma de transacciones en cuentas de resultado (>= 3000).
    Positivo = ganancia."""

    cambio_caja: Decimal
    """Suma de transacciones en cuentas de liquidez (prefijo 19)."""
