"""
Modelo de dominio: Cuenta del plan contable (#KONTO).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cuenta:
    """Una cuenta del registro de la exportación."""

    numero: str
    """Número de cuenta. Se guarda como string porque la clasificación
    (activo, pasivo, patrimonio) se hace por sus dígitos iniciales."""

    nombre: str
    """Nombre de la cuenta tal como aparece en el SIE (ej: 'Kassa')."""
