"""
Modelo de dominio: Problema lógico detectado por el validador.

Los problemas lógicos NO son fallos: el parseo fue exitoso y las
métricas existen, pero algo no cuadra (balance descuadrado, asiento
que no suma cero) o es ambiguo. Se devuelven como datos.
"""

from dataclasses import dataclass
from typing import Any

TIPOS_PROBLEMA = ("BalanceSheet", "Voucher", "Date", "Ambiguity")
"""'Date' está reservado: ninguna verificación actual lo produce."""

SEVERIDADES = ("error", "warning")


@dataclass(frozen=True)
class ProblemaLogico:
    """Un problema de consistencia en las métricas financieras."""

    tipo: str
    """Uno de TIPOS_PROBLEMA."""

    severidad: str
    """'error' o 'warning'."""

    mensaje: str

    detalles: dict[str, Any] | str | None = None
    """Datos estructurados del problema (totales, id de verificación...)."""

    @property
    def es_error(self) -> bool:
        return self.severidad == "error"

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.tipo not in TIPOS_PROBLEMA:
            raise ValueError(
                f"Tipo de problema no reconocido: '{self.tipo}'. "
                f"Esperado: {', '.join(TIPOS_PROBLEMA)}"
            )
        if self.severidad not in SEVERIDADES:
            raise ValueError(
                f"Severidad no reconocida: '{self.severidad}'. Esperado: error o warning"
            )
