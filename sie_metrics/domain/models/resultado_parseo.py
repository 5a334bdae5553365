"""
Modelo de dominio: Resultado del parseo de una exportación SIE.

El parseo termina exactamente de una de tres formas:

    ResultadoParseo
    ├── ParseoExitoso      → métricas listas para validar y mostrar
    ├── ErrorRecuperable   → un monto de #TRANS no se pudo interpretar;
    │                        se corrige la línea y se vuelve a parsear
    └── ErrorFatal         → no se puede construir ningún modelo

Los consumidores distinguen los casos con isinstance(). No hay estado
parcial: un error nunca trae métricas.
"""

from dataclasses import dataclass
from typing import Union

from sie_metrics.domain.models.metricas_financieras import MetricasFinancieras


@dataclass(frozen=True)
class ParseoExitoso:
    """El documento completo se interpretó correctamente."""

    metricas: MetricasFinancieras


@dataclass(frozen=True)
class ErrorRecuperable:
    """Un monto de transacción no se pudo interpretar.

    Trae todo lo necesario para que un flujo de corrección externo
    sustituya la línea ofensiva y reenvíe el documento completo.
    """

    linea_problematica: str
    """La línea #TRANS exacta, tal como aparece en el documento."""

    contenido_original: str
    """El documento completo, sin modificar."""

    mensaje_error: str

    def corregir(self, linea_corregida: str) -> str:
        """Devuelve un documento nuevo con la línea problemática sustituida.

        Solo se reemplaza la PRIMERA aparición de la línea. El resultado
        debe parsearse desde cero; el parser nunca retoma a mitad de camino.
        """
        return self.contenido_original.replace(
            self.linea_problematica, linea_corregida, 1
        )


@dataclass(frozen=True)
class ErrorFatal:
    """El documento no produce ningún modelo utilizable."""

    mensaje: str


ResultadoParseo = Union[ParseoExitoso, ErrorRecuperable, ErrorFatal]
