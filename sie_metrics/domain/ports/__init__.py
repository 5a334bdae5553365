"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.

Uso:
    from sie_metrics.domain.ports import OutputWriter, ProcessLogger
"""

from sie_metrics.domain.ports.output_writer import OutputWriter
from sie_metrics.domain.ports.process_logger import ProcessLogger

__all__ = [
    "OutputWriter",
    "ProcessLogger",
]
