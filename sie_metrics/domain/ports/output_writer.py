"""
Puerto de salida: Escritor de resultados.

Define el contrato para persistir las métricas de una exportación SIE
y sus problemas lógicos en algún formato (Excel hoy; CSV o JSON
mañana) sin que el dominio conozca el formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from sie_metrics.domain.models.metricas_financieras import MetricasFinancieras
from sie_metrics.domain.models.problema_logico import ProblemaLogico


class OutputWriter(ABC):
    """Interfaz para escribir las métricas financieras."""

    @abstractmethod
    def write(
        self,
        metricas: MetricasFinancieras,
        problemas: list[ProblemaLogico],
        output_path: Path,
    ) -> Path:
        """Escribe métricas y problemas lógicos.

        Args:
            metricas: Resultado de un parseo exitoso.
            problemas: Problemas devueltos por el validador (puede estar vacía).
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...
