"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar los EVENTOS de negocio del
procesamiento de una exportación SIE:
- "Se recibió un archivo"
- "Una línea de transacción no se pudo interpretar"
- "El balance no cuadra"

La implementación decide el CÓMO (consola, archivo, memoria en tests).
"""

from abc import ABC, abstractmethod

from sie_metrics.domain.models.problema_logico import ProblemaLogico


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_file_received(self, origen: str, encoding: str) -> None:
        """Registra que se recibió un archivo para procesar.

        Args:
            origen: Nombre del archivo (o etiqueta si el texto vino de memoria).
            encoding: Codificación con la que se decodificó.
        """
        ...

    @abstractmethod
    def log_file_skipped(self, origen: str, reason: str) -> None:
        """Registra que un archivo fue descartado (extensión no soportada, etc.)."""
        ...

    # --- Parseo ---

    @abstractmethod
    def log_parse_start(self, origen: str, num_lineas: int) -> None:
        ...

    @abstractmethod
    def log_parse_complete(self, origen: str, num_partidas: int, num_verificaciones: int) -> None:
        """Registra el fin exitoso del parseo.

        Args:
            origen: Documento procesado.
            num_partidas: Partidas de balance generadas (activos + pasivos + patrimonio),
                          incluida la línea del resultado del ejercicio.
            num_verificaciones: Verificaciones leídas.
        """
        ...

    @abstractmethod
    def log_recoverable_error(self, origen: str, linea: str, mensaje: str) -> None:
        """Registra un error recuperable: la línea que hay que corregir."""
        ...

    @abstractmethod
    def log_fatal_error(self, origen: str, mensaje: str) -> None:
        ...

    @abstractmethod
    def log_correction_applied(self, origen: str, linea_original: str, linea_corregida: str) -> None:
        """Registra que se sustituyó una línea y se reenvió el documento."""
        ...

    # --- Validación ---

    @abstractmethod
    def log_logical_issue(self, origen: str, problema: ProblemaLogico) -> None:
        ...

    # --- Salida ---

    @abstractmethod
    def log_output_written(self, ruta: str) -> None:
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'errores_recuperables': int,
                'errores_fatales': int,
                'correcciones': int,
                'problemas_logicos': int,
                'errores': List[dict],  # [{origen, error}]
            }
        """
        ...
