"""
Servicio de dominio: Procesador de exportaciones SIE.

Orquesta el flujo completo sobre un texto ya decodificado:
1. Parsea el documento (parse_sie).
2. Si el parseo fue exitoso, ejecuta SIEMPRE el validador lógico.
3. Registra cada evento en la bitácora (ProcessLogger).

También implementa el reenvío tras una corrección: la línea problemática
de un ErrorRecuperable se sustituye en el documento original y el
documento completo se vuelve a procesar desde cero.

No lee archivos ni imprime: eso lo hacen los adaptadores y el CLI.
"""

from dataclasses import dataclass

from sie_metrics.domain.models.problema_logico import ProblemaLogico
from sie_metrics.domain.models.resultado_parseo import (
    ErrorFatal,
    ErrorRecuperable,
    ParseoExitoso,
    ResultadoParseo,
)
from sie_metrics.domain.ports.process_logger import ProcessLogger
from sie_metrics.domain.services.logical_validator import validate_financial_metrics
from sie_metrics.domain.services.sie_parser import parse_sie
from sie_metrics.domain.shared.text_cleaner import split_lines


@dataclass(frozen=True)
class ResultadoProcesamiento:
    """Resultado del parseo más los problemas lógicos (si hubo métricas)."""

    resultado: ResultadoParseo

    problemas: tuple[ProblemaLogico, ...] = ()
    """Siempre vacía cuando el parseo falló."""

    @property
    def exitoso(self) -> bool:
        return isinstance(self.resultado, ParseoExitoso)

    @property
    def tiene_errores_logicos(self) -> bool:
        return any(p.es_error for p in self.problemas)


class SieProcessor:
    """Procesa el texto de una exportación SIE y produce un ResultadoProcesamiento.

    Recibe la bitácora por constructor (Dependency Injection).
    """

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def process_text(self, contenido: str, origen: str = "<memoria>") -> ResultadoProcesamiento:
        """Parsea y valida un documento completo.

        Args:
            contenido: Texto decodificado de la exportación.
            origen: Nombre del archivo o etiqueta, solo para la bitácora.
        """
        self._logger.log_parse_start(origen, len(split_lines(contenido)))
        resultado = parse_sie(contenido)

        if isinstance(resultado, ErrorRecuperable):
            self._logger.log_recoverable_error(
                origen, resultado.linea_problematica, resultado.mensaje_error
            )
            return ResultadoProcesamiento(resultado=resultado)

        if isinstance(resultado, ErrorFatal):
            self._logger.log_fatal_error(origen, resultado.mensaje)
            return ResultadoProcesamiento(resultado=resultado)

        metricas = resultado.metricas
        self._logger.log_parse_complete(
            origen,
            len(metricas.activos) + len(metricas.pasivos) + len(metricas.partidas_patrimonio),
            len(metricas.verificaciones),
        )

        problemas = validate_financial_metrics(metricas)
        for problema in problemas:
            self._logger.log_logical_issue(origen, problema)

        return ResultadoProcesamiento(resultado=resultado, problemas=tuple(problemas))

    def resubmit(
        self,
        error: ErrorRecuperable,
        linea_corregida: str,
        origen: str = "<memoria>",
    ) -> ResultadoProcesamiento:
        """Sustituye la línea problemática y procesa el documento de nuevo.

        El parser nunca retoma a mitad de documento: esto es una llamada
        completamente nueva sobre el texto corregido.
        """
        self._logger.log_correction_applied(origen, error.linea_problematica, linea_corregida)
        return self.process_text(error.corregir(linea_corregida), origen)
