"""
Punto de entrada del dominio: parseo de una exportación SIE4.

    contenido (str)
        │
        ▼
    classify_lines ──► TagReducer ──► MetricsAggregator
                          │                 │
                          ├─ ErrorRecuperable
                          └─ ErrorFatal ◄───┘ (cualquier excepción)

parse_sie nunca lanza excepciones por el contenido del documento:
siempre devuelve uno de los tres casos de ResultadoParseo. Cada llamada
crea su propio acumulador y lo descarta al terminar.
"""

from sie_metrics.domain.models.resultado_parseo import (
    ErrorFatal,
    ErrorRecuperable,
    ParseoExitoso,
    ResultadoParseo,
)
from sie_metrics.domain.services.line_classifier import classify_lines
from sie_metrics.domain.services.metrics_aggregator import MetricsAggregator
from sie_metrics.domain.services.tag_reducer import TagReducer

MENSAJE_ERROR_INESPERADO = (
    "Ocurrió un error inesperado al interpretar el archivo. Puede estar dañado "
    "o tener un formato muy inesperado. Error: {error}"
)


def parse_sie(contenido: str) -> ResultadoParseo:
    """Parsea el texto completo de una exportación SIE4.

    Args:
        contenido: Texto ya decodificado (la codificación es responsabilidad
                   de quien llama).

    Returns:
        ParseoExitoso con las métricas, ErrorRecuperable con la línea a
        corregir, o ErrorFatal con el motivo.
    """
    try:
        resultado = TagReducer().reduce(classify_lines(contenido), contenido)
        if isinstance(resultado, (ErrorRecuperable, ErrorFatal)):
            return resultado

        return ParseoExitoso(metricas=MetricsAggregator().aggregate(resultado))
    except Exception as e:
        return ErrorFatal(MENSAJE_ERROR_INESPERADO.format(error=e))
