"""
Servicio de dominio: Clasificador de líneas SIE.

Convierte el texto decodificado en una secuencia ordenada de directivas
(tag, valor). Todo lo que no sea una directiva bien formada se ignora
sin error: comentarios, líneas vacías, secciones no soportadas y tags
desconocidos siguen su camino hasta el reductor, que decide.

Una directiva es una línea que empieza con '#', seguida de una palabra
(el tag) y al menos un espacio:

    #KONTO 1910 "Kassa"      → tag='KONTO', valor='1910 "Kassa'
    #FNAMN "Bolaget AB"      → tag='FNAMN', valor='Bolaget AB'
    #FLAGGA                  → ignorada (sin valor)
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from sie_metrics.domain.shared.text_cleaner import split_lines, strip_wrapping_quotes

_DIRECTIVE = re.compile(r"^#(\w+)\s+(.*)", re.ASCII)


@dataclass(frozen=True)
class LineaDirectiva:
    """Una línea de directiva ya separada en tag y valor."""

    linea: str
    """La línea original, sin tocar. Se usa para reportar errores
    recuperables y para sustituirla en el documento al corregir."""

    tag: str

    valor: str
    """Resto de la línea, sin espacios ni comillas envolventes."""


def classify_line(linea: str) -> LineaDirectiva | None:
    """Clasifica una sola línea. Devuelve None si no es directiva."""
    if not linea.startswith("#"):
        return None

    match = _DIRECTIVE.match(linea)
    if not match:
        return None

    tag, raw_value = match.groups()
    return LineaDirectiva(linea=linea, tag=tag, valor=strip_wrapping_quotes(raw_value))


def classify_lines(contenido: str) -> Iterator[LineaDirectiva]:
    """Recorre el documento y produce sus directivas en orden."""
    for linea in split_lines(contenido):
        directiva = classify_line(linea)
        if directiva is not None:
            yield directiva
