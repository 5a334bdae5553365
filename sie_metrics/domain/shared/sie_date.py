"""
Conversión de fechas SIE.

En SIE4 todas las fechas se escriben como 8 dígitos YYYYMMDD
(ej: "20230115"). Las verificaciones guardan la fecha como texto
para poder ordenarlas directamente; solo la línea de tiempo
necesita un objeto date.
"""

import re
from datetime import date

_SIE_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")


def parse_sie_date(date_text: str) -> date:
    """Parsea una fecha SIE YYYYMMDD a un objeto date.

    Raises:
        ValueError: Si el texto no tiene 8 dígitos o la fecha no existe.

    Ejemplos:
        >>> parse_sie_date("20230115")
        datetime.date(2023, 1, 15)
    """
    text = date_text.strip()
    if not text:
        raise ValueError("El texto de fecha está vacío")

    match = _SIE_DATE.match(text)
    if not match:
        raise ValueError(f"Fecha SIE inválida: '{date_text}'. Se esperaba YYYYMMDD")

    año, mes, dia = (int(g) for g in match.groups())
    try:
        return date(año, mes, dia)
    except ValueError as e:
        raise ValueError(f"Fecha SIE inexistente: '{date_text}' ({e})")

