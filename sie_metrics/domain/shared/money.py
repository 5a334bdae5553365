"""
Utilidades para manejo de montos en exportaciones SIE.

Los montos de un SIE4 vienen como texto con punto decimal ("1234.50"),
pero muchos programas contables suecos escriben coma decimal ("-9525,00")
y algunos los encierran entre comillas. Esta es la ÚNICA función que
convierte esos tokens a número: si falla, el error es recuperable y la
línea ofensiva se le devuelve al usuario para que la corrija.

Reglas:
1. Siempre devuelve Decimal (los saldos se suman miles de veces).
2. Token vacío o ausente → Decimal("0").
3. Se normaliza UNA coma decimal a punto.
4. Más de un punto después de normalizar → error. Es la regla de
   ambigüedad para separadores de miles ("1.234.56") y no se relaja.
"""

from decimal import Decimal, InvalidOperation

from sie_metrics.domain.exceptions import AmountFormatError


def parse_amount(text: str | None) -> Decimal:
    """Convierte un token de monto SIE a Decimal.

    Args:
        text: Token tal como aparece en la directiva (puede traer comillas).

    Returns:
        Decimal con el valor exacto del monto.

    Raises:
        AmountFormatError: Si el token es ambiguo o no es numérico.
                           El mensaje incluye el token original.

    Ejemplos:
        >>> parse_amount("1000")
        Decimal('1000')
        >>> parse_amount("-9525,00")
        Decimal('-9525.00')
        >>> parse_amount("")
        Decimal('0')
    """
    if not text:
        return Decimal("0")

    sanitized = text.replace('"', "").strip().replace(",", ".", 1)
    if not sanitized:
        return Decimal("0")

    if sanitized.count(".") > 1:
        raise AmountFormatError(
            text,
            f"Formato numérico ambiguo con varios separadores decimales: '{text}'",
        )

    try:
        result = Decimal(sanitized)
    except InvalidOperation:
        raise AmountFormatError(text, f"No se pudo interpretar '{text}' como número")

    if not result.is_finite():
        raise AmountFormatError(text, f"No se pudo interpretar '{text}' como número")

    return result


def format_kronor(amount: Decimal) -> str:
    """Formatea un Decimal como monto en coronas suecas.

    Usa el formato sueco: espacio como separador de miles y coma decimal.

    Ejemplos:
        >>> format_kronor(Decimal("1234567.891"))
        '1 234 567,89 kr'
        >>> format_kronor(Decimal("-500"))
        '-500,00 kr'
    """
    amount = amount.quantize(Decimal("0.01"))
    texto = f"{abs(amount):,.2f}".replace(",", " ").replace(".", ",")
    if amount < 0:
        return f"-{texto} kr"
    return f"{texto} kr"
