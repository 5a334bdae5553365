"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan
sobre tipos nativos de Python.

Uso:
    from sie_metrics.domain.shared.money import parse_amount, format_kronor
    from sie_metrics.domain.shared.sie_date import parse_sie_date
    from sie_metrics.domain.shared.text_cleaner import split_lines, strip_wrapping_quotes
"""
