"""
Utilidades de limpieza de texto.

Funciones sin lógica de negocio (no saben de cuentas ni montos) que
preparan el texto de una exportación SIE antes de clasificar líneas.
"""

import re

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Divide el texto en líneas aceptando saltos CRLF y LF.

    Un \\r suelto NO se considera salto de línea.

    Ejemplos:
        >>> split_lines("#FNAMN x\\r\\n#RAR 0 a b")
        ['#FNAMN x', '#RAR 0 a b']
    """
    return _LINE_BREAK.split(text)


def strip_wrapping_quotes(value: str) -> str:
    """Quita espacios, una comilla inicial y una comilla final.

    Las comillas se tratan de forma independiente: '1910 "Kassa"' pierde
    solo la comilla final, lo cual basta para los patrones de KONTO y VER.

    Ejemplos:
        >>> strip_wrapping_quotes('"Bolaget AB"')
        'Bolaget AB'
        >>> strip_wrapping_quotes('  0 20230101 20231231 ')
        '0 20230101 20231231'
    """
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value.strip()

