"""
Excepciones de dominio del proyecto sie-metrics.

Jerarquía:
    SieBaseError
    ├── FormatoInvalidoError   → El archivo no tiene la extensión/formato esperado
    ├── ExtractionError        → Error al leer o decodificar el archivo
    ├── AmountFormatError      → Un monto de la exportación no se puede interpretar
    └── OutputError            → Error al generar el archivo de salida

Los errores de parseo del contenido SIE (recuperables o fatales) NO salen
como excepciones de parse_sie: se devuelven como valores de ResultadoParseo.
AmountFormatError solo viaja dentro del dominio hasta que el reductor de
tags la convierte en un ErrorRecuperable.
"""


class SieBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class FormatoInvalidoError(SieBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un .se/.si pero el archivo es un .xlsx.
    - La ruta apunta a un directorio.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(SieBaseError):
    """Se lanza cuando falla la lectura del archivo SIE.

    Esto puede pasar porque:
    - El archivo no existe o no hay permisos de lectura.
    - La codificación indicada no corresponde a los bytes del archivo.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class AmountFormatError(SieBaseError, ValueError):
    """Se lanza cuando un token de monto no se puede convertir a Decimal.

    Hereda también de ValueError para que el código que solo espera
    errores de conversión numérica la siga capturando.
    """

    def __init__(self, token: str, causa: str):
        self.token = token
        self.causa = causa
        super().__init__(causa)


class OutputError(SieBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
