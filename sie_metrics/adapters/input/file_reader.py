"""
Adaptador de entrada: Lector de archivos SIE.

Es el único lugar donde se tocan bytes: lee el archivo y lo decodifica
con la codificación indicada. El dominio recibe siempre texto.

Los programas contables suecos suelen exportar SIE en ISO-8859-1
(o PC8/cp437). No se intenta detectar la codificación: se usa la que
se configure en el CLI.
"""

from pathlib import Path

from sie_metrics.domain.exceptions import ExtractionError, FormatoInvalidoError

EXTENSIONES_SIE = (".se", ".si")

ENCODING_POR_DEFECTO = "ISO-8859-1"


class SieFileReader:
    """Lee un archivo .se/.si y devuelve su texto decodificado."""

    def __init__(self, encoding: str = ENCODING_POR_DEFECTO) -> None:
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def can_handle(self, file_path: Path) -> bool:
        """True si la extensión es .se o .si (sin distinguir mayúsculas)."""
        return file_path.suffix.lower() in EXTENSIONES_SIE

    def read(self, file_path: Path) -> str:
        """Lee y decodifica el archivo.

        Raises:
            FormatoInvalidoError: Si la extensión no es .se/.si.
            ExtractionError: Si el archivo no se puede leer o decodificar.
        """
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "archivo SIE (.se o .si)",
                f"extensión '{file_path.suffix}' no soportada",
            )

        try:
            return file_path.read_bytes().decode(self._encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise ExtractionError(str(file_path), str(e))
