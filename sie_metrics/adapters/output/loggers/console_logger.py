"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout
con un formato consistente y un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Desarrollo y debugging.
"""

from sie_metrics.domain.models.problema_logico import ProblemaLogico
from sie_metrics.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._archivos_procesados: int = 0
        self._archivos_descartados: int = 0
        self._errores_recuperables: int = 0
        self._errores_fatales: int = 0
        self._correcciones: int = 0
        self._problemas_logicos: int = 0
        self._errores: list[dict] = []

    # --- Entrada ---

    def log_file_received(self, origen: str, encoding: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {origen} ({encoding})")

    def log_file_skipped(self, origen: str, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {origen} — {reason}")

    # --- Parseo ---

    def log_parse_start(self, origen: str, num_lineas: int) -> None:
        print(f"  🔍 Interpretando {origen} ({num_lineas} líneas)")

    def log_parse_complete(self, origen: str, num_partidas: int, num_verificaciones: int) -> None:
        self._archivos_procesados += 1
        print(
            f"  ✅ Completado: {origen} — "
            f"{num_partidas} partidas de balance, {num_verificaciones} verificaciones"
        )

    def log_recoverable_error(self, origen: str, linea: str, mensaje: str) -> None:
        self._errores_recuperables += 1
        self._errores.append({"origen": origen, "error": mensaje})
        print(f"  ✏️  Línea a corregir en {origen}: {linea}")
        print(f"      {mensaje}")

    def log_fatal_error(self, origen: str, mensaje: str) -> None:
        self._errores_fatales += 1
        self._errores.append({"origen": origen, "error": mensaje})
        print(f"  ❌ Error: {origen} — {mensaje}")

    def log_correction_applied(self, origen: str, linea_original: str, linea_corregida: str) -> None:
        self._correcciones += 1
        print(f"  🔁 Corrección en {origen}: '{linea_original}' → '{linea_corregida}'")

    # --- Validación ---

    def log_logical_issue(self, origen: str, problema: ProblemaLogico) -> None:
        self._problemas_logicos += 1
        icono = "❌" if problema.es_error else "⚠️ "
        print(f"  {icono} [{problema.tipo}] {origen}: {problema.mensaje}")

    # --- Salida ---

    def log_output_written(self, ruta: str) -> None:
        print(f"  📁 Excel generado: {ruta}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_procesados": self._archivos_procesados,
            "archivos_descartados": self._archivos_descartados,
            "errores_recuperables": self._errores_recuperables,
            "errores_fatales": self._errores_fatales,
            "correcciones": self._correcciones,
            "problemas_logicos": self._problemas_logicos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:    {self._archivos_recibidos}")
        print(f"  Archivos procesados:   {self._archivos_procesados}")
        print(f"  Archivos descartados:  {self._archivos_descartados}")
        print(f"  Errores recuperables:  {self._errores_recuperables}")
        print(f"  Errores fatales:       {self._errores_fatales}")
        print(f"  Correcciones:          {self._correcciones}")
        print(f"  Problemas lógicos:     {self._problemas_logicos}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['origen']}: {err['error']}")

        print("=" * 60)
