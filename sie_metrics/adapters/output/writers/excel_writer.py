"""
Adaptador de salida: Escritor de Excel.

Genera un libro con el modelo financiero de una exportación SIE:
- Hoja "Resumen":        cifras clave (liquidez, patrimonio, capital social).
- Hoja "Balance":        activos, pasivos y patrimonio, una fila por partida.
- Hoja "Verificaciones": una fila por transacción de cada verificación.
- Hoja "Timeline":       efecto de cada verificación en resultado y caja.
- Hoja "Problemas":      problemas lógicos del validador.
"""

from pathlib import Path

import pandas as pd

from sie_metrics.domain.exceptions import OutputError
from sie_metrics.domain.models.metricas_financieras import MetricasFinancieras
from sie_metrics.domain.models.problema_logico import ProblemaLogico
from sie_metrics.domain.ports.output_writer import OutputWriter

COLUMNAS_PROBLEMAS = ["Tipo", "Severidad", "Mensaje", "Detalles"]


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(
        self,
        metricas: MetricasFinancieras,
        problemas: list[ProblemaLogico],
        output_path: Path,
    ) -> Path:
        """Escribe métricas y problemas a Excel.

        Args:
            metricas: Métricas de un parseo exitoso.
            problemas: Problemas lógicos (puede estar vacía).
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(self.build_frames(metricas, problemas), output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def build_frames(
        self, metricas: MetricasFinancieras, problemas: list[ProblemaLogico]
    ) -> dict[str, pd.DataFrame]:
        """Construye un DataFrame por hoja, en el orden en que se escriben."""
        return {
            "Resumen": self._hoja_resumen(metricas),
            "Balance": self._hoja_balance(metricas),
            "Verificaciones": self._hoja_verificaciones(metricas),
            "Timeline": self._hoja_timeline(metricas),
            "Problemas": self._hoja_problemas(problemas),
        }

    # =================================================================
    # MÉTODOS PRIVADOS: Construcción de hojas
    # =================================================================

    @staticmethod
    def _hoja_resumen(metricas: MetricasFinancieras) -> pd.DataFrame:
        filas = [
            ("Empresa", metricas.nombre_empresa),
            ("Inicio ejercicio", metricas.inicio_ejercicio),
            ("Fin ejercicio", metricas.fin_ejercicio),
            ("Capital social", float(metricas.capital_social)),
            ("Patrimonio total", float(metricas.patrimonio_total)),
            ("Resultado del ejercicio", float(metricas.resultado_ejercicio)),
            ("Estado del capital", metricas.estado_capital),
            ("Liquidez inicial", float(metricas.liquidez_inicial)),
            ("Liquidez total", float(metricas.liquidez_total)),
            ("Total activos", float(metricas.total_activos)),
            ("Total pasivos y patrimonio", float(metricas.total_pasivos_y_patrimonio)),
        ]
        filas.extend(("Advertencia", advertencia) for advertencia in metricas.advertencias)
        return pd.DataFrame(filas, columns=["Concepto", "Valor"])

    @staticmethod
    def _hoja_balance(metricas: MetricasFinancieras) -> pd.DataFrame:
        secciones = [
            ("Activos", metricas.activos),
            ("Pasivos", metricas.pasivos),
            ("Patrimonio", metricas.partidas_patrimonio),
        ]
        filas = [
            {
                "Sección": seccion,
                "Cuenta": partida.numero_cuenta,
                "Nombre": partida.nombre,
                "Monto": float(partida.monto),
            }
            for seccion, partidas in secciones
            for partida in partidas
        ]
        return pd.DataFrame(filas, columns=["Sección", "Cuenta", "Nombre", "Monto"])

    @staticmethod
    def _hoja_verificaciones(metricas: MetricasFinancieras) -> pd.DataFrame:
        filas = [
            {
                "Verificación": verificacion.id,
                "Fecha": verificacion.fecha,
                "Descripción": verificacion.descripcion,
                "Cuenta": transaccion.numero_cuenta,
                "Monto": float(transaccion.monto),
            }
            for verificacion in metricas.verificaciones
            for transaccion in verificacion.transacciones
        ]
        return pd.DataFrame(
            filas, columns=["Verificación", "Fecha", "Descripción", "Cuenta", "Monto"]
        )

    @staticmethod
    def _hoja_timeline(metricas: MetricasFinancieras) -> pd.DataFrame:
        filas = [
            {
                "Fecha": evento.fecha.strftime("%Y-%m-%d"),
                "Descripción": evento.descripcion,
                "Cambio resultado": float(evento.cambio_resultado),
                "Cambio caja": float(evento.cambio_caja),
            }
            for evento in metricas.eventos_timeline
        ]
        return pd.DataFrame(
            filas, columns=["Fecha", "Descripción", "Cambio resultado", "Cambio caja"]
        )

    @staticmethod
    def _hoja_problemas(problemas: list[ProblemaLogico]) -> pd.DataFrame:
        filas = [
            {
                "Tipo": problema.tipo,
                "Severidad": problema.severidad,
                "Mensaje": problema.mensaje,
                "Detalles": _formatear_detalles(problema.detalles),
            }
            for problema in problemas
        ]
        return pd.DataFrame(filas, columns=COLUMNAS_PROBLEMAS)

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    @staticmethod
    def _escribir_excel(hojas: dict[str, pd.DataFrame], output_path: Path) -> None:
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            for nombre, df in hojas.items():
                df.to_excel(writer, index=False, sheet_name=nombre)

            workbook = writer.book
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_resumen = writer.sheets["Resumen"]
            ws_resumen.set_column("A:A", 28)  # Concepto
            ws_resumen.set_column("B:B", 40)  # Valor

            ws_balance = writer.sheets["Balance"]
            ws_balance.set_column("A:A", 12)  # Sección
            ws_balance.set_column("B:B", 10, text_format)  # Cuenta
            ws_balance.set_column("C:C", 40)  # Nombre
            ws_balance.set_column("D:D", 16, money_format)  # Monto

            ws_verificaciones = writer.sheets["Verificaciones"]
            ws_verificaciones.set_column("A:A", 12, text_format)  # Verificación
            ws_verificaciones.set_column("B:B", 10, text_format)  # Fecha
            ws_verificaciones.set_column("C:C", 45)  # Descripción
            ws_verificaciones.set_column("D:D", 10, text_format)  # Cuenta
            ws_verificaciones.set_column("E:E", 16, money_format)  # Monto

            ws_timeline = writer.sheets["Timeline"]
            ws_timeline.set_column("A:A", 12)  # Fecha
            ws_timeline.set_column("B:B", 45)  # Descripción
            ws_timeline.set_column("C:D", 18, money_format)  # Cambios

            ws_problemas = writer.sheets["Problemas"]
            ws_problemas.set_column("A:B", 14)  # Tipo / Severidad
            ws_problemas.set_column("C:C", 50)  # Mensaje
            ws_problemas.set_column("D:D", 80)  # Detalles


def _formatear_detalles(detalles: dict | str | None) -> str:
    """Aplana los detalles de un problema a una sola celda de texto."""
    if detalles is None:
        return ""
    if isinstance(detalles, str):
        return detalles
    return "; ".join(f"{clave}={valor}" for clave, valor in detalles.items())
