"""
Tests para ConsoleLogger: contadores del resumen y salida por consola.
"""

import pytest

from sie_metrics.adapters.output.loggers.console_logger import ConsoleLogger
from sie_metrics.domain.models.problema_logico import ProblemaLogico


@pytest.fixture
def logger():
    return ConsoleLogger()


class TestConsoleLogger:

    def test_resumen_inicial_en_cero(self, logger):
        resumen = logger.get_summary()
        assert resumen["archivos_recibidos"] == 0
        assert resumen["errores"] == []

    def test_cuenta_eventos(self, logger):
        logger.log_file_received("a.se", "ISO-8859-1")
        logger.log_file_skipped("b.txt", "extensión no soportada")
        logger.log_parse_start("a.se", 10)
        logger.log_recoverable_error("a.se", "#TRANS 1910 {} x", "Error en línea de transacción")
        logger.log_correction_applied("a.se", "#TRANS 1910 {} x", "#TRANS 1910 {} 1")
        logger.log_parse_complete("a.se", 3, 1)
        logger.log_logical_issue("a.se", ProblemaLogico("Voucher", "error", "Descuadre"))

        resumen = logger.get_summary()
        assert resumen["archivos_recibidos"] == 1
        assert resumen["archivos_descartados"] == 1
        assert resumen["archivos_procesados"] == 1
        assert resumen["errores_recuperables"] == 1
        assert resumen["correcciones"] == 1
        assert resumen["problemas_logicos"] == 1
        assert resumen["errores_fatales"] == 0

    def test_errores_con_origen(self, logger):
        logger.log_fatal_error("a.se", "No se encontraron cuentas")
        assert logger.get_summary()["errores"] == [
            {"origen": "a.se", "error": "No se encontraron cuentas"}
        ]

    def test_imprime_problemas_con_tipo(self, logger, capsys):
        logger.log_logical_issue("a.se", ProblemaLogico("Ambiguity", "warning", "Saldos derivados"))
        salida = capsys.readouterr().out
        assert "[Ambiguity]" in salida
        assert "Saldos derivados" in salida

    def test_print_summary_lista_errores(self, logger, capsys):
        logger.log_fatal_error("a.se", "Archivo dañado")
        logger.print_summary()
        salida = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in salida
        assert "a.se: Archivo dañado" in salida

    def test_parse_complete_muestra_partidas(self, logger, capsys):
        logger.log_parse_complete("a.se", num_partidas=4, num_verificaciones=2)
        salida = capsys.readouterr().out
        assert "4 partidas de balance, 2 verificaciones" in salida
