"""
Tests para sie_metrics.domain.shared.sie_date
"""

from datetime import date

import pytest

from sie_metrics.domain.shared.sie_date import parse_sie_date


class TestParseSieDate:

    def test_fecha_valida(self):
        assert parse_sie_date("20230115") == date(2023, 1, 15)

    def test_fin_de_año(self):
        assert parse_sie_date("20231231") == date(2023, 12, 31)

    def test_con_espacios(self):
        assert parse_sie_date(" 20240229 ") == date(2024, 2, 29)

    def test_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_sie_date("")

    @pytest.mark.parametrize("text", ["2023-01-15", "230115", "2023011", "fecha"])
    def test_formato_incorrecto_lanza_error(self, text):
        with pytest.raises(ValueError, match="YYYYMMDD"):
            parse_sie_date(text)

    def test_fecha_inexistente_lanza_error(self):
        with pytest.raises(ValueError, match="inexistente"):
            parse_sie_date("20230230")

