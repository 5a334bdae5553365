"""
Tests del CLI: ensamblado completo sobre archivos temporales.
"""

import pytest

from sie_metrics.cli.main import _parse_args, main

DOCUMENTO = "\r\n".join(
    [
        '#FNAMN "Bolaget AB"',
        "#RAR 0 20230101 20231231",
        '#KONTO 1910 "Kassa"',
        '#KONTO 2081 "Aktiekapital"',
        '#KONTO 3010 "Försäljning"',
        "#IB 0 1910 25000",
        "#IB 0 2081 -25000",
        '#VER A 1 20230115 "Försäljning"',
        "{",
        "#TRANS 1910 {} 500",
        "#TRANS 3010 {} -500",
        "}",
    ]
)


def _escribir(tmp_path, contenido, nombre="bolaget.se"):
    archivo = tmp_path / nombre
    archivo.write_bytes(contenido.encode("iso-8859-1"))
    return archivo


class TestParseArgs:

    def test_valores_por_defecto(self):
        args = _parse_args(["bok.se"])
        assert args.input_path == "bok.se"
        assert args.output_dir is None
        assert args.encoding == "ISO-8859-1"
        assert args.correct is None
        assert args.no_excel is False

    def test_todas_las_opciones(self):
        args = _parse_args(
            ["bok.se", "-o", "salida", "-e", "cp437", "--correct", "#TRANS 1 {} 1", "--no-excel"]
        )
        assert args.output_dir == "salida"
        assert args.encoding == "cp437"
        assert args.correct == "#TRANS 1 {} 1"
        assert args.no_excel is True


class TestMain:

    def test_genera_excel_por_defecto(self, tmp_path, capsys):
        archivo = _escribir(tmp_path, DOCUMENTO)
        main([str(archivo)])

        assert (tmp_path / "metricas_bolaget.xlsx").exists()
        salida = capsys.readouterr().out
        assert "Bolaget AB" in salida
        assert "25 500,00 kr" in salida

    def test_directorio_de_salida(self, tmp_path):
        archivo = _escribir(tmp_path, DOCUMENTO)
        salida = tmp_path / "out"
        main([str(archivo), "-o", str(salida)])
        assert (salida / "metricas_bolaget.xlsx").exists()

    def test_sin_excel(self, tmp_path):
        archivo = _escribir(tmp_path, DOCUMENTO)
        main([str(archivo), "--no-excel"])
        assert not list(tmp_path.glob("*.xlsx"))

    def test_archivo_inexistente(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "no_existe.se")])
        assert exc.value.code == 1

    def test_extension_no_soportada(self, tmp_path, capsys):
        archivo = _escribir(tmp_path, DOCUMENTO, nombre="bolaget.txt")
        with pytest.raises(SystemExit) as exc:
            main([str(archivo)])
        assert exc.value.code == 1
        assert "Descartado" in capsys.readouterr().out

    def test_error_fatal_termina_con_codigo_1(self, tmp_path):
        archivo = _escribir(tmp_path, '#FNAMN "Tomt AB"')
        with pytest.raises(SystemExit) as exc:
            main([str(archivo), "--no-excel"])
        assert exc.value.code == 1

    def test_error_recuperable_sin_correccion(self, tmp_path, capsys):
        archivo = _escribir(tmp_path, DOCUMENTO.replace("{} 500", "{} 5.0.0"))
        with pytest.raises(SystemExit) as exc:
            main([str(archivo), "--no-excel"])
        assert exc.value.code == 1
        assert "--correct" in capsys.readouterr().out

    def test_error_recuperable_con_correccion(self, tmp_path, capsys):
        archivo = _escribir(tmp_path, DOCUMENTO.replace("{} 500", "{} 5.0.0"))
        main([str(archivo), "--no-excel", "--correct", "#TRANS 1910 {} 500"])

        salida = capsys.readouterr().out
        assert "Corrección" in salida
        assert "25 500,00 kr" in salida
