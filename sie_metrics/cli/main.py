"""
Punto de entrada CLI: sie-metrics.

Uso:
    # Procesar una exportación y generar el Excel junto al archivo
    sie-metrics /ruta/bokforing.se

    # Indicar directorio de salida y codificación
    sie-metrics /ruta/bokforing.se -o /ruta/salida -e cp437

    # Corregir la línea que falló y reprocesar
    sie-metrics /ruta/bokforing.se --correct "#TRANS 1910 {} 1234.56"

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (SieFileReader, ConsoleLogger, ExcelWriter).
- Las inyecta en el SieProcessor.
- Ejecuta el procesamiento.

No contiene lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from sie_metrics.adapters.input.file_reader import ENCODING_POR_DEFECTO, SieFileReader
from sie_metrics.adapters.output.loggers.console_logger import ConsoleLogger
from sie_metrics.adapters.output.writers.excel_writer import ExcelWriter
from sie_metrics.domain.exceptions import SieBaseError
from sie_metrics.domain.models.resultado_parseo import ErrorRecuperable, ParseoExitoso
from sie_metrics.domain.services.sie_processor import SieProcessor
from sie_metrics.domain.shared.money import format_kronor


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else input_path.parent

    logger = ConsoleLogger()
    reader = SieFileReader(encoding=args.encoding)
    processor = SieProcessor(logger=logger)
    excel_writer = ExcelWriter()

    print("=" * 60)
    print("SIE METRICS")
    print("=" * 60)
    print(f"  Entrada:    {input_path}")
    print(f"  Salida:     {output_dir}")
    print(f"  Encoding:   {args.encoding}")
    print()

    if not input_path.is_file():
        print(f"❌ La ruta no existe o no es un archivo: {input_path}")
        sys.exit(1)

    try:
        contenido = reader.read(input_path)
    except SieBaseError as e:
        logger.log_file_skipped(input_path.name, str(e))
        logger.print_summary()
        sys.exit(1)

    logger.log_file_received(input_path.name, reader.encoding)
    procesamiento = processor.process_text(contenido, origen=input_path.name)

    resultado = procesamiento.resultado
    if isinstance(resultado, ErrorRecuperable) and args.correct:
        procesamiento = processor.resubmit(resultado, args.correct, origen=input_path.name)
        resultado = procesamiento.resultado

    if not isinstance(resultado, ParseoExitoso):
        if isinstance(resultado, ErrorRecuperable):
            print("\n✏️  Corrija la línea indicada y vuelva a ejecutar con --correct.")
        logger.print_summary()
        sys.exit(1)

    metricas = resultado.metricas
    print()
    print(f"  Empresa:            {metricas.nombre_empresa}")
    print(f"  Ejercicio:          {metricas.inicio_ejercicio} – {metricas.fin_ejercicio}")
    print(f"  Liquidez inicial:   {format_kronor(metricas.liquidez_inicial)}")
    print(f"  Liquidez total:     {format_kronor(metricas.liquidez_total)}")
    print(f"  Patrimonio total:   {format_kronor(metricas.patrimonio_total)}")
    print(f"  Capital social:     {format_kronor(metricas.capital_social)}")
    print(f"  Estado del capital: {metricas.estado_capital}")

    if not args.no_excel:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"metricas_{input_path.stem}.xlsx"
        try:
            ruta = excel_writer.write(metricas, list(procesamiento.problemas), output_file)
        except SieBaseError as e:
            print(f"\n❌ {e}")
            logger.print_summary()
            sys.exit(1)
        logger.log_output_written(str(ruta))

    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Convierte una exportación SIE4 en métricas financieras y las valida",
        epilog="Ejemplo: sie-metrics /ruta/bokforing.se -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo SIE (.se o .si)",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para el Excel generado. "
        "Si no se especifica, se usa el mismo directorio del archivo.",
    )

    parser.add_argument(
        "-e",
        "--encoding",
        default=ENCODING_POR_DEFECTO,
        help=f"Codificación del archivo (por defecto {ENCODING_POR_DEFECTO}).",
    )

    parser.add_argument(
        "--correct",
        metavar="LINEA",
        help="Línea corregida que sustituye a la línea #TRANS que no se pudo interpretar.",
    )

    parser.add_argument(
        "--no-excel",
        dest="no_excel",
        action="store_true",
        help="No generar el archivo Excel.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
