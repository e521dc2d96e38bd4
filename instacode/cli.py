#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

from .core.config import TranslatorConfig
from .translator import convert_file
from .utils import term
from .utils.syntax import check_braces, format_errors


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='instacode',
                                     description='Traduce instrucciones en español a un programa C++')
    parser.add_argument('input', help='Archivo .txt con las instrucciones')
    parser.add_argument('-d', '--data', help='Archivo de datos que leen las instrucciones (por ejemplo datos.txt)')
    parser.add_argument('-o', '--output', help='Archivo .cpp de salida. Si se omite, el código se imprime')
    parser.add_argument('--minimal', action='store_true', help='Salida de consola compacta, sin colores')
    parser.add_argument('--strict', action='store_true', help='Las advertencias también hacen fallar la traducción')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    if args.minimal:
        term.MINIMAL = True

    config = TranslatorConfig.from_env()
    config.verbose = args.verbose
    if args.strict:
        config.strict = True

    input_path = Path(args.input)
    if not input_path.exists():
        term.print_error(f"No se encontró el archivo: {input_path}")
        return 2
    if args.data and not Path(args.data).exists():
        term.print_error(f"No se encontró el archivo de datos: {args.data}")
        return 2

    term.print_stage(1, 3, f"Leyendo {input_path.name}")
    try:
        result = convert_file(str(input_path), args.data, config)
    except (OSError, UnicodeDecodeError) as e:
        term.print_error(f"No se pudo leer la entrada: {e}")
        return 2

    term.print_stage(2, 3, "Traduciendo instrucciones")
    if result.diagnostics:
        term.print_issues(result.diagnostics)
    elif result.issues:
        for issue in result.issues:
            term.print_error(issue)

    if not result.code:
        term.print_error("La traducción no produjo código.")
        return 1

    problems = check_braces(result.code)
    if problems:
        term.print_warning(format_errors(problems, args.output))

    term.print_stage(3, 3, "Escribiendo el programa")
    if args.output:
        out_path = Path(args.output)
        try:
            write_output(out_path, result.code)
        except OSError as e:
            term.print_error(f"No se pudo escribir {out_path}: {e}")
            return 1
        term.print_info(f"Código escrito en: {out_path}")
    else:
        sys.stdout.write(result.code)

    if not result.success:
        term.print_error("La traducción terminó con errores.")
        return 1
    term.print_success("Traducción completada.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
