#!/usr/bin/env python3
"""
fileconv CLI - Convert one file between simple text formats.

Usage:
    fileconv -f data.json -c json_to_yaml -o data.yaml
    fileconv -f data.yaml -c yaml_to_json -o data.json
    fileconv -f table.csv -c csv_to_html -o table.html
    fileconv -f table.csv -c csv_to_svg -o table.svg
    fileconv -f notes.txt -c txt_to_asc -o notes.asc
    fileconv -f notes.asc -c asc_to_txt -o notes.txt

Exit codes:
    0  Conversion succeeded
    1  Conversion or file access failed (nothing written)
    2  Unknown conversion or invalid arguments
"""

import argparse
import sys
from pathlib import Path

from fileconv import __version__
from fileconv.converters.tabular import QuotingMode
from fileconv.core import (
    ConversionError,
    ConversionKind,
    ConversionRequest,
    UnknownConversion,
    run_conversion,
)
from fileconv.utils.config import load_config, parse_quoting


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fileconv",
        description="File Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Conversions:
  json_to_yaml  JSON document to YAML
  yaml_to_json  YAML document to pretty-printed JSON
  csv_to_html   CSV to an HTML <table>
  csv_to_svg    CSV to a simple SVG chart (commas are never quoted)
  txt_to_asc    Text to space-separated character codes
  asc_to_txt    Character codes (0-127) back to text

Environment:
  FILECONV_ENCODING, FILECONV_VERBOSE, FILECONV_CSV_HEADER, FILECONV_CSV_QUOTING
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-f", "--file-name", required=True, help="Input file path")
    parser.add_argument(
        "-c", "--conversion-file",
        required=True,
        metavar="KIND",
        help=f"Conversion to run: {', '.join(ConversionKind.names())}",
    )
    parser.add_argument("-o", "--output-file", required=True, help="Output file path")
    parser.add_argument(
        "--no-header",
        dest="has_headers",
        action="store_false",
        default=None,
        help="CSV input has no header row; every line is data",
    )
    parser.add_argument(
        "--quoting",
        choices=[mode.value for mode in QuotingMode],
        default=None,
        help="CSV tokenizer (default: standard for HTML, naive for SVG)",
    )
    parser.add_argument("--encoding", default=None, help="Text encoding (default: utf-8)")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Verbose output",
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        kind = ConversionKind.parse(args.conversion_file)
    except UnknownConversion as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        config = load_config(
            encoding=args.encoding,
            verbose=args.verbose,
            has_headers=args.has_headers,
            quoting=parse_quoting(args.quoting) if args.quoting else None,
        )
    except ValueError as e:
        parser.error(str(e))

    request = ConversionRequest(
        input_path=Path(args.file_name),
        kind=kind,
        output_path=Path(args.output_file),
    )

    try:
        run_conversion(request, config)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Converted {request.input_path} -> {request.output_path} ({kind.value})")
    sys.exit(0)


if __name__ == "__main__":
    main()
