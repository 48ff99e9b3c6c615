"""
Conversion dispatch.

Maps a conversion kind to exactly one transformation. ``convert`` is pure
text-to-text; ``run_conversion`` adds the file reading and writing around
it for the CLI.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from fileconv.converters.ascii_codec import asc_to_txt, txt_to_asc
from fileconv.converters.html_table import csv_to_html
from fileconv.converters.structured import json_to_yaml, yaml_to_json
from fileconv.converters.svg_chart import csv_to_svg
from fileconv.converters.tabular import QuotingMode
from fileconv.core.errors import UnknownConversion
from fileconv.utils.config import ConvertConfig
from fileconv.utils.files import read_text, write_text_atomic

__all__ = [
    "ConversionKind",
    "ConversionRequest",
    "ConvertOptions",
    "convert",
    "run_conversion",
]


class ConversionKind(Enum):
    JSON_TO_YAML = "json_to_yaml"
    YAML_TO_JSON = "yaml_to_json"
    CSV_TO_HTML = "csv_to_html"
    CSV_TO_SVG = "csv_to_svg"
    TXT_TO_ASC = "txt_to_asc"
    ASC_TO_TXT = "asc_to_txt"

    @classmethod
    def names(cls) -> List[str]:
        return [kind.value for kind in cls]

    @classmethod
    def parse(cls, name: Union[str, "ConversionKind"]) -> "ConversionKind":
        """
        Resolve a conversion identifier.

        Raises:
            UnknownConversion: If the name is not one of the supported kinds
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownConversion(str(name), cls.names()) from None


@dataclass(frozen=True)
class ConvertOptions:
    """CSV handling options; ignored by the non-tabular conversions."""
    has_headers: bool = True
    quoting: Optional[QuotingMode] = None   # None: the conversion's own mode


@dataclass(frozen=True)
class ConversionRequest:
    input_path: Path
    kind: ConversionKind
    output_path: Path


def _csv_to_html(text: str, options: ConvertOptions) -> str:
    return csv_to_html(
        text,
        has_headers=options.has_headers,
        quoting=options.quoting or QuotingMode.STANDARD,
    )


def _csv_to_svg(text: str, options: ConvertOptions) -> str:
    return csv_to_svg(
        text,
        has_headers=options.has_headers,
        quoting=options.quoting or QuotingMode.NAIVE,
    )


CONVERTERS: Dict[ConversionKind, Callable[[str, ConvertOptions], str]] = {
    ConversionKind.JSON_TO_YAML: lambda text, options: json_to_yaml(text),
    ConversionKind.YAML_TO_JSON: lambda text, options: yaml_to_json(text),
    ConversionKind.CSV_TO_HTML: _csv_to_html,
    ConversionKind.CSV_TO_SVG: _csv_to_svg,
    ConversionKind.TXT_TO_ASC: lambda text, options: txt_to_asc(text),
    ConversionKind.ASC_TO_TXT: lambda text, options: asc_to_txt(text),
}


def convert(
    kind: Union[str, ConversionKind],
    text: str,
    options: Optional[ConvertOptions] = None,
) -> str:
    """
    Run one conversion on in-memory text.

    Args:
        kind: Conversion kind or its identifier string
        text: Full input text
        options: CSV options (defaults to header row, native tokenizer)

    Returns:
        Converted text

    Raises:
        UnknownConversion: If kind is not a supported identifier
        ConversionError: Any failure raised by the selected conversion
    """
    kind = ConversionKind.parse(kind)
    return CONVERTERS[kind](text, options or ConvertOptions())


def run_conversion(request: ConversionRequest, config: ConvertConfig) -> int:
    """
    Read the input file, convert it and write the output file.

    The output file is only created once the conversion has succeeded.

    Returns:
        Number of characters written

    Raises:
        ConversionError: On any read, conversion or write failure
    """
    options = ConvertOptions(has_headers=config.has_headers, quoting=config.quoting)

    if config.verbose:
        print(f"Converting {request.kind.value}: {request.input_path}", file=sys.stderr)

    text = read_text(request.input_path, encoding=config.encoding)
    if config.verbose:
        print(f"  Read {len(text)} characters", file=sys.stderr)

    result = convert(request.kind, text, options)
    written = write_text_atomic(request.output_path, result, encoding=config.encoding)

    if config.verbose:
        print(f"  Wrote {written} characters to {request.output_path}", file=sys.stderr)

    return written
