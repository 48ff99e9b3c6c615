"""
Conversion core.

This module provides the dispatch layer and its error types:
- errors: ConversionError and its subclasses
- dispatcher: ConversionKind, convert() and run_conversion()
"""

from fileconv.core.errors import (
    ConversionError,
    InputFileNotFound,
    InvalidFormat,
    InvalidValue,
    OutputFileUnwritable,
    ParseError,
    SerializeError,
    UnknownConversion,
)
from fileconv.core.dispatcher import (
    ConversionKind,
    ConversionRequest,
    ConvertOptions,
    convert,
    run_conversion,
)

__all__ = [
    "ConversionError",
    "ConversionKind",
    "ConversionRequest",
    "ConvertOptions",
    "InputFileNotFound",
    "InvalidFormat",
    "InvalidValue",
    "OutputFileUnwritable",
    "ParseError",
    "SerializeError",
    "UnknownConversion",
    "convert",
    "run_conversion",
]
