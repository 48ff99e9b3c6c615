"""
Error types raised by conversions and the file-access layer.

Every failure aborts the single conversion it belongs to. Nothing is
recovered internally; the CLI prints the message and exits non-zero.
"""

__all__ = [
    "ConversionError",
    "InputFileNotFound",
    "OutputFileUnwritable",
    "ParseError",
    "SerializeError",
    "InvalidFormat",
    "InvalidValue",
    "UnknownConversion",
]


class ConversionError(Exception):
    """Base exception for all conversion failures."""


class InputFileNotFound(ConversionError):
    """Input file is missing or cannot be opened for reading."""


class OutputFileUnwritable(ConversionError):
    """Output file cannot be created or written."""


class ParseError(ConversionError):
    """Input text is not well-formed for its declared format."""


class SerializeError(ConversionError):
    """Parsed value cannot be represented in the target format."""


class InvalidFormat(ConversionError):
    """ASCII-code token is not an unsigned decimal integer."""


class InvalidValue(ConversionError):
    """ASCII code lies outside the 7-bit range."""


class UnknownConversion(ConversionError):
    """Conversion identifier does not name a supported conversion."""

    def __init__(self, name: str, valid: list):
        self.name = name
        self.valid = list(valid)
        super().__init__(
            f"Unknown conversion '{name}'. Use one of: {', '.join(self.valid)}"
        )
