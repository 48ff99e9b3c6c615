"""
fileconv - Convert files between simple text formats.

Supported conversions:
- json_to_yaml / yaml_to_json
- csv_to_html
- csv_to_svg
- txt_to_asc / asc_to_txt
"""

__version__ = "0.1.0"

# core first: the converters import core.errors
from .core import ConversionError, ConversionKind, convert, run_conversion

__all__ = [
    "__version__",
    "ConversionError",
    "ConversionKind",
    "convert",
    "run_conversion",
]
