"""
Configuration loading.

Defaults come from environment variables and can be overridden by CLI
flags. The resulting ConvertConfig is built once at the entry point and
passed explicitly to the conversion layer.

Environment Variables:
    FILECONV_ENCODING     Text encoding for input and output (default: utf-8)
    FILECONV_VERBOSE      Verbose progress output on stderr (default: 0)
    FILECONV_CSV_HEADER   Treat the first CSV row as a header (default: 1)
    FILECONV_CSV_QUOTING  Force the CSV tokenizer: standard or naive (default: unset)
"""

import codecs
import os
from dataclasses import dataclass, replace
from typing import Dict, Optional

from fileconv.converters.tabular import QuotingMode

__all__ = ["ConvertConfig", "get_config", "load_config", "parse_flag", "parse_quoting"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ConvertConfig:
    encoding: str = "utf-8"
    verbose: bool = False
    has_headers: bool = True
    quoting: Optional[QuotingMode] = None   # None: each conversion's own mode


def get_config() -> Dict[str, str]:
    """
    Load raw configuration values from environment variables.

    Returns:
        Dictionary with encoding, verbose, csv_header and csv_quoting
    """
    return {
        "encoding": os.environ.get("FILECONV_ENCODING", "utf-8"),
        "verbose": os.environ.get("FILECONV_VERBOSE", "0"),
        "csv_header": os.environ.get("FILECONV_CSV_HEADER", "1"),
        "csv_quoting": os.environ.get("FILECONV_CSV_QUOTING", ""),
    }


def parse_flag(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def parse_quoting(value: str) -> Optional[QuotingMode]:
    normalized = value.strip().lower()
    if not normalized:
        return None
    try:
        return QuotingMode(normalized)
    except ValueError:
        valid = ", ".join(mode.value for mode in QuotingMode)
        raise ValueError(f"Invalid quoting mode {value!r}. Use one of: {valid}")


def load_config(**overrides) -> ConvertConfig:
    """
    Build the configuration from the environment plus explicit overrides.

    Overrides set to None are ignored, so unset CLI flags fall through to
    the environment.

    Raises:
        ValueError: If a value cannot be parsed or names an unknown encoding
    """
    raw = get_config()
    config = ConvertConfig(
        encoding=raw["encoding"],
        verbose=parse_flag(raw["verbose"]),
        has_headers=parse_flag(raw["csv_header"]),
        quoting=parse_quoting(raw["csv_quoting"]),
    )
    changes = {key: value for key, value in overrides.items() if value is not None}
    config = replace(config, **changes)

    try:
        codecs.lookup(config.encoding)
    except LookupError:
        raise ValueError(f"Unknown encoding: {config.encoding!r}")

    return config
