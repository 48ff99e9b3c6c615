"""
Shared utilities for the fileconv package.

- config: Environment-driven configuration
- files: Whole-file text reads and atomic writes
"""

from fileconv.utils.config import ConvertConfig, get_config, load_config
from fileconv.utils.files import read_text, write_text_atomic

__all__ = [
    "ConvertConfig",
    "get_config",
    "load_config",
    "read_text",
    "write_text_atomic",
]
