"""
File access for conversions.

Reads whole files as text and writes results atomically: the output is
written to a temporary file in the target directory and renamed into
place, so a failed run never leaves a partial output file.
"""

import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from fileconv.core.errors import InputFileNotFound, OutputFileUnwritable, ParseError

__all__ = ["read_text", "write_text_atomic"]


def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read an entire file as text.

    Raises:
        InputFileNotFound: If the file is missing or cannot be opened
        ParseError: If the bytes are not valid in the given encoding
    """
    path = Path(path).expanduser()
    try:
        # newline="" keeps \r\n intact for the CSV reader
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputFileNotFound(f"File not found: {path}") from e
    except IsADirectoryError as e:
        raise InputFileNotFound(f"Not a file: {path}") from e
    except PermissionError as e:
        raise InputFileNotFound(f"Cannot read file: {path}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid {encoding} text: {e}") from e
    except OSError as e:
        raise InputFileNotFound(f"Cannot read file: {path} ({e.strerror})") from e


def _output_mode(path: Path) -> int:
    """Permission bits for the output: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: Union[str, Path], content: str, encoding: str = "utf-8") -> int:
    """
    Write text to a file, replacing it atomically.

    Returns:
        Number of characters written

    Raises:
        OutputFileUnwritable: If the file cannot be created or written
    """
    path = Path(path).expanduser()
    directory = path.parent

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise OutputFileUnwritable(f"Cannot write file: {path} ({e.strerror})") from e

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            written = f.write(content)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except (OSError, UnicodeEncodeError) as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputFileUnwritable(f"Cannot write file: {path} ({e})") from e

    return written
