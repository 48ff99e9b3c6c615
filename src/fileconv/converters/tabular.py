"""
Comma-delimited tabular parsing shared by the HTML and SVG renderers.

Two tokenizers are available behind one entry point:

- STANDARD: quote-aware CSV via the ``csv`` module in strict mode.
  Blank lines are skipped and malformed quoting is an error.
- NAIVE: split lines on ``\\n`` and fields on ``,`` with no quoting
  support. Never fails.
"""

import csv
import io
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from fileconv.core.errors import ParseError

__all__ = ["QuotingMode", "Table", "parse_table"]

# Lift the csv module's default 128 KiB cap on field length
csv.field_size_limit(min(sys.maxsize, 2**31 - 1))


class QuotingMode(Enum):
    STANDARD = "standard"
    NAIVE = "naive"


@dataclass
class Table:
    """Header plus data rows, fields kept positionally."""
    header: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


def _standard_rows(text: str) -> List[List[str]]:
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    rows = []
    try:
        for row in reader:
            if row:
                rows.append(row)
    except csv.Error as e:
        raise ParseError(f"Invalid CSV at line {reader.line_num}: {e}") from e
    return rows


def _naive_rows(text: str) -> List[List[str]]:
    lines = text.split("\n")
    # A final newline leaves one empty trailing segment
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    rows = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        rows.append(line.split(","))
    return rows


def parse_table(
    text: str,
    has_headers: bool = True,
    quoting: QuotingMode = QuotingMode.STANDARD,
) -> Table:
    """
    Parse delimited text into a Table.

    Ragged rows are kept as-is; nothing checks them against the header
    width.

    Args:
        text: Full CSV text
        has_headers: Treat the first row as column headers. When False,
            every row is data and the header is empty.
        quoting: Tokenizer to use

    Returns:
        Parsed Table

    Raises:
        ParseError: STANDARD mode only, on malformed quoting or when a
            header is required but the input has no rows
    """
    if quoting is QuotingMode.NAIVE:
        rows = _naive_rows(text)
    else:
        rows = _standard_rows(text)

    if not has_headers:
        return Table(header=[], rows=rows)

    if not rows:
        raise ParseError("Invalid CSV: missing header row")

    return Table(header=rows[0], rows=rows[1:])
