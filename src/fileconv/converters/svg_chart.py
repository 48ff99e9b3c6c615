"""
CSV to SVG rendering on a fixed 400x200 canvas.

The header row is drawn as plain labels on the first visual line; each
data field is a gray outlined box with its value inside. Column width and
row height are fixed and wide tables simply run off the canvas.
"""

from typing import List

from fileconv.converters.markup import escape_markup
from fileconv.converters.tabular import QuotingMode, Table, parse_table

__all__ = ["csv_to_svg", "render_svg_chart"]

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 200
LEFT_MARGIN = 10
TOP_MARGIN = 30
COLUMN_WIDTH = 80
ROW_HEIGHT = 30
CELL_WIDTH = 70
CELL_HEIGHT = 20
FONT_SIZE = 12

SVG_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f'<svg width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" '
    'xmlns="http://www.w3.org/2000/svg">\n'
    '<rect width="100%" height="100%" fill="white" />\n'
)


def _column_x(column_index: int) -> int:
    return LEFT_MARGIN + COLUMN_WIDTH * column_index


def _row_y(line_index: int) -> int:
    return TOP_MARGIN + ROW_HEIGHT * line_index


def _text(x: int, y: int, value: str) -> str:
    return (
        f'<text x="{x}" y="{y}" font-size="{FONT_SIZE}" fill="black">'
        f"{escape_markup(value)}</text>"
    )


def _cell(x: int, y: int, value: str) -> List[str]:
    return [
        f'<rect x="{x}" y="{y}" width="{CELL_WIDTH}" height="{CELL_HEIGHT}" '
        'fill="#f0f0f0" stroke="black" stroke-width="1" />',
        _text(x + 5, y + 15, value),
    ]


def render_svg_chart(table: Table, include_header: bool = True) -> str:
    """Render a Table as an SVG document string."""
    parts = []
    first_data_line = 0

    if include_header:
        for col_index, label in enumerate(table.header):
            parts.append(_text(_column_x(col_index), _row_y(0), label))
        first_data_line = 1

    for row_index, record in enumerate(table.rows):
        y = _row_y(first_data_line + row_index)
        for col_index, value in enumerate(record):
            parts.extend(_cell(_column_x(col_index), y, value))

    body = "".join(part + "\n" for part in parts)
    return f"{SVG_HEADER}{body}</svg>"


def csv_to_svg(
    text: str,
    has_headers: bool = True,
    quoting: QuotingMode = QuotingMode.NAIVE,
) -> str:
    """
    Convert CSV text to an SVG chart.

    With the default NAIVE tokenizer this never fails: empty or odd input
    just produces a document with little content.
    """
    table = parse_table(text, has_headers=has_headers, quoting=quoting)
    return render_svg_chart(table, include_header=has_headers)
