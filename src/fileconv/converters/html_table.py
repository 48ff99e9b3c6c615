"""CSV to HTML table rendering."""

from typing import List

from fileconv.converters.markup import escape_markup
from fileconv.converters.tabular import QuotingMode, Table, parse_table

__all__ = ["csv_to_html", "render_html_table"]


def _row(tag: str, values: List[str]) -> List[str]:
    lines = ["<tr>"]
    for value in values:
        lines.append(f"<{tag}>{escape_markup(value)}</{tag}>")
    lines.append("</tr>")
    return lines


def render_html_table(table: Table, include_header: bool = True) -> str:
    """Render a Table as a minimal ``<table>`` element, one tag per line."""
    lines = ["<table>"]
    if include_header:
        lines.extend(_row("th", table.header))
    for record in table.rows:
        lines.extend(_row("td", record))
    lines.append("</table>")
    return "\n".join(lines)


def csv_to_html(
    text: str,
    has_headers: bool = True,
    quoting: QuotingMode = QuotingMode.STANDARD,
) -> str:
    """
    Convert CSV text to an HTML table.

    Header and field values are HTML-escaped. With ``has_headers=False``
    no ``<th>`` row is emitted and the first line is kept as data.

    Raises:
        ParseError: If the CSV cannot be tokenized or has no header row
    """
    table = parse_table(text, has_headers=has_headers, quoting=quoting)
    return render_html_table(table, include_header=has_headers)
