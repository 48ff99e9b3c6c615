"""Tests for CSV to SVG conversion."""

import xml.etree.ElementTree as ET

import pytest

from fileconv.converters.svg_chart import csv_to_svg
from fileconv.converters.tabular import QuotingMode
from fileconv.core.errors import ParseError

SVG_NS = "{http://www.w3.org/2000/svg}"


def header_text(x, y, value):
    return f'<text x="{x}" y="{y}" font-size="12" fill="black">{value}</text>'


def cell_rect(x, y):
    return (
        f'<rect x="{x}" y="{y}" width="70" height="20" '
        'fill="#f0f0f0" stroke="black" stroke-width="1" />'
    )


class TestCsvToSvg:
    """Tests for csv_to_svg function."""

    def test_document_frame(self):
        """Output should be a 400x200 SVG with a white background."""
        result = csv_to_svg("x,y\n1,2")
        assert result.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert '<svg width="400" height="200" xmlns="http://www.w3.org/2000/svg">' in result
        assert '<rect width="100%" height="100%" fill="white" />' in result
        assert result.endswith("</svg>")

    def test_header_positions(self):
        """Header labels sit on y=30, 80 units apart."""
        result = csv_to_svg("x,y\n1,2")
        assert header_text(10, 30, "x") in result
        assert header_text(90, 30, "y") in result

    def test_data_positions(self):
        """Data cells are boxes with their text offset by (5, 15)."""
        result = csv_to_svg("x,y\n1,2")
        assert cell_rect(10, 60) in result
        assert header_text(15, 75, "1") in result
        assert cell_rect(90, 60) in result
        assert header_text(95, 75, "2") in result

    def test_row_spacing(self):
        """Each data line moves down by 30."""
        result = csv_to_svg("h\na\nb\nc")
        assert cell_rect(10, 60) in result
        assert cell_rect(10, 90) in result
        assert cell_rect(10, 120) in result

    def test_wide_table_not_clipped(self):
        """Columns past the canvas are still emitted."""
        result = csv_to_svg("a,b,c,d,e,f\n")
        assert header_text(410, 30, "f") in result

    def test_well_formed_xml(self):
        """Output should parse as XML, even with markup in fields."""
        result = csv_to_svg("name\n<b>&co</b>\n")
        root = ET.fromstring(result.encode("utf-8"))
        texts = [el.text for el in root.iter(f"{SVG_NS}text")]
        assert texts == ["name", "<b>&co</b>"]

    def test_empty_input(self):
        """Empty input should still produce a document."""
        result = csv_to_svg("")
        root = ET.fromstring(result.encode("utf-8"))
        assert root.tag == f"{SVG_NS}svg"
        assert "<rect x=" not in result

    def test_naive_split_ignores_quotes(self):
        """The default tokenizer splits quoted commas."""
        result = csv_to_svg('a\n"x,y"')
        assert header_text(15, 75, "&quot;x") in result
        assert header_text(95, 75, "y&quot;") in result

    def test_standard_quoting_option(self):
        """Standard quoting keeps quoted commas together."""
        result = csv_to_svg('a\n"x,y"', quoting=QuotingMode.STANDARD)
        assert header_text(15, 75, "x,y") in result

    def test_standard_quoting_can_fail(self):
        """Standard quoting reports malformed input."""
        with pytest.raises(ParseError):
            csv_to_svg('a\n"x"y', quoting=QuotingMode.STANDARD)

    def test_without_headers(self):
        """With headers disabled the first line is a data row at y=30."""
        result = csv_to_svg("1,2\n3,4", has_headers=False)
        assert cell_rect(10, 30) in result
        assert cell_rect(90, 60) in result
        assert result.count("<rect x=") == 4

    def test_cell_count(self):
        """One background rect plus one rect per data field."""
        result = csv_to_svg("a,b\n1,2\n3,4\n")
        assert result.count("<rect ") == 5
