"""
Format converters.

Pure text-to-text transformations, no file access:
- structured: JSON <-> YAML
- tabular: CSV parsing (standard and naive tokenizers)
- html_table: CSV -> HTML table
- svg_chart: CSV -> SVG chart
- ascii_codec: text <-> ASCII codes
"""

from fileconv.converters.ascii_codec import asc_to_txt, txt_to_asc
from fileconv.converters.html_table import csv_to_html
from fileconv.converters.structured import json_to_yaml, yaml_to_json
from fileconv.converters.svg_chart import csv_to_svg
from fileconv.converters.tabular import QuotingMode, Table, parse_table

__all__ = [
    "QuotingMode",
    "Table",
    "asc_to_txt",
    "csv_to_html",
    "csv_to_svg",
    "json_to_yaml",
    "parse_table",
    "txt_to_asc",
    "yaml_to_json",
]
