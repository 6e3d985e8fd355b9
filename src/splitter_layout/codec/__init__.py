"""Reading and writing layout descriptions."""

from splitter_layout.codec.parser import LayoutParser, parse_layout
from splitter_layout.codec.writer import format_layout

__all__ = ["LayoutParser", "parse_layout", "format_layout"]
