"""Layout engine: resizing, splitter selection and drag constraints."""

from splitter_layout.engine.layout import Layout
from splitter_layout.engine.selection import SelectType, classify

__all__ = ["Layout", "SelectType", "classify"]
