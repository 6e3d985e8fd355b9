"""
splitter-layout: binary splitter layouts for rectangular regions

Lay out a region as a tree of resizable panels separated by draggable
splitters, described by a compact layout string.

Quick Start:
    >>> import splitter_layout as sl
    >>> layout = sl.create("V{W{1}:H{W{2}:W{3}}}", 1280, 800)
    >>> layout.panels()[1]
    Rect(left=9, top=9, right=637, bottom=791)
    >>> layout.select(640, 200, persist=True)
    <SelectType.VERTICAL: 'vertical'>
    >>> layout.move_selected(900, 400, sl.Rect.from_size(1280, 800))

Features:
    - Parse V{..:..} / H{..:..} / W{id} layout descriptions
    - Reflow all panels when the region resizes
    - Hit-test splitters, including junctions of several splitters
    - Constrained dragging that never crosses neighbouring splitters
    - Host/session glue for driving a layout from pointer events
"""

__version__ = "0.1.0"

# Core types
from splitter_layout.core.rect import Rect
from splitter_layout.core.panel import Panel, PanelKind, PanelTree
from splitter_layout.core.errors import (
    LayoutError,
    LayoutParseError,
    LayoutConsistencyError,
    LayoutStateError,
)

# Descriptions
from splitter_layout.codec.parser import LayoutParser, parse_layout
from splitter_layout.codec.writer import format_layout

# Engine
from splitter_layout.engine.layout import Layout
from splitter_layout.engine.selection import SelectType


def create(description: str, width: int, height: int) -> Layout:
    """Build a layout engine for ``description`` in a width x height region."""
    layout = Layout()
    layout.init(description, Rect.from_size(width, height))
    return layout


__all__ = [
    # Version
    "__version__",
    # Core types
    "Rect",
    "Panel",
    "PanelKind",
    "PanelTree",
    # Errors
    "LayoutError",
    "LayoutParseError",
    "LayoutConsistencyError",
    "LayoutStateError",
    # Descriptions
    "LayoutParser",
    "parse_layout",
    "format_layout",
    # Engine
    "create",
    "Layout",
    "SelectType",
]
