"""Core data structures for panel layouts."""

from splitter_layout.core.rect import Rect
from splitter_layout.core.panel import Panel, PanelKind, PanelTree, SplitterProperties
from splitter_layout.core.errors import (
    LayoutConsistencyError,
    LayoutError,
    LayoutParseError,
    LayoutStateError,
)

__all__ = [
    "Rect",
    "Panel",
    "PanelKind",
    "PanelTree",
    "SplitterProperties",
    "LayoutError",
    "LayoutParseError",
    "LayoutConsistencyError",
    "LayoutStateError",
]
