"""Geometry rules shared by tree construction and resizing."""

from __future__ import annotations

from dataclasses import dataclass

from splitter_layout.core.constants import SPLITTER_SIZE
from splitter_layout.core.errors import LayoutConsistencyError
from splitter_layout.core.panel import Panel, PanelKind, PanelTree
from splitter_layout.core.rect import Rect


@dataclass(frozen=True)
class SplitterMetrics:
    """Pixel sizes derived from the splitter thickness."""
    size: int = SPLITTER_SIZE

    @property
    def half(self) -> int:
        return self.size // 2

    @property
    def select_padding(self) -> int:
        """Outward padding of hit rectangles so shared corners grab every splitter."""
        return self.size // 2

    @property
    def edge_limit(self) -> int:
        """Closest a dragged divider may come to the region edge."""
        return self.size + self.size // 2

    @property
    def drag_margin(self) -> int:
        """Gap kept between a dragged divider and its limits."""
        return self.size * 2

    @property
    def min_panel_extent(self) -> int:
        """Smallest extent a leaf keeps when the region shrinks."""
        return self.size * 2


def leaf_rect(rect: Rect, splitter_size: int) -> Rect:
    """Leaves give up half a splitter on each side to the adjoining dividers."""
    return rect.shrink(splitter_size // 2)


def initial_position(kind: PanelKind, rect: Rect) -> int:
    """Dividers start at the midpoint of the panel."""
    extent = rect.width if kind.is_vertical else rect.height
    return extent // 2


def refresh_splitter_rect(panel: Panel, splitter_size: int) -> None:
    """Recompute the divider hit rectangle from the current position."""
    assert panel.splitter is not None
    offset = splitter_size // 2
    pivot = panel.divider
    if panel.kind is PanelKind.SPLITTER_VERTICAL:
        panel.splitter.rect = panel.rect.with_edges(left=pivot - offset, right=pivot + offset)
    elif panel.kind is PanelKind.SPLITTER_HORIZONTAL:
        panel.splitter.rect = panel.rect.with_edges(top=pivot - offset, bottom=pivot + offset)


def split_rect(panel: Panel) -> tuple[Rect, Rect]:
    """
    Cut a splitter panel's rectangle at its divider.

    The halves share the divider coordinate, so they partition the panel
    exactly with no gap and no overlap.
    """
    if panel.splitter is None:
        raise LayoutConsistencyError(f"{panel.kind.name} panel has no splitter")

    pivot = panel.divider
    if panel.kind is PanelKind.SPLITTER_VERTICAL:
        return panel.rect.with_edges(right=pivot), panel.rect.with_edges(left=pivot)
    if panel.kind is PanelKind.SPLITTER_HORIZONTAL:
        return panel.rect.with_edges(bottom=pivot), panel.rect.with_edges(top=pivot)
    raise LayoutConsistencyError(f"cannot split a {panel.kind.name} panel")


def min_extent(tree: PanelTree, index: int, vertical: bool, leaf_min: int) -> int:
    """
    Smallest extent along one axis that still leaves every leaf below
    ``index`` at least ``leaf_min``.
    """
    panel = tree[index]
    if panel.children is None:
        return leaf_min

    first, second = panel.children
    first_min = min_extent(tree, first, vertical, leaf_min)
    second_min = min_extent(tree, second, vertical, leaf_min)
    if panel.kind.is_vertical == vertical:
        return first_min + second_min
    return max(first_min, second_min)


def fit_position(position: int, extent: int, first_min: int, second_min: int) -> int:
    """
    Keep ``position`` unless a child would drop below its minimum extent.

    When the panel cannot hold both minimums the space is shared in
    proportion to them.
    """
    low = first_min
    high = extent - second_min
    if low <= high:
        return max(low, min(position, high))
    if extent <= 0:
        return 0
    return (extent * first_min) // (first_min + second_min)
