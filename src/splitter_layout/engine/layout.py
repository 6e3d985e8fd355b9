"""Layout engine - owns a panel tree and keeps its geometry consistent."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from splitter_layout.codec.parser import LayoutParser
from splitter_layout.core.constants import SPLITTER_SIZE
from splitter_layout.core.errors import LayoutConsistencyError, LayoutStateError
from splitter_layout.core.geometry import (
    SplitterMetrics,
    fit_position,
    leaf_rect,
    min_extent,
    refresh_splitter_rect,
    split_rect,
)
from splitter_layout.core.panel import Panel, PanelKind, PanelTree
from splitter_layout.core.rect import Rect
from splitter_layout.engine.selection import SelectType, classify

logger = logging.getLogger(__name__)


class Layout:
    """
    Splitter layout engine.

    Typical use by a windowing shell:

        >>> layout = Layout()
        >>> layout.init("V{W{1}:W{2}}", Rect.from_size(800, 600))
        >>> layout.panels()[1]
        Rect(left=9, top=9, right=397, bottom=591)

    then ``update`` on every resize, ``select``/``move_selected``/
    ``clear_selection`` while the pointer drags a divider, reading
    ``panels()`` back after each call to reposition child surfaces.

    All operations run synchronously on the calling thread; the engine
    holds no locks, so callers on several threads must serialize access.
    """

    def __init__(self, splitter_size: int = SPLITTER_SIZE):
        self.metrics = SplitterMetrics(splitter_size)
        self._tree: Optional[PanelTree] = None
        self._selected: tuple[int, ...] = ()
        self._description: Optional[str] = None

    @property
    def splitter_size(self) -> int:
        return self.metrics.size

    @property
    def is_initialized(self) -> bool:
        return self._tree is not None

    @property
    def description(self) -> Optional[str]:
        """Description the current tree was built from."""
        return self._description

    @property
    def tree(self) -> PanelTree:
        return self._require_tree()

    @property
    def root(self) -> Panel:
        return self._require_tree().root

    @property
    def selected(self) -> tuple[int, ...]:
        """Indices into the splitter list that the active drag moves."""
        return self._selected

    def _require_tree(self) -> PanelTree:
        if self._tree is None:
            raise LayoutStateError("layout has no panel tree; call init() first")
        return self._tree

    # -- construction and resizing -------------------------------------

    def init(self, description: str, bounds: Rect) -> None:
        """
        Build the panel tree for ``description`` inside ``bounds``.

        Raises LayoutParseError for a malformed description. Any previous
        tree is dropped first, so after a failure the engine holds nothing.
        """
        self._tree = None
        self._selected = ()
        self._description = None

        parser = LayoutParser(splitter_size=self.splitter_size)
        self._tree = parser.parse(description, bounds.shrink(self.splitter_size))
        self._description = description
        logger.debug("layout initialized in %s", bounds)

    def update(self, bounds: Rect) -> None:
        """
        Recompute all geometry for a resized region without reparsing.

        Dividers keep their pixel offset from the panel's leading edge.
        An offset is only pulled back when the region has become too
        small for the panels on one side of it.
        """
        tree = self._require_tree()
        self._layout_node(tree, 0, bounds.shrink(self.splitter_size))

    def _layout_node(self, tree: PanelTree, index: int, rect: Rect) -> None:
        panel = tree[index]
        if panel.kind is PanelKind.WINDOW:
            panel.rect = leaf_rect(rect, self.splitter_size)
            return

        if panel.splitter is None or panel.children is None:
            raise LayoutConsistencyError(
                f"{panel.kind.name} panel at node {index} is missing its splitter or children"
            )

        panel.rect = rect
        first, second = panel.children
        vertical = panel.kind.is_vertical
        leaf_min = self.metrics.min_panel_extent
        panel.splitter.position = fit_position(
            panel.splitter.position,
            panel.extent,
            min_extent(tree, first, vertical, leaf_min),
            min_extent(tree, second, vertical, leaf_min),
        )
        refresh_splitter_rect(panel, self.splitter_size)

        first_rect, second_rect = split_rect(panel)
        self._layout_node(tree, first, first_rect)
        self._layout_node(tree, second, second_rect)

    def _refresh(self, tree: PanelTree) -> None:
        """Re-derive geometry below the root after dividers moved."""
        if tree.root.kind.is_splitter:
            self._layout_node(tree, 0, tree.root.rect)

    # -- queries --------------------------------------------------------

    def panels(self) -> dict[int, Rect]:
        """Snapshot of every window rectangle keyed by window id."""
        tree = self._require_tree()
        return {panel_id: tree[index].rect for panel_id, index in tree.panels.items()}

    def splitters(self) -> Iterator[Panel]:
        """Splitter panels in pre-order."""
        return self._require_tree().splitter_panels()

    # -- selection ------------------------------------------------------

    def find_splitters(self, x: int, y: int) -> list[int]:
        """Indices of every splitter whose padded hit rectangle holds (x, y)."""
        tree = self._require_tree()
        padding = self.metrics.select_padding
        hits = []
        for i, panel in enumerate(tree.splitter_panels()):
            assert panel.splitter is not None
            if panel.splitter.rect.expand(padding).contains(x, y):
                hits.append(i)
        return hits

    def select(self, x: int, y: int, persist: bool = False) -> SelectType:
        """
        Classify the splitters under (x, y).

        With ``persist`` the matches become the drag set (replacing any
        earlier one); without it this is a pure probe, e.g. for choosing
        a cursor shape.
        """
        tree = self._require_tree()
        hits = self.find_splitters(x, y)
        select_type = classify(tree[tree.splitters[i]].kind for i in hits)
        if persist:
            self._selected = tuple(hits)
        return select_type

    def has_selection(self) -> bool:
        return bool(self._selected)

    def clear_selection(self) -> None:
        self._selected = ()

    # -- dragging -------------------------------------------------------

    def splitter_bounds(self, selected_index: int, bounds: Rect) -> tuple[int, int]:
        """
        Absolute range a splitter's divider may move in.

        Starts from the region edges and stops at the nearest splitter of
        the same kind on either side whose span across the axis overlaps
        this one, so a divider never crosses a neighbour from another
        branch of the tree.
        """
        tree = self._require_tree()
        selected = tree[tree.splitters[selected_index]]
        assert selected.splitter is not None

        vertical = selected.kind.is_vertical
        low = self.metrics.edge_limit
        high = (bounds.right if vertical else bounds.bottom) - low
        divider = selected.divider
        hit = selected.splitter.rect

        for other in tree.splitter_panels():
            if other is selected or other.kind is not selected.kind:
                continue
            assert other.splitter is not None
            rect = other.splitter.rect

            if vertical:
                if not rect.overlaps_y(hit):
                    continue
                near, far = rect.left, rect.right
            else:
                if not rect.overlaps_x(hit):
                    continue
                near, far = rect.top, rect.bottom

            if far < divider:
                low = max(low, far)
            if near > divider:
                high = min(high, near)

        return low, high

    def move_selected(self, x: int, y: int, bounds: Rect) -> None:
        """
        Drag every selected splitter towards (x, y) inside ``bounds``.

        Out-of-range coordinates are clamped. Geometry is refreshed before
        returning, so ``panels()`` reflects the move immediately.
        """
        if not self._selected:
            return

        tree = self._require_tree()
        margin = self.metrics.drag_margin

        for selected_index in self._selected:
            panel = tree[tree.splitters[selected_index]]
            assert panel.splitter is not None

            requested = x if panel.kind.is_vertical else y
            low, high = self.splitter_bounds(selected_index, bounds)
            divider = max(low + margin, min(requested, high - margin))

            previous = panel.splitter.position
            panel.splitter.position = max(0, min(divider - panel.leading_edge, panel.extent))

            # keep a nested same-kind divider where it was on screen
            _, second = tree.children(panel)
            if second.kind is panel.kind and second.splitter is not None:
                second.splitter.position += previous - panel.splitter.position

        self._refresh(tree)
