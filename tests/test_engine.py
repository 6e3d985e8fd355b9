"""Tests for layout construction and resize propagation."""

import itertools

import pytest

from splitter_layout.core.constants import DEMO_LAYOUT
from splitter_layout.core.errors import LayoutConsistencyError, LayoutParseError, LayoutStateError
from splitter_layout.core.panel import Panel, PanelTree
from splitter_layout.core.rect import Rect
from splitter_layout.engine.layout import Layout


def allotted(panel: Panel, half: int = 3) -> Rect:
    """Rectangle a parent handed to ``panel`` (leaves shrink theirs)."""
    return panel.rect.expand(half) if panel.is_leaf else panel.rect


def assert_partitioned(tree: PanelTree) -> None:
    """Every splitter's children tile its rectangle exactly at the divider."""
    for panel in tree.splitter_panels():
        first, second = (allotted(child) for child in tree.children(panel))
        divider = panel.divider
        if panel.kind.is_vertical:
            assert first.right == second.left == divider
            assert first.left == panel.rect.left and second.right == panel.rect.right
            assert first.top == second.top == panel.rect.top
            assert first.bottom == second.bottom == panel.rect.bottom
        else:
            assert first.bottom == second.top == divider
            assert first.top == panel.rect.top and second.bottom == panel.rect.bottom
            assert first.left == second.left == panel.rect.left
            assert first.right == second.right == panel.rect.right
        assert 0 <= panel.splitter.position <= panel.extent


class TestInit:
    """Tests for building a layout."""

    def test_single_window_fills_region(self) -> None:
        layout = Layout()
        layout.init("W{7}", Rect(0, 0, 100, 100))
        assert layout.panels() == {7: Rect(9, 9, 91, 91)}
        assert list(layout.splitters()) == []

    def test_demo_rectangles(self, demo_layout: Layout) -> None:
        panels = demo_layout.panels()
        assert panels[1] == Rect(9, 9, 320, 397)
        assert panels[2] == Rect(326, 9, 637, 397)
        assert panels[3] == Rect(9, 403, 637, 594)
        assert panels[4] == Rect(9, 600, 320, 791)
        assert panels[5] == Rect(326, 600, 637, 791)
        assert panels[6] == Rect(643, 9, 954, 791)
        assert panels[7] == Rect(960, 9, 1271, 397)
        assert panels[8] == Rect(960, 403, 1271, 791)

    def test_demo_partitions_exactly(self, demo_layout: Layout) -> None:
        assert_partitioned(demo_layout.tree)

    def test_description_is_kept(self, demo_layout: Layout) -> None:
        assert demo_layout.description == DEMO_LAYOUT
        assert demo_layout.is_initialized

    def test_panels_is_a_snapshot(self, demo_layout: Layout) -> None:
        panels = demo_layout.panels()
        panels[1] = Rect()
        assert demo_layout.panels()[1] == Rect(9, 9, 320, 397)

    @pytest.mark.parametrize("description", ["V{W{1}:W{1}}", "V{W{1}:W{2}", "Z{1}", "W{one}"])
    def test_failed_init_leaves_engine_unusable(self, description: str) -> None:
        layout = Layout()
        with pytest.raises(LayoutParseError):
            layout.init(description, Rect(0, 0, 640, 480))
        assert not layout.is_initialized
        with pytest.raises(LayoutStateError):
            layout.panels()
        with pytest.raises(LayoutStateError):
            layout.update(Rect(0, 0, 640, 480))
        with pytest.raises(LayoutStateError):
            layout.select(10, 10)

    def test_failed_reinit_drops_previous_tree(self, demo_layout: Layout, region: Rect) -> None:
        with pytest.raises(LayoutParseError):
            demo_layout.init("V{W{1}}", region)
        assert not demo_layout.is_initialized
        assert demo_layout.description is None

    def test_uninitialized_engine(self) -> None:
        layout = Layout()
        assert not layout.has_selection()
        with pytest.raises(LayoutStateError):
            layout.tree


class TestUpdate:
    """Tests for resize propagation."""

    def test_positions_are_fixed_offsets(self, demo_layout: Layout) -> None:
        demo_layout.update(Rect.from_size(1600, 1000))
        panels = demo_layout.panels()
        # root divider stays 634px from the leading edge
        assert panels[1] == Rect(9, 9, 320, 397)
        assert panels[6].left == 643
        assert panels[6].right == 954
        assert panels[7] == Rect(960, 9, 1591, 397)
        assert panels[8] == Rect(960, 403, 1591, 991)
        assert_partitioned(demo_layout.tree)

    def test_update_is_idempotent(self, demo_layout: Layout) -> None:
        for size in [(1600, 1000), (640, 400), (300, 200)]:
            demo_layout.update(Rect.from_size(*size))
            first = demo_layout.panels()
            positions = [panel.splitter.position for panel in demo_layout.splitters()]
            demo_layout.update(Rect.from_size(*size))
            assert demo_layout.panels() == first
            assert [panel.splitter.position for panel in demo_layout.splitters()] == positions

    def test_same_region_changes_nothing(self, demo_layout: Layout, region: Rect) -> None:
        before = demo_layout.panels()
        demo_layout.update(region)
        assert demo_layout.panels() == before

    @pytest.mark.parametrize("size", [(1280, 800), (1600, 1000), (640, 400), (400, 300), (2000, 300)])
    def test_partition_holds_after_resize(self, demo_layout: Layout, size: tuple[int, int]) -> None:
        demo_layout.update(Rect.from_size(*size))
        assert_partitioned(demo_layout.tree)

    def test_shrink_to_half(self, demo_layout: Layout) -> None:
        bounds = Rect.from_size(640, 400)
        demo_layout.update(bounds)
        panels = demo_layout.panels()

        assert sorted(panels) == [1, 2, 3, 4, 5, 6, 7, 8]
        for rect in panels.values():
            assert rect.width >= 1 and rect.height >= 1
            assert bounds.left <= rect.left and rect.right <= bounds.right
            assert bounds.top <= rect.top and rect.bottom <= bounds.bottom
        for a, b in itertools.combinations(panels.values(), 2):
            assert not a.intersects(b)

    def test_shrink_pulls_dividers_back(self, demo_layout: Layout) -> None:
        demo_layout.update(Rect.from_size(640, 400))
        root = demo_layout.root
        assert root.splitter.position == 604
        assert demo_layout.panels()[6] == Rect(613, 9, 619, 391)

    def test_shrink_then_grow(self, demo_layout: Layout, region: Rect) -> None:
        demo_layout.update(Rect.from_size(640, 400))
        demo_layout.update(region)
        assert_partitioned(demo_layout.tree)
        assert demo_layout.root.splitter.position == 604

    def test_single_window_resize(self) -> None:
        layout = Layout()
        layout.init("W{1}", Rect(0, 0, 100, 100))
        layout.update(Rect(0, 0, 300, 200))
        assert layout.panels() == {1: Rect(9, 9, 291, 191)}

    def test_inconsistent_tree(self, demo_layout: Layout, region: Rect) -> None:
        demo_layout.root.children = None
        with pytest.raises(LayoutConsistencyError):
            demo_layout.update(region)
