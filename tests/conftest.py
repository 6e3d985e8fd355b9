"""Shared fixtures for layout engine tests."""

import pytest

from splitter_layout.core.constants import DEMO_LAYOUT
from splitter_layout.core.rect import Rect
from splitter_layout.engine.layout import Layout

# Three vertical splitters in a chain: dividers at x=300, 447 and 520
CHAIN_LAYOUT = "V{W{1}:V{W{2}:V{W{3}:W{4}}}}"


@pytest.fixture
def region() -> Rect:
    """Default 1280x800 client region."""
    return Rect.from_size(1280, 800)


@pytest.fixture
def demo_layout(region: Rect) -> Layout:
    """Eight-window demo layout built in the default region."""
    layout = Layout()
    layout.init(DEMO_LAYOUT, region)
    return layout


@pytest.fixture
def chain_region() -> Rect:
    return Rect.from_size(600, 400)


@pytest.fixture
def chain_layout(chain_region: Rect) -> Layout:
    """Three nested vertical splitters in a 600x400 region."""
    layout = Layout()
    layout.init(CHAIN_LAYOUT, chain_region)
    return layout
