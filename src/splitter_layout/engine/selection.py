"""Aggregate classification of splitter hits."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from splitter_layout.core.panel import PanelKind


class SelectType(Enum):
    """What kind of splitters lie under the pointer."""
    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    BOTH = "both"


def classify(kinds: Iterable[PanelKind]) -> SelectType:
    """Combine the kinds of every matched splitter into one SelectType."""
    seen = set(kinds)
    vertical = PanelKind.SPLITTER_VERTICAL in seen
    horizontal = PanelKind.SPLITTER_HORIZONTAL in seen
    if vertical and horizontal:
        return SelectType.BOTH
    if vertical:
        return SelectType.VERTICAL
    if horizontal:
        return SelectType.HORIZONTAL
    return SelectType.NONE
