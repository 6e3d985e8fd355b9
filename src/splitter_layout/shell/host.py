"""Host protocol implemented by the windowing shell that embeds a layout."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from splitter_layout.core.rect import Rect


class CursorShape(Enum):
    """Pointer shapes a host is asked to show."""
    DEFAULT = "arrow"
    SIZE_WE = "size-we"    # Over vertical splitters
    SIZE_NS = "size-ns"    # Over horizontal splitters
    SIZE_ALL = "size-all"  # Over a junction of both kinds


@runtime_checkable
class WindowHost(Protocol):
    """Native side of a layout: one surface per window id plus the pointer."""

    def move_surface(self, panel_id: int, rect: Rect) -> None:
        """Place the surface for ``panel_id`` at ``rect``."""
        ...

    def set_cursor(self, shape: CursorShape) -> None:
        ...

    def capture_pointer(self) -> None:
        """Keep receiving pointer events while a divider is dragged."""
        ...

    def release_pointer(self) -> None:
        ...


class RecordingHost:
    """
    Host without a display that remembers what it was told.

    Useful for headless runs of a session and for inspecting the
    geometry a real host would have received.
    """

    def __init__(self) -> None:
        self.surfaces: dict[int, Rect] = {}
        self.cursor = CursorShape.DEFAULT
        self.captured = False
        self.moves = 0

    def move_surface(self, panel_id: int, rect: Rect) -> None:
        self.surfaces[panel_id] = rect
        self.moves += 1

    def set_cursor(self, shape: CursorShape) -> None:
        self.cursor = shape

    def capture_pointer(self) -> None:
        self.captured = True

    def release_pointer(self) -> None:
        self.captured = False
