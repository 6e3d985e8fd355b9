"""Pointer and resize handling that connects a WindowHost to a Layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from splitter_layout.core.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, DEMO_LAYOUT, SPLITTER_SIZE
from splitter_layout.core.rect import Rect
from splitter_layout.engine.layout import Layout
from splitter_layout.engine.selection import SelectType
from splitter_layout.shell.host import CursorShape, WindowHost

logger = logging.getLogger(__name__)


class Pointer(Enum):
    """Pointer event kinds."""
    DOWN = auto()
    UP = auto()
    MOVE = auto()
    LEAVE = auto()


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in client coordinates."""
    kind: Pointer
    x: int = 0
    y: int = 0


@dataclass
class PointerState:
    """Per-window pointer state, passed explicitly to every handler."""
    tracking: bool = False  # Host reports LEAVE once the pointer exits
    captured: bool = False
    cursor: CursorShape = CursorShape.DEFAULT


CURSORS: dict[SelectType, CursorShape] = {
    SelectType.NONE: CursorShape.DEFAULT,
    SelectType.VERTICAL: CursorShape.SIZE_WE,
    SelectType.HORIZONTAL: CursorShape.SIZE_NS,
    SelectType.BOTH: CursorShape.SIZE_ALL,
}


def cursor_for(select_type: SelectType) -> CursorShape:
    """Cursor shape to show over a selection of this type."""
    return CURSORS[select_type]


class LayoutSession:
    """
    Drives a Layout from host events.

    Handles:
    - Creating and repositioning one host surface per window
    - Starting, updating and ending splitter drags
    - Cursor feedback while hovering over splitters
    """

    def __init__(
        self,
        host: WindowHost,
        description: str = DEMO_LAYOUT,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        splitter_size: int = SPLITTER_SIZE,
    ) -> None:
        self.host = host
        self.description = description
        self.client = Rect.from_size(width, height)
        self.layout = Layout(splitter_size=splitter_size)

    def open(self) -> None:
        """Build the layout and place every surface. Raises LayoutParseError."""
        self.layout.init(self.description, self.client)
        self._sync_surfaces()

    def resize(self, width: int, height: int) -> None:
        """Reflow after the client area changed size."""
        self.client = Rect.from_size(width, height)
        self.layout.update(self.client)
        self._sync_surfaces()

    def _sync_surfaces(self) -> None:
        for panel_id, rect in self.layout.panels().items():
            self.host.move_surface(panel_id, rect)

    def handle(self, event: PointerEvent, state: PointerState) -> bool:
        """Handle a pointer event. Returns True if it started, moved or ended a drag."""
        if event.kind is Pointer.DOWN:
            return self._pointer_down(event, state)
        if event.kind is Pointer.UP:
            return self._pointer_up(state)
        if event.kind is Pointer.MOVE:
            return self._pointer_move(event, state)
        if event.kind is Pointer.LEAVE:
            state.tracking = False
            self._set_cursor(state, CursorShape.DEFAULT)
        return False

    def replay(self, events: Iterable[PointerEvent], state: PointerState) -> int:
        """Handle a sequence of events, returning how many were consumed."""
        return sum(1 for event in events if self.handle(event, state))

    def _pointer_down(self, event: PointerEvent, state: PointerState) -> bool:
        select_type = self.layout.select(event.x, event.y, persist=True)
        if select_type is SelectType.NONE:
            return False
        logger.debug("drag started at (%d, %d): %s", event.x, event.y, select_type.value)
        self.host.capture_pointer()
        state.captured = True
        self._set_cursor(state, cursor_for(select_type))
        return True

    def _pointer_up(self, state: PointerState) -> bool:
        if not self.layout.has_selection():
            return False
        self.layout.clear_selection()
        self.host.release_pointer()
        state.captured = False
        return True

    def _pointer_move(self, event: PointerEvent, state: PointerState) -> bool:
        state.tracking = True
        if self.layout.has_selection():
            self.layout.move_selected(event.x, event.y, self.client)
            self._sync_surfaces()
            return True

        self._set_cursor(state, cursor_for(self.layout.select(event.x, event.y)))
        return False

    def _set_cursor(self, state: PointerState, shape: CursorShape) -> None:
        if state.cursor is not shape:
            state.cursor = shape
            self.host.set_cursor(shape)
