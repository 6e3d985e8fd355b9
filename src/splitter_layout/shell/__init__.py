"""Glue between a windowing shell and the layout engine."""

from splitter_layout.shell.host import CursorShape, RecordingHost, WindowHost
from splitter_layout.shell.session import (
    LayoutSession,
    Pointer,
    PointerEvent,
    PointerState,
    cursor_for,
)

__all__ = [
    "CursorShape",
    "RecordingHost",
    "WindowHost",
    "LayoutSession",
    "Pointer",
    "PointerEvent",
    "PointerState",
    "cursor_for",
]
