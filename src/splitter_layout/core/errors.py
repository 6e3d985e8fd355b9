"""Exceptions raised by the layout engine."""

from __future__ import annotations

from typing import Optional


class LayoutError(Exception):
    """Base class for layout engine failures."""


class LayoutParseError(LayoutError, ValueError):
    """Raised when a layout description cannot be turned into a panel tree."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


class LayoutConsistencyError(LayoutError):
    """Raised when the panel tree no longer satisfies its structural rules."""


class LayoutStateError(LayoutError, RuntimeError):
    """Raised when an engine without a panel tree is used."""
