"""Rect - integer rectangle in a shared pixel coordinate space."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """
    Rectangle given by its four edges.

    ``right`` and ``bottom`` are exclusive, matching a platform client
    rectangle, so two rectangles that share an edge value touch without
    overlapping.
    """
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def from_size(cls, width: int, height: int, left: int = 0, top: int = 0) -> Rect:
        """Build a rectangle from its origin and size."""
        return cls(left, top, left + width, top + height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def shrink(self, padding: int) -> Rect:
        """Move every edge inward by ``padding`` (outward when negative)."""
        return Rect(
            self.left + padding,
            self.top + padding,
            self.right - padding,
            self.bottom - padding,
        )

    def expand(self, padding: int) -> Rect:
        """Move every edge outward by ``padding``."""
        return self.shrink(-padding)

    def contains(self, x: int, y: int) -> bool:
        """Inclusive point test on all four edges."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def overlaps_x(self, other: Rect) -> bool:
        """True if the horizontal spans overlap (touching does not count)."""
        return self.left < other.right and other.left < self.right

    def overlaps_y(self, other: Rect) -> bool:
        """True if the vertical spans overlap (touching does not count)."""
        return self.top < other.bottom and other.top < self.bottom

    def intersects(self, other: Rect) -> bool:
        return self.overlaps_x(other) and self.overlaps_y(other)

    def with_edges(self, **edges: int) -> Rect:
        """Copy with some edges replaced."""
        return replace(self, **edges)

    def to_dict(self) -> dict[str, int]:
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "width": self.width,
            "height": self.height,
        }

    def __str__(self) -> str:
        return f"({self.left}, {self.top}, {self.right}, {self.bottom})"
