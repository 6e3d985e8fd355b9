"""Panel tree - leaves and splitters stored in an index-addressed arena."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from splitter_layout.core.constants import TAG_HORIZONTAL, TAG_VERTICAL, TAG_WINDOW
from splitter_layout.core.rect import Rect


class PanelKind(Enum):
    """Panel kind, keyed by its tag in a layout description."""
    WINDOW = TAG_WINDOW
    SPLITTER_VERTICAL = TAG_VERTICAL      # Children left/right, split along x
    SPLITTER_HORIZONTAL = TAG_HORIZONTAL  # Children top/bottom, split along y

    @property
    def tag(self) -> str:
        return self.value

    @property
    def is_splitter(self) -> bool:
        return self is not PanelKind.WINDOW

    @property
    def is_vertical(self) -> bool:
        return self is PanelKind.SPLITTER_VERTICAL

    @classmethod
    def from_tag(cls, tag: str) -> Optional[PanelKind]:
        """Look up a kind by tag, None if the tag is unknown."""
        for kind in cls:
            if kind.value == tag:
                return kind
        return None


@dataclass
class SplitterProperties:
    """Divider of a splitter panel."""
    position: int = 0  # Offset from the panel's leading edge
    rect: Rect = field(default_factory=Rect)  # Hit-test rectangle


@dataclass
class Panel:
    """A node of the panel tree."""
    kind: PanelKind
    rect: Rect = field(default_factory=Rect)
    id: Optional[int] = None  # Leaves only
    splitter: Optional[SplitterProperties] = None  # Splitters only
    children: Optional[tuple[int, int]] = None  # Arena indices, splitters only

    @property
    def is_leaf(self) -> bool:
        return self.kind is PanelKind.WINDOW

    @property
    def extent(self) -> int:
        """Size along the split axis (width for vertical, height otherwise)."""
        return self.rect.width if self.kind.is_vertical else self.rect.height

    @property
    def leading_edge(self) -> int:
        """Coordinate the splitter position is measured from."""
        return self.rect.left if self.kind.is_vertical else self.rect.top

    @property
    def divider(self) -> int:
        """Absolute coordinate of the divider line."""
        assert self.splitter is not None
        return self.leading_edge + self.splitter.position


@dataclass
class PanelTree:
    """
    Arena owning every panel of one layout.

    Index 0 is the root. ``panels`` maps leaf ids to node indices and
    ``splitters`` lists splitter node indices in pre-order; both only
    hold indices, so moving geometry around never leaves a stale reference.
    """
    nodes: list[Panel] = field(default_factory=list)
    panels: dict[int, int] = field(default_factory=dict)
    splitters: list[int] = field(default_factory=list)

    @property
    def root(self) -> Panel:
        return self.nodes[0]

    def add(self, panel: Panel) -> int:
        """Append a node and return its index."""
        self.nodes.append(panel)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> Panel:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def children(self, panel: Panel) -> tuple[Panel, Panel]:
        """Both children of a splitter panel."""
        assert panel.children is not None
        first, second = panel.children
        return self.nodes[first], self.nodes[second]

    def leaf(self, panel_id: int) -> Panel:
        """Leaf panel by id."""
        return self.nodes[self.panels[panel_id]]

    def splitter_panels(self) -> Iterator[Panel]:
        """Splitter panels in pre-order."""
        for index in self.splitters:
            yield self.nodes[index]

    def walk(self, index: int = 0, depth: int = 0) -> Iterator[tuple[int, int, Panel]]:
        """Pre-order traversal yielding (index, depth, panel)."""
        panel = self.nodes[index]
        yield index, depth, panel
        if panel.children is not None:
            for child in panel.children:
                yield from self.walk(child, depth + 1)
