"""Recursive-descent parser for layout descriptions.

Grammar::

    layout   := window | splitter
    window   := "W" "{" integer "}"
    splitter := ("V" | "H") "{" layout ":" layout "}"

``V{a:b}`` puts ``a`` left of ``b``; ``H{a:b}`` puts ``a`` above ``b``.
"""

from __future__ import annotations

import logging

from splitter_layout.core.constants import CLOSE_BRACE, OPEN_BRACE, SEPARATOR, SPLITTER_SIZE
from splitter_layout.core.errors import LayoutParseError
from splitter_layout.core.geometry import (
    initial_position,
    leaf_rect,
    refresh_splitter_rect,
    split_rect,
)
from splitter_layout.core.panel import Panel, PanelKind, PanelTree, SplitterProperties
from splitter_layout.core.rect import Rect

logger = logging.getLogger(__name__)


class LayoutParser:
    """
    Builds a PanelTree from a layout description.

    Geometry is assigned top-down while parsing: every splitter starts at
    the midpoint of the rectangle it receives and hands each child one side
    of the cut. Nodes are appended to the arena in pre-order, so the
    splitter list comes out in pre-order too.
    """

    MIN_NODE_LENGTH = 3  # T{}

    def __init__(self, splitter_size: int = SPLITTER_SIZE):
        self.splitter_size = splitter_size
        self.tree = PanelTree()

    def parse(self, description: str, rect: Rect) -> PanelTree:
        """Parse ``description`` laid out inside ``rect``."""
        self.tree = PanelTree()
        self._check_braces(description)
        self._parse_node(description, 0, rect)
        logger.debug(
            "parsed layout with %d windows and %d splitters",
            len(self.tree.panels),
            len(self.tree.splitters),
        )
        return self.tree

    def _check_braces(self, text: str) -> None:
        depth = 0
        for i, char in enumerate(text):
            if char == OPEN_BRACE:
                depth += 1
            elif char == CLOSE_BRACE:
                depth -= 1
                if depth < 0:
                    raise LayoutParseError(f"unexpected {CLOSE_BRACE!r}", i)
        if depth != 0:
            raise LayoutParseError(f"unbalanced braces, {depth} left open", len(text))

    def _parse_node(self, text: str, offset: int, rect: Rect) -> int:
        """Parse one node starting at ``offset`` and return its arena index."""
        if len(text) < self.MIN_NODE_LENGTH:
            raise LayoutParseError(f"layout too short: {text!r}", offset)

        content = text[2:-1]
        if text[1] != OPEN_BRACE or text[-1] != CLOSE_BRACE or not content:
            raise LayoutParseError(f"malformed panel {text!r}", offset)

        kind = PanelKind.from_tag(text[0])
        if kind is None:
            raise LayoutParseError(f"unknown panel tag {text[0]!r}", offset)

        if kind is PanelKind.WINDOW:
            return self._parse_window(content, offset + 2, rect)
        return self._parse_splitter(kind, content, offset + 2, rect)

    def _parse_window(self, content: str, offset: int, rect: Rect) -> int:
        if not (content.isascii() and content.isdigit()):
            raise LayoutParseError(f"invalid window id {content!r}", offset)

        panel_id = int(content)
        if panel_id in self.tree.panels:
            raise LayoutParseError(f"duplicate window id {panel_id}", offset)

        panel = Panel(
            kind=PanelKind.WINDOW,
            rect=leaf_rect(rect, self.splitter_size),
            id=panel_id,
        )
        index = self.tree.add(panel)
        self.tree.panels[panel_id] = index
        return index

    def _parse_splitter(self, kind: PanelKind, content: str, offset: int, rect: Rect) -> int:
        panel = Panel(
            kind=kind,
            rect=rect,
            splitter=SplitterProperties(position=initial_position(kind, rect)),
        )
        index = self.tree.add(panel)
        self.tree.splitters.append(index)
        refresh_splitter_rect(panel, self.splitter_size)

        first, second, second_offset = self._split_children(content, offset)
        first_rect, second_rect = split_rect(panel)

        first_index = self._parse_node(first, offset, first_rect)
        second_index = self._parse_node(second, second_offset, second_rect)
        panel.children = (first_index, second_index)
        return index

    def _split_children(self, content: str, offset: int) -> tuple[str, str, int]:
        """
        Split ``a:b`` where both sides are bracketed layouts.

        The first child ends where the brace depth returns to zero; a plain
        search for ':' would stop inside a nested first child.
        """
        depth = 0
        for i, char in enumerate(content):
            if char == OPEN_BRACE:
                depth += 1
            elif char == CLOSE_BRACE:
                depth -= 1
                if depth < 0:
                    break
                if depth == 0:
                    pivot = i + 1
                    if pivot >= len(content) or content[pivot] != SEPARATOR:
                        raise LayoutParseError(
                            f"expected {SEPARATOR!r} between child layouts", offset + pivot
                        )
                    second = content[pivot + 1:]
                    if not second:
                        raise LayoutParseError("missing second child layout", offset + pivot + 1)
                    return content[:pivot], second, offset + pivot + 1

        raise LayoutParseError("cannot locate the two child layouts", offset)


def parse_layout(description: str, rect: Rect, splitter_size: int = SPLITTER_SIZE) -> PanelTree:
    """Parse a layout description into a panel tree inside ``rect``."""
    return LayoutParser(splitter_size=splitter_size).parse(description, rect)
