"""Write panel trees back out as layout descriptions."""

from __future__ import annotations

from splitter_layout.core.constants import CLOSE_BRACE, OPEN_BRACE, SEPARATOR
from splitter_layout.core.panel import PanelTree


def format_layout(tree: PanelTree, index: int = 0) -> str:
    """
    Produce the canonical description of the subtree at ``index``.

    Geometry is not part of a description, so only topology and window
    ids are written.
    """
    panel = tree[index]
    if panel.children is None:
        return f"{panel.kind.tag}{OPEN_BRACE}{panel.id}{CLOSE_BRACE}"

    first, second = panel.children
    return (
        f"{panel.kind.tag}{OPEN_BRACE}"
        f"{format_layout(tree, first)}{SEPARATOR}{format_layout(tree, second)}"
        f"{CLOSE_BRACE}"
    )
