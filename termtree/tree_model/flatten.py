"""Visible-row flattening honoring per-node expansion state."""

from __future__ import annotations

from collections.abc import Sequence

from .types import TreeNode


def visible_nodes(roots: Sequence[TreeNode]) -> list[TreeNode]:
    """Return nodes in draw order: pre-order, descending only into expanded nodes."""
    out: list[TreeNode] = []

    def walk(node: TreeNode) -> None:
        out.append(node)
        if node.expanded:
            for child in node.children:
                walk(child)

    for root in roots:
        walk(root)
    return out


def subtree_height(node: TreeNode) -> int:
    """Return the number of rows ``node`` occupies, its visible descendants included."""
    height = 1
    if node.expanded:
        for child in node.children:
            height += subtree_height(child)
    return height


def visible_count(roots: Sequence[TreeNode]) -> int:
    """Return ``len(visible_nodes(roots))`` without building the list."""
    return sum(subtree_height(root) for root in roots)
