"""Forest attachment: ID, level, and parent assignment plus an ID index."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from ..errors import DuplicateNodeIdError
from .types import TreeNode

logger = logging.getLogger(__name__)


def node_id_for(path: str, label: str) -> str:
    """Return the ID for a node labeled ``label`` under parent ID ``path``."""
    if not path:
        return label
    return f"{path}/{label}"


class NodeStore:
    """Owns the root list and resolves node IDs to nodes.

    Parent links are IDs, so ancestor walks go through the index instead of
    object back-references.
    """

    def __init__(self, roots: Sequence[TreeNode]) -> None:
        self.roots: list[TreeNode] = list(roots)
        self._by_id: dict[str, TreeNode] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, node_id: str) -> TreeNode | None:
        return self._by_id.get(node_id)

    def parent_of(self, node: TreeNode) -> TreeNode | None:
        if node.parent_id is None:
            return None
        return self._by_id.get(node.parent_id)

    def ancestors(self, node: TreeNode) -> list[TreeNode]:
        """Return ancestors nearest-first, ending with the root."""
        out: list[TreeNode] = []
        parent = self.parent_of(node)
        while parent is not None:
            out.append(parent)
            parent = self.parent_of(parent)
        return out

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield every node in pre-order, ignoring expansion state."""
        stack = list(reversed(self.roots))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _register(self, node: TreeNode) -> None:
        if node.id in self._by_id:
            raise DuplicateNodeIdError(node.id)
        self._by_id[node.id] = node


def _assign(store: NodeStore, node: TreeNode, parent_id: str | None, level: int, path: str) -> None:
    """Depth-first assignment of parent link, level, and ID."""
    node.parent_id = parent_id
    node.level = level
    node.id = node_id_for(path, node.label)
    store._register(node)
    for child in node.children:
        _assign(store, child, node.id, level + 1, node.id)


def attach(roots: Sequence[TreeNode]) -> NodeStore:
    """Attach ``roots`` as a forest and return its ``NodeStore``.

    Raises ``DuplicateNodeIdError`` when two nodes resolve to the same ID,
    e.g. siblings sharing a label. The input must not contain cycles.
    """
    store = NodeStore(roots)
    for root in store.roots:
        _assign(store, root, None, 0, "")
    logger.debug("Attached forest: %d roots, %d nodes", len(store.roots), len(store))
    return store
