"""Selection cursor tracked by node ID across re-flattening."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..tree_model import TreeNode
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Selection:
    """Selected-node identity plus one-step movement through visible rows.

    Indices into the flattened sequence change whenever expansion changes, so
    only the node ID is stored and the index is looked up on demand.
    """

    def __init__(self, node_id: str | None = None) -> None:
        self.node_id = node_id

    def index_of(self, rows: Sequence[TreeNode]) -> int:
        """Return the selected row index, or -1 when not visible."""
        if self.node_id is None:
            return -1
        for idx, node in enumerate(rows):
            if node.id == self.node_id:
                return idx
        return -1

    def resolve(self, rows: Sequence[TreeNode]) -> int:
        """Return the selected index, falling back to the first visible row.

        Clears the selection and returns -1 when nothing is visible.
        """
        idx = self.index_of(rows)
        if idx >= 0:
            return idx
        if not rows:
            self.node_id = None
            return -1
        if self.node_id is not None:
            logger.debug("Selected node %r is hidden; falling back to %r", self.node_id, rows[0].id)
        self.node_id = rows[0].id
        return 0

    def select(self, node: TreeNode) -> None:
        self.node_id = node.id

    def clear(self) -> None:
        self.node_id = None

    def move(self, rows: Sequence[TreeNode], viewport: Viewport, step: int) -> bool:
        """Move ``step`` rows without wrapping; return whether selection changed.

        After moving, the viewport scrolls minimally to keep the selected row
        visible. Moving past either end is a no-op.
        """
        before = self.node_id
        idx = self.resolve(rows)
        if idx < 0:
            return before is not None
        target = idx + step
        if not (0 <= target < len(rows)):
            return self.node_id != before
        self.node_id = rows[target].id
        viewport.reveal(target)
        return True

    def next(self, rows: Sequence[TreeNode], viewport: Viewport) -> bool:
        return self.move(rows, viewport, 1)

    def previous(self, rows: Sequence[TreeNode], viewport: Viewport) -> bool:
        return self.move(rows, viewport, -1)
