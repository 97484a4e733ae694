"""Mutable tree-pane state shared by input handlers and the renderer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..canvas import Point
from ..tree_model import NodeStore, TreeNode, visible_nodes
from .selection import Selection
from .viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class TreePaneState:
    """Forest, cached visible rows, viewport, selection, and widget origin.

    ``rows`` is a cache of the flattened forest; ``refresh_rows`` must run
    after any expansion change so the viewport is re-clamped against the new
    row count.
    """

    store: NodeStore
    viewport: Viewport = field(default_factory=Viewport)
    selection: Selection = field(default_factory=Selection)
    rows: list[TreeNode] = field(default_factory=list)
    origin: Point = Point(0, 0)

    def refresh_rows(self) -> None:
        self.rows = visible_nodes(self.store.roots)
        self.viewport.set_total(len(self.rows))

    def set_expanded(self, node: TreeNode, expanded: bool) -> bool:
        """Set ``node.expanded`` and re-flatten; return whether rows changed.

        Leaves are left untouched since they have nothing to reveal.
        """
        if not node.children or node.expanded == expanded:
            return False
        node.expanded = expanded
        self.refresh_rows()
        logger.debug("Toggled expansion for node: %s to %s", node.id, expanded)
        return True

    def selected_node(self) -> TreeNode | None:
        if self.selection.node_id is None:
            return None
        return self.store.get(self.selection.node_id)
