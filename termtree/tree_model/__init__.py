"""Tree model: node type, forest attachment, and visible-row flattening."""

from .build import NodeStore, attach, node_id_for
from .flatten import subtree_height, visible_count, visible_nodes
from .types import TreeNode

__all__ = [
    "NodeStore",
    "TreeNode",
    "attach",
    "node_id_for",
    "subtree_height",
    "visible_count",
    "visible_nodes",
]
