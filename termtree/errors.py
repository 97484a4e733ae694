"""Exception types raised by the treeview widget."""

from __future__ import annotations


class TreeviewError(Exception):
    """Base class for all treeview errors."""


class CanvasTooSmallError(TreeviewError, ValueError):
    """The drawing area has no usable rows or columns."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"canvas too small: {width}x{height}")
        self.width = width
        self.height = height


class DrawBoundsError(TreeviewError, ValueError):
    """The target rectangle does not lie inside the render sink's area."""


class NoSelectionError(TreeviewError, LookupError):
    """No node is selected (empty tree or nothing visible)."""

    def __init__(self) -> None:
        super().__init__("no option selected")


class DuplicateNodeIdError(TreeviewError, ValueError):
    """Two nodes resolved to the same ID while attaching the forest."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"duplicate node id: {node_id!r}")
        self.node_id = node_id


class CallbackFailedError(TreeviewError, RuntimeError):
    """A leaf callback reported failure by returning ``False``."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"callback for node {node_id!r} reported failure")
        self.node_id = node_id


__all__ = [
    "CallbackFailedError",
    "CanvasTooSmallError",
    "DrawBoundsError",
    "DuplicateNodeIdError",
    "NoSelectionError",
    "TreeviewError",
]
