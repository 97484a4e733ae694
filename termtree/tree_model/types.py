"""Tree node datatype shared by the tree model and the tree pane."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One labeled entry of the forest.

    ``label``, ``children``, ``expanded``, ``on_activate`` and ``value`` are
    supplied by the caller. ``id``, ``level`` and ``parent_id`` are assigned
    when the forest is attached to a widget and must not be set by hand.
    The parent owns its children; a child only records its parent's ID.
    """

    label: str
    children: list[TreeNode] = field(default_factory=list, repr=False)
    expanded: bool = False
    on_activate: Callable[[], object] | None = field(default=None, repr=False)
    value: Any = field(default=None, repr=False)
    id: str = field(default="", init=False)
    level: int = field(default=0, init=False)
    parent_id: str | None = field(default=None, init=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
