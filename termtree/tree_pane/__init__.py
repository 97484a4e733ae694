"""Tree pane: viewport, selection, input handling, and row rendering."""

from .events import Debouncer, TreePaneInputHandlers
from .rendering import RowLayout, TreeRowRenderer
from .selection import Selection
from .state import TreePaneState
from .viewport import Viewport

__all__ = [
    "Debouncer",
    "RowLayout",
    "Selection",
    "TreePaneInputHandlers",
    "TreePaneState",
    "TreeRowRenderer",
    "Viewport",
]
