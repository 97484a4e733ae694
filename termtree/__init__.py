"""Expandable tree widget for cell-based terminal UIs."""

import logging

from .canvas import CellStyle, Point, Rect, RenderSink
from .config import load_treeview_options, save_treeview_options
from .errors import (
    CallbackFailedError,
    CanvasTooSmallError,
    DrawBoundsError,
    DuplicateNodeIdError,
    NoSelectionError,
    TreeviewError,
)
from .events import KeyEvent, MouseEvent, event_from_key_token
from .options import TreeviewOptions, WidgetOptions
from .tree_model import TreeNode
from .treeview import Treeview

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CallbackFailedError",
    "CanvasTooSmallError",
    "CellStyle",
    "DrawBoundsError",
    "DuplicateNodeIdError",
    "KeyEvent",
    "MouseEvent",
    "NoSelectionError",
    "Point",
    "Rect",
    "RenderSink",
    "TreeNode",
    "Treeview",
    "TreeviewError",
    "TreeviewOptions",
    "WidgetOptions",
    "event_from_key_token",
    "load_treeview_options",
    "save_treeview_options",
]
