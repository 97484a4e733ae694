"""Tree-pane input interpretation for navigation, scrolling, and activation.

The handlers translate mouse coordinates and key events into selection moves,
viewport scrolls, and node activations while staying thin on side effects:
activation itself is delegated to the widget through ``activate_node``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..events import (
    BUTTON_LEFT,
    BUTTON_RELEASE,
    BUTTON_WHEEL_DOWN,
    BUTTON_WHEEL_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_SPACE,
    KEY_UP,
    KeyEvent,
    MouseEvent,
)
from ..tree_model import TreeNode
from .rendering import TreeRowRenderer
from .state import TreePaneState

logger = logging.getLogger(__name__)

ACTIVATE_KEYS = frozenset({KEY_ENTER, KEY_SPACE})


class Debouncer:
    """Accept an event unless one was accepted less than ``window`` seconds ago.

    The comparison is strict: an event exactly ``window`` seconds after the
    last accepted one is accepted.
    """

    def __init__(self, window: float, monotonic: Callable[[], float] = time.monotonic) -> None:
        self.window = window
        self._monotonic = monotonic
        self._last_accepted: float | None = None

    def accept(self) -> bool:
        now = self._monotonic()
        if self._last_accepted is not None and now - self._last_accepted < self.window:
            return False
        self._last_accepted = now
        return True


class TreePaneInputHandlers:
    """Interpret mouse and keyboard events against shared tree-pane state.

    Clicks and activate keys have separate debouncers, so a key press right
    after a click is not swallowed.
    """

    def __init__(
        self,
        *,
        state: TreePaneState,
        renderer: TreeRowRenderer,
        activate_node: Callable[[TreeNode], bool],
        spinner_frame_for: Callable[[str], int | None],
        scroll_step: int,
        debounce_seconds: float,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Create handlers bound to shared pane state.

        Args:
            state: Mutable pane state updated in place.
            renderer: Row layout source used for horizontal hit-testing.
            activate_node: Widget hook that toggles branches and launches
                leaf callbacks; returns whether anything changed.
            spinner_frame_for: Busy-frame lookup, since a spinner icon can
                differ in width from the icon it replaces.
            scroll_step: Rows scrolled per wheel notch.
            debounce_seconds: Minimum interval between accepted left presses
                and between accepted activate keys.
            monotonic: Monotonic clock provider used for debouncing.
        """
        self._state = state
        self._renderer = renderer
        self._activate_node = activate_node
        self._spinner_frame_for = spinner_frame_for
        self._scroll_step = scroll_step
        self._click_debounce = Debouncer(debounce_seconds, monotonic)
        self._key_debounce = Debouncer(debounce_seconds, monotonic)

    def node_index_at(self, x: int, y: int) -> int | None:
        """Return the visible-row index under widget-relative ``(x, y)``.

        Only the painted icon+label span counts as a hit; indentation and the
        space right of the label do not.
        """
        state = self._state
        if y < 0 or y >= state.viewport.height:
            return None
        idx = y + state.viewport.scroll_offset
        if not (0 <= idx < len(state.rows)):
            return None
        node = state.rows[idx]
        layout = self._renderer.layout(node, self._spinner_frame_for(node.id), state.viewport.width)
        if layout.x <= x < layout.end:
            return idx
        return None

    def handle_mouse(self, event: MouseEvent) -> bool:
        """Handle one mouse event; return whether pane state changed."""
        if event.button == BUTTON_RELEASE:
            return False
        state = self._state
        x = event.x - state.origin.x
        y = event.y - state.origin.y

        if event.button == BUTTON_LEFT:
            if not self._click_debounce.accept():
                logger.debug("Ignored duplicate left click at (X:%d, Y:%d)", x, y)
                return False
            return self._handle_click(x, y)
        if event.button == BUTTON_WHEEL_UP:
            logger.debug("Mouse wheel up")
            return state.viewport.scroll_by(-self._scroll_step)
        if event.button == BUTTON_WHEEL_DOWN:
            logger.debug("Mouse wheel down")
            return state.viewport.scroll_by(self._scroll_step)
        return False

    def _handle_click(self, x: int, y: int) -> bool:
        idx = self.node_index_at(x, y)
        if idx is None:
            logger.debug("No node found at position: (X:%d, Y:%d)", x, y)
            return False
        node = self._state.rows[idx]
        logger.debug("Node %r (ID: %s) clicked at (X:%d, Y:%d)", node.label, node.id, x, y)
        self._state.selection.select(node)
        self._activate_node(node)
        return True

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle one key event; return whether pane state changed."""
        state = self._state
        if event.key == KEY_DOWN:
            return state.selection.next(state.rows, state.viewport)
        if event.key == KEY_UP:
            return state.selection.previous(state.rows, state.viewport)
        if event.key not in ACTIVATE_KEYS:
            return False

        if not self._key_debounce.accept():
            logger.debug("Ignored rapid activate key press")
            return False
        idx = state.selection.resolve(state.rows)
        if idx < 0:
            return False
        self._activate_node(state.rows[idx])
        return True
