"""Treeview widget: expandable tree with viewport, input handling, and spinners.

One coarse lock guards pane state (rows, viewport, selection, debounce
timestamps) for the whole of each public call. Busy state lives in the
spinner scheduler; the widget posts commands to it while holding its own
lock, and neither the scheduler nor activation threads ever take the widget
lock.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Sequence

from .canvas import Point, Rect, RenderSink
from .errors import DrawBoundsError, NoSelectionError
from .events import KeyEvent, MouseEvent
from .logging_setup import configure_debug_log
from .options import TreeviewOptions, WidgetOptions
from .runtime import LeafActivationRunner, SpinnerScheduler
from .tree_model import TreeNode, attach
from .tree_pane import TreePaneInputHandlers, TreePaneState, TreeRowRenderer

logger = logging.getLogger(__name__)


class Treeview:
    """Interactive hierarchical list drawn into a host-provided render sink.

    Roots are expanded and the first row selected at construction. The
    spinner ticker starts immediately (unless no spinner frames are
    configured) and runs until ``close``.
    """

    def __init__(
        self,
        nodes: Sequence[TreeNode],
        options: TreeviewOptions | None = None,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        start_spinner: bool = True,
    ) -> None:
        """Attach ``nodes`` as the forest and start background ticking.

        Args:
            nodes: Root nodes built by the caller; IDs, levels and parent
                links are assigned here.
            options: Icons, colors, and timing; defaults when omitted.
            monotonic: Clock used for click/key debouncing.
            start_spinner: Launch the ticker thread. Tests pass ``False`` and
                drive frames through ``tick_spinner``.

        Raises:
            DuplicateNodeIdError: Two nodes resolve to the same ID.
            OSError: Debug logging was requested but the log file cannot be
                opened.
        """
        self.options = (options or TreeviewOptions()).normalized()
        if self.options.enable_logging:
            log_path = configure_debug_log(self.options.log_path)
            logger.info("Treeview debug logging to %s", log_path)

        self._lock = threading.Lock()
        self._state = TreePaneState(store=attach(nodes))
        if self.options.expand_roots:
            for root in self._state.store.roots:
                root.expanded = True
        self._state.refresh_rows()
        if self._state.rows:
            self._state.selection.select(self._state.rows[0])

        self._spinner = SpinnerScheduler(
            frame_count=len(self.options.spinner_frames),
            interval=self.options.spinner_interval,
        )
        self._activations = LeafActivationRunner(self._spinner, on_error=self.options.on_activation_error)
        self._renderer = TreeRowRenderer(self.options)
        self._input = TreePaneInputHandlers(
            state=self._state,
            renderer=self._renderer,
            activate_node=self._activate_locked,
            spinner_frame_for=self._spinner.frame_for,
            scroll_step=self.options.scroll_step,
            debounce_seconds=self.options.debounce_seconds,
            monotonic=monotonic,
        )
        self._closed = False
        if start_spinner:
            self._spinner.start()

    def __enter__(self) -> Treeview:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _activate_locked(self, node: TreeNode) -> bool:
        """Toggle a branch or launch a leaf callback. Caller holds the lock."""
        logger.debug("Handling activation for: %s", node.id)
        if node.children:
            return self._state.set_expanded(node, not node.expanded)
        return self._activations.activate(node)

    # Drawing

    def draw(self, sink: RenderSink, rect: Rect | None = None) -> None:
        """Render visible rows into ``rect`` (the whole sink area by default).

        Raises:
            DrawBoundsError: ``rect`` is not inside ``sink.area()``.
            CanvasTooSmallError: ``rect`` has no rows or columns.
        """
        area = sink.area()
        target = area if rect is None else rect
        if not area.contains_rect(target):
            raise DrawBoundsError(f"draw rectangle {target} outside sink area {area}")
        with self._lock:
            state = self._state
            state.viewport.resize(target.width, target.height)
            state.origin = Point(target.x, target.y)
            state.refresh_rows()
            logger.debug(
                "Draw: scroll_offset=%d total=%d height=%d",
                state.viewport.scroll_offset,
                state.viewport.total,
                state.viewport.height,
            )
            self._renderer.draw(
                sink,
                target,
                state.viewport.visible_slice(state.rows),
                state.selection.node_id,
                self._spinner.frame_for,
                state.viewport.show_scroll_up(),
                state.viewport.show_scroll_down(),
            )

    def resize(self, width: int, height: int) -> None:
        """Set canvas dimensions without drawing; raises ``CanvasTooSmallError``."""
        with self._lock:
            self._state.viewport.resize(width, height)

    # Input

    def mouse(self, event: MouseEvent) -> bool:
        """Handle a mouse event; return whether a redraw is needed."""
        with self._lock:
            return self._input.handle_mouse(event)

    def keyboard(self, event: KeyEvent) -> bool:
        """Handle a key event; return whether a redraw is needed."""
        with self._lock:
            return self._input.handle_key(event)

    # Programmatic surface

    def select(self) -> str:
        """Return the selected node's label; raise ``NoSelectionError`` if none."""
        with self._lock:
            node = self._state.selected_node()
        if node is None:
            raise NoSelectionError()
        return node.label

    def selected_node(self) -> TreeNode | None:
        with self._lock:
            return self._state.selected_node()

    def next(self) -> bool:
        with self._lock:
            return self._state.selection.next(self._state.rows, self._state.viewport)

    def previous(self) -> bool:
        with self._lock:
            return self._state.selection.previous(self._state.rows, self._state.viewport)

    def visible_nodes(self) -> list[TreeNode]:
        with self._lock:
            return list(self._state.rows)

    @property
    def scroll_offset(self) -> int:
        with self._lock:
            return self._state.viewport.scroll_offset

    def node(self, node_id: str) -> TreeNode | None:
        return self._state.store.get(node_id)

    def set_expanded(self, node_id: str, expanded: bool) -> bool:
        """Expand or collapse a node by ID; return whether visible rows changed.

        Raises ``KeyError`` for an unknown ID.
        """
        with self._lock:
            node = self._state.store.get(node_id)
            if node is None:
                raise KeyError(node_id)
            return self._state.set_expanded(node, expanded)

    def is_busy(self, node_id: str) -> bool:
        return self._spinner.is_busy(node_id)

    def spinner_frame(self, node_id: str) -> int | None:
        return self._spinner.frame_for(node_id)

    def tick_spinner(self) -> None:
        """Advance spinner frames once, as the ticker thread does."""
        self._spinner.tick()

    def wait_for_activations(self, timeout: float | None = None) -> None:
        self._activations.join(timeout)

    def widget_options(self) -> WidgetOptions:
        return WidgetOptions()

    def close(self) -> None:
        """Stop the spinner ticker. Idempotent; in-flight callbacks keep running."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._spinner.stop()
