"""Tree-pane row layout and painting into an external render sink.

Row layout is shared with mouse hit-testing so a click lands on exactly the
cells that were painted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..canvas import COLOR_BLACK, COLOR_DEFAULT, COLOR_WHITE, CellStyle, Point, Rect, RenderSink
from ..options import TreeviewOptions
from ..text import char_display_width, clip_to_width, display_width, truncate_to_width
from ..tree_model import TreeNode

logger = logging.getLogger(__name__)

SCROLL_UP_INDICATOR = "↑"
SCROLL_DOWN_INDICATOR = "↓"
SELECTED_STYLE = CellStyle(fg=COLOR_BLACK, bg=COLOR_WHITE)
INDICATOR_STYLE = CellStyle(fg=COLOR_WHITE, bg=COLOR_DEFAULT)


@dataclass(frozen=True)
class RowLayout:
    """Where one node's ``"<icon> <label>"`` text lands within its row."""

    x: int
    text: str
    width: int

    @property
    def end(self) -> int:
        return self.x + self.width


class TreeRowRenderer:
    """Format and paint visible rows according to widget options."""

    def __init__(self, options: TreeviewOptions) -> None:
        self.options = options

    def prefix(self, node: TreeNode, spinner_frame: int | None) -> str:
        """Return the icon for ``node``; ``spinner_frame`` is ``None`` when idle."""
        frames = self.options.spinner_frames
        if spinner_frame is not None and frames:
            return frames[spinner_frame % len(frames)]
        if node.children:
            return self.options.expanded_icon if node.expanded else self.options.collapsed_icon
        return self.options.leaf_icon

    def layout(self, node: TreeNode, spinner_frame: int | None, canvas_width: int) -> RowLayout:
        """Compute indentation and the text as it will be drawn.

        With truncation enabled, text wider than the space right of the
        indentation is shortened with an ellipsis. Either way the span is
        clipped at the canvas edge.
        """
        x = node.level * self.options.indentation
        available = canvas_width - x
        text = f"{self.prefix(node, spinner_frame)} {node.label}"
        if self.options.truncate and display_width(text) > available:
            text = truncate_to_width(text, available)
        text = clip_to_width(text, available)
        return RowLayout(x=x, text=text, width=display_width(text))

    def draw(
        self,
        sink: RenderSink,
        rect: Rect,
        rows: Sequence[TreeNode],
        selected_id: str | None,
        spinner_frame_for: Callable[[str], int | None],
        show_scroll_up: bool,
        show_scroll_down: bool,
    ) -> None:
        """Paint ``rows`` top-down inside ``rect``.

        Exceptions raised by the sink propagate unchanged.
        """
        self._clear(sink, rect)
        for y, node in enumerate(rows[: rect.height]):
            layout = self.layout(node, spinner_frame_for(node.id), rect.width)
            style = SELECTED_STYLE if node.id == selected_id else CellStyle(fg=self.options.label_color)
            self._draw_text(sink, rect, layout, y, style)

        if show_scroll_up:
            sink.set_cell(Point(rect.x, rect.y), SCROLL_UP_INDICATOR, INDICATOR_STYLE)
        if show_scroll_down:
            sink.set_cell(Point(rect.x, rect.bottom - 1), SCROLL_DOWN_INDICATOR, INDICATOR_STYLE)

    @staticmethod
    def _clear(sink: RenderSink, rect: Rect) -> None:
        if rect == sink.area():
            sink.clear()
            return
        blank = CellStyle()
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                sink.set_cell(Point(x, y), " ", blank)

    @staticmethod
    def _draw_text(sink: RenderSink, rect: Rect, layout: RowLayout, y: int, style: CellStyle) -> None:
        logger.debug("Drawing label %r at X:%d Y:%d", layout.text, layout.x, y)
        col = layout.x
        for ch in layout.text:
            w = char_display_width(ch)
            if w == 0:
                # Zero-width marks have no cell of their own.
                continue
            if col + w > rect.width:
                break
            sink.set_cell(Point(rect.x + col, rect.y + y), ch, style)
            col += w
