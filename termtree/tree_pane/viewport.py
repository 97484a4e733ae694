"""Scroll offset and canvas-size bookkeeping for the tree pane."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from ..errors import CanvasTooSmallError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Viewport:
    """Window of ``height`` consecutive rows positioned by ``scroll_offset``.

    Every mutator re-clamps, so ``0 <= scroll_offset <= max_offset`` holds
    between calls.
    """

    def __init__(self, width: int = 0, height: int = 0, total: int = 0) -> None:
        self.width = width
        self.height = height
        self.total = total
        self.scroll_offset = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.total - self.height)

    def resize(self, width: int, height: int) -> None:
        """Store new canvas dimensions; raise when either is not positive."""
        if width <= 0 or height <= 0:
            raise CanvasTooSmallError(width, height)
        self.width = width
        self.height = height
        self.clamp()

    def set_total(self, total: int) -> None:
        self.total = max(0, total)
        self.clamp()

    def clamp(self) -> None:
        clamped = min(max(self.scroll_offset, 0), self.max_offset)
        if clamped != self.scroll_offset:
            logger.debug("Clamped scroll offset %d -> %d", self.scroll_offset, clamped)
            self.scroll_offset = clamped

    def scroll_by(self, delta: int) -> bool:
        """Shift by ``delta`` rows (positive scrolls down); return whether it moved."""
        before = self.scroll_offset
        self.scroll_offset += delta
        self.clamp()
        return self.scroll_offset != before

    def visible_range(self) -> range:
        end = min(self.scroll_offset + self.height, self.total)
        return range(self.scroll_offset, max(self.scroll_offset, end))

    def visible_slice(self, rows: Sequence[T]) -> list[T]:
        window = self.visible_range()
        return list(rows[window.start : window.stop])

    def show_scroll_up(self) -> bool:
        return self.scroll_offset > 0

    def show_scroll_down(self) -> bool:
        return self.scroll_offset + self.height < self.total

    def reveal(self, index: int) -> None:
        """Scroll the minimal amount that brings row ``index`` into view.

        No-op until the first resize, when the window height is unknown.
        """
        if self.height <= 0:
            return
        if index < self.scroll_offset:
            self.scroll_offset = index
        elif index >= self.scroll_offset + self.height:
            self.scroll_offset = index - self.height + 1
        self.clamp()
