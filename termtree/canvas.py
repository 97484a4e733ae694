"""Render-sink interface consumed by the treeview renderer.

The widget never owns a canvas. Hosts pass any object with ``set_cell``,
``clear`` and ``area`` and the widget paints into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

COLOR_DEFAULT = "default"
COLOR_BLACK = "black"
COLOR_WHITE = "white"


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Axis-aligned cell rectangle; ``x``/``y`` is the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains_rect(self, other: Rect) -> bool:
        """Return whether ``other`` lies fully inside this rectangle."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True)
class CellStyle:
    """Foreground/background color names for one cell."""

    fg: str = COLOR_DEFAULT
    bg: str = COLOR_DEFAULT


class RenderSink(Protocol):
    def set_cell(self, point: Point, char: str, style: CellStyle) -> None: ...

    def clear(self) -> None: ...

    def area(self) -> Rect: ...


__all__ = [
    "COLOR_BLACK",
    "COLOR_DEFAULT",
    "COLOR_WHITE",
    "CellStyle",
    "Point",
    "Rect",
    "RenderSink",
]
