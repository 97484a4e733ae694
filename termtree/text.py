"""Terminal-cell text measurement, clipping, and truncation.

Widths are measured in display columns so that rows line up with the cells
the render sink actually paints, including East Asian wide characters.
"""

from __future__ import annotations

import unicodedata

ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks, zero-width format characters and control characters
    (tab, newline, escape ...) consume no columns, East Asian wide/fullwidth
    characters consume two. Zero-width characters are never painted, so a
    control byte in a label cannot reach the terminal.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in {"Cc", "Cf", "Mn", "Me"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the total column width of ``text``."""
    return sum(char_display_width(ch) for ch in text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns.

    A wide character that would straddle the limit is dropped rather than
    split.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def truncate_to_width(text: str, max_cols: int, ellipsis: str = ELLIPSIS) -> str:
    """Shorten ``text`` to ``max_cols`` columns, ending with ``ellipsis``.

    Text that already fits is returned unchanged. The result, marker
    included, never exceeds ``max_cols``; when not even the marker fits the
    result is empty.
    """
    if display_width(text) <= max_cols:
        return text
    ellipsis_width = display_width(ellipsis)
    if max_cols < ellipsis_width:
        return ""
    return clip_to_width(text, max_cols - ellipsis_width) + ellipsis


__all__ = [
    "ELLIPSIS",
    "char_display_width",
    "clip_to_width",
    "display_width",
    "truncate_to_width",
]
