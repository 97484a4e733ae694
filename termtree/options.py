"""Construction-time options for the treeview widget."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from .canvas import COLOR_WHITE

DEFAULT_INDENTATION = 2
DEFAULT_EXPANDED_ICON = "▼"
DEFAULT_COLLAPSED_ICON = "▶"
DEFAULT_LEAF_ICON = "→"
DEFAULT_SPINNER_FRAMES: tuple[str, ...] = ("◐", "◓", "◑", "◒")
DEFAULT_SPINNER_INTERVAL_SECONDS = 0.2
DEFAULT_SCROLL_STEP = 5
DEFAULT_DEBOUNCE_SECONDS = 0.1

# Other frame sets that render well in most terminals:
#   ("←", "↖", "↑", "↗", "→", "↘", "↓", "↙")
#   ("◰", "◳", "◲", "◱")
#   ("◴", "◷", "◶", "◵")
#   ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")


@dataclass(frozen=True)
class TreeviewOptions:
    """Icons, colors, and timing knobs applied when the widget is built."""

    indentation: int = DEFAULT_INDENTATION
    expanded_icon: str = DEFAULT_EXPANDED_ICON
    collapsed_icon: str = DEFAULT_COLLAPSED_ICON
    leaf_icon: str = DEFAULT_LEAF_ICON
    spinner_frames: tuple[str, ...] = DEFAULT_SPINNER_FRAMES
    label_color: str = COLOR_WHITE
    truncate: bool = False
    enable_logging: bool = False
    log_path: Path | None = None
    spinner_interval: float = DEFAULT_SPINNER_INTERVAL_SECONDS
    scroll_step: int = DEFAULT_SCROLL_STEP
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    expand_roots: bool = True
    on_activation_error: Callable[..., None] | None = field(default=None, compare=False)

    def normalized(self) -> TreeviewOptions:
        """Return a copy with empty/invalid values replaced by defaults.

        An empty leaf icon, a non-positive indentation and a non-positive
        spinner interval fall back to the defaults; spinner frames are
        coerced to a tuple.
        """
        return replace(
            self,
            indentation=self.indentation if self.indentation > 0 else DEFAULT_INDENTATION,
            leaf_icon=self.leaf_icon or DEFAULT_LEAF_ICON,
            spinner_frames=tuple(self.spinner_frames),
            scroll_step=max(1, self.scroll_step),
            debounce_seconds=max(0.0, self.debounce_seconds),
            spinner_interval=(
                self.spinner_interval if self.spinner_interval > 0 else DEFAULT_SPINNER_INTERVAL_SECONDS
            ),
        )


@dataclass(frozen=True)
class WidgetOptions:
    """Layout hints a hosting container reads before placing the widget."""

    minimum_width: int = 10
    minimum_height: int = 3
    want_keyboard: str = "focused"
    want_mouse: str = "widget"
    exclusive_keyboard_on_focus: bool = True


__all__ = [
    "DEFAULT_COLLAPSED_ICON",
    "DEFAULT_DEBOUNCE_SECONDS",
    "DEFAULT_EXPANDED_ICON",
    "DEFAULT_INDENTATION",
    "DEFAULT_LEAF_ICON",
    "DEFAULT_SCROLL_STEP",
    "DEFAULT_SPINNER_FRAMES",
    "DEFAULT_SPINNER_INTERVAL_SECONDS",
    "TreeviewOptions",
    "WidgetOptions",
]
