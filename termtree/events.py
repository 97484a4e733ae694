"""Input event types and normalization from terminal key tokens.

Hosts either build ``MouseEvent``/``KeyEvent`` directly or feed the normalized
tokens produced by a raw-mode key reader (``"UP"``, ``"ENTER_CR"``,
``"MOUSE_LEFT_DOWN:<col>:<row>"`` ...) through ``event_from_key_token``.
"""

from __future__ import annotations

from dataclasses import dataclass

BUTTON_LEFT = "left"
BUTTON_RELEASE = "release"
BUTTON_WHEEL_UP = "wheel_up"
BUTTON_WHEEL_DOWN = "wheel_down"

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_SPACE = "space"


@dataclass(frozen=True)
class MouseEvent:
    """Mouse event at an absolute, 0-based screen position."""

    button: str
    x: int
    y: int


@dataclass(frozen=True)
class KeyEvent:
    """Keyboard event; ``key`` is one of the ``KEY_*`` names or an opaque string."""

    key: str


_KEY_TOKENS: dict[str, str] = {
    "UP": KEY_UP,
    "DOWN": KEY_DOWN,
    "ENTER": KEY_ENTER,
    "ENTER_CR": KEY_ENTER,
    "ENTER_LF": KEY_ENTER,
    " ": KEY_SPACE,
}

_MOUSE_PREFIXES: tuple[tuple[str, str], ...] = (
    ("MOUSE_LEFT_DOWN:", BUTTON_LEFT),
    ("MOUSE_LEFT_UP:", BUTTON_RELEASE),
    ("MOUSE_WHEEL_UP:", BUTTON_WHEEL_UP),
    ("MOUSE_WHEEL_DOWN:", BUTTON_WHEEL_DOWN),
)


def _parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def event_from_key_token(token: str) -> MouseEvent | KeyEvent | None:
    """Translate one normalized key token into a widget event.

    Mouse tokens carry 1-based terminal columns/rows and are converted to
    0-based cell coordinates. Malformed mouse tokens and empty tokens (read
    timeouts) yield ``None``; unknown keys pass through as opaque
    ``KeyEvent`` values.
    """
    if not token:
        return None
    for prefix, button in _MOUSE_PREFIXES:
        if token.startswith(prefix):
            col, row = _parse_mouse_col_row(token)
            if col is None or row is None:
                return None
            return MouseEvent(button=button, x=col - 1, y=row - 1)
    if token.startswith("MOUSE"):
        return None
    return KeyEvent(key=_KEY_TOKENS.get(token, token))


__all__ = [
    "BUTTON_LEFT",
    "BUTTON_RELEASE",
    "BUTTON_WHEEL_DOWN",
    "BUTTON_WHEEL_UP",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_SPACE",
    "KEY_UP",
    "KeyEvent",
    "MouseEvent",
    "event_from_key_token",
]
