"""User-level treeview defaults persisted as JSON.

Hosts call ``load_treeview_options`` to start from the icons, indentation,
and scroll step a user saved earlier, and ``save_treeview_options`` to store
new ones. A missing or broken file never stops a widget from being built.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

from platformdirs import user_config_dir

from .options import TreeviewOptions

logger = logging.getLogger(__name__)

APP_NAME = "termtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_STRING_KEYS = ("expanded_icon", "collapsed_icon", "leaf_icon", "label_color")


def load_config() -> dict[str, object]:
    """Return the saved defaults as a dict; ``{}`` means no overrides.

    A file that is absent, unreadable, not valid JSON, or not a JSON object
    reads as no overrides.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring config %s: top level is %s", CONFIG_PATH, type(data).__name__)
        return {}
    return data


def save_config(data: dict[str, object]) -> bool:
    """Write ``data`` to the defaults file; return whether it was written.

    A read-only or unusable config directory leaves the widget running on
    its in-memory options.
    """
    try:
        payload = json.dumps(data, indent=2, sort_keys=True)
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        logger.debug("Could not write config %s", CONFIG_PATH, exc_info=True)
        return False
    return True


def _positive_int(value: object) -> int | None:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _spinner_frames(value: object) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    frames = tuple(item for item in value if isinstance(item, str) and item)
    if len(frames) != len(value):
        return None
    return frames


def options_from_config(data: dict[str, object], base: TreeviewOptions | None = None) -> TreeviewOptions:
    """Overlay recognized config keys onto ``base`` options.

    Each key is type-checked independently; invalid values are skipped and
    the corresponding ``base`` value is kept.
    """
    options = base or TreeviewOptions()
    updates: dict[str, object] = {}

    for key in _STRING_KEYS:
        value = data.get(key)
        if isinstance(value, str) and value:
            updates[key] = value

    indentation = _positive_int(data.get("indentation"))
    if indentation is not None:
        updates["indentation"] = indentation

    scroll_step = _positive_int(data.get("scroll_step"))
    if scroll_step is not None:
        updates["scroll_step"] = scroll_step

    truncate = data.get("truncate")
    if isinstance(truncate, bool):
        updates["truncate"] = truncate

    frames = _spinner_frames(data.get("spinner_frames"))
    if frames is not None:
        updates["spinner_frames"] = frames

    return replace(options, **updates)


def load_treeview_options(base: TreeviewOptions | None = None) -> TreeviewOptions:
    """Return ``base`` options updated with the persisted user defaults."""
    return options_from_config(load_config(), base)


def save_treeview_options(options: TreeviewOptions) -> bool:
    """Store the config-backed subset of ``options``, keeping unrelated keys."""
    config = load_config()
    config.update(
        {
            "indentation": options.indentation,
            "expanded_icon": options.expanded_icon,
            "collapsed_icon": options.collapsed_icon,
            "leaf_icon": options.leaf_icon,
            "spinner_frames": list(options.spinner_frames),
            "label_color": options.label_color,
            "truncate": bool(options.truncate),
            "scroll_step": options.scroll_step,
        }
    )
    return save_config(config)
