"""Debug log wiring for the ``termtree`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``; nothing is written
anywhere until a widget is created with ``enable_logging=True``, which attaches
one rotating file handler to the package logger.
"""

from __future__ import annotations

import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "termtree"
DEBUG_LOG_FILENAME = "treeview_debug.log"

_lock = threading.Lock()
_handlers: dict[Path, logging.Handler] = {}


def default_log_path() -> Path:
    """Return the per-user debug log path."""
    return Path(user_log_dir("termtree", appauthor=False)) / DEBUG_LOG_FILENAME


def _make_file_handler(file_path: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=2,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure_debug_log(path: Path | None = None) -> Path:
    """Attach a DEBUG file handler to the package logger and return its path.

    Idempotent per resolved path: widgets sharing a log file share a handler.
    Raises ``OSError`` when the log directory cannot be created or the file
    cannot be opened.
    """
    file_path = (path or default_log_path()).expanduser().resolve()
    with _lock:
        if file_path in _handlers:
            return file_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = _make_file_handler(file_path)
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(handler)
        _handlers[file_path] = handler
    return file_path


def remove_debug_log(path: Path | None = None) -> None:
    """Detach and close the handler installed for ``path``, if any."""
    file_path = (path or default_log_path()).expanduser().resolve()
    with _lock:
        handler = _handlers.pop(file_path, None)
    if handler is None:
        return
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()
