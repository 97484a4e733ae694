"""Debug log handler installation for the package logger."""

from __future__ import annotations

import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from termtree import logging_setup


def _file_handlers() -> list[logging.Handler]:
    logger = logging.getLogger(logging_setup.LOGGER_NAME)
    return [handler for handler in logger.handlers if isinstance(handler, RotatingFileHandler)]


class DebugLogTests(unittest.TestCase):
    def test_configure_is_idempotent_and_writes_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / logging_setup.DEBUG_LOG_FILENAME
            before = len(_file_handlers())
            resolved = logging_setup.configure_debug_log(log_path)
            try:
                logging_setup.configure_debug_log(log_path)
                self.assertEqual(len(_file_handlers()), before + 1)

                logging.getLogger("termtree.tree_pane").debug("hello from test")
                for handler in _file_handlers():
                    handler.flush()
                self.assertIn("hello from test", resolved.read_text(encoding="utf-8"))
            finally:
                logging_setup.remove_debug_log(log_path)
            self.assertEqual(len(_file_handlers()), before)

    def test_remove_unknown_path_is_noop(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logging_setup.remove_debug_log(Path(tmp) / "never.log")

    def test_default_path_uses_debug_filename(self) -> None:
        self.assertEqual(logging_setup.default_log_path().name, "treeview_debug.log")


if __name__ == "__main__":
    unittest.main()
