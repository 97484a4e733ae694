"""Tests for config persistence and input sanitization.

Validates option overlays from user config and round-tripping.
Ensures malformed config data is safely ignored on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

import termtree
from termtree import config
from termtree.options import TreeviewOptions


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_file_loads_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("termtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_treeview_options(), TreeviewOptions())

    def test_malformed_or_non_object_json_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("termtree.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2, 3]\n", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_options_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = TreeviewOptions(
                indentation=4,
                expanded_icon="-",
                collapsed_icon="+",
                leaf_icon="*",
                spinner_frames=("|", "/", "-", "\\"),
                label_color="cyan",
                truncate=True,
                scroll_step=3,
            )
            with mock.patch("termtree.config.CONFIG_PATH", config_path):
                self.assertTrue(config.save_treeview_options(expected))
                self.assertEqual(config.load_treeview_options(), expected)

    def test_save_preserves_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("termtree.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "dark"})
                config.save_treeview_options(TreeviewOptions())
                saved = config.load_config()
            self.assertEqual(saved.get("theme"), "dark")
            self.assertEqual(saved.get("indentation"), 2)

    def test_invalid_values_keep_base_options(self) -> None:
        base = TreeviewOptions(indentation=3, label_color="green")
        loaded = config.options_from_config(
            {
                "indentation": True,
                "scroll_step": 0,
                "expanded_icon": "",
                "collapsed_icon": 7,
                "truncate": "yes",
                "spinner_frames": ["a", ""],
                "label_color": None,
            },
            base,
        )
        self.assertEqual(loaded, base)

    def test_valid_values_overlay_independently(self) -> None:
        loaded = config.options_from_config(
            {"indentation": 6, "truncate": True, "spinner_frames": "abc", "leaf_icon": "•"}
        )
        self.assertEqual(loaded.indentation, 6)
        self.assertTrue(loaded.truncate)
        self.assertEqual(loaded.leaf_icon, "•")
        self.assertEqual(loaded.spinner_frames, TreeviewOptions().spinner_frames)

    def test_saved_defaults_drive_a_new_widget(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("termtree.config.CONFIG_PATH", config_path):
                termtree.save_treeview_options(TreeviewOptions(expanded_icon="-", indentation=3))
                options = termtree.load_treeview_options(TreeviewOptions(expand_roots=True))

        with termtree.Treeview(
            [termtree.TreeNode("Root", children=[termtree.TreeNode("leaf")])],
            options,
            start_spinner=False,
        ) as widget:
            rows = widget.visible_nodes()
            self.assertEqual(widget.options.expanded_icon, "-")
            self.assertEqual(widget.options.indentation, 3)
            self.assertEqual([node.id for node in rows], ["Root", "Root/leaf"])

    def test_unwritable_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("termtree.config.CONFIG_PATH", blocker / "config.json"):
                self.assertFalse(config.save_config({"indentation": 4}))
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
