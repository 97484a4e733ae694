"""Translation of normalized terminal key tokens into widget events."""

import unittest

from termtree.events import (
    BUTTON_LEFT,
    BUTTON_RELEASE,
    BUTTON_WHEEL_DOWN,
    BUTTON_WHEEL_UP,
    KEY_DOWN,
    KEY_ENTER,
    KEY_SPACE,
    KEY_UP,
    KeyEvent,
    MouseEvent,
    event_from_key_token,
)


class KeyTokenTests(unittest.TestCase):
    def test_mouse_tokens_become_zero_based_events(self) -> None:
        self.assertEqual(event_from_key_token("MOUSE_LEFT_DOWN:5:3"), MouseEvent(BUTTON_LEFT, 4, 2))
        self.assertEqual(event_from_key_token("MOUSE_LEFT_UP:1:1"), MouseEvent(BUTTON_RELEASE, 0, 0))
        self.assertEqual(event_from_key_token("MOUSE_WHEEL_UP:2:9"), MouseEvent(BUTTON_WHEEL_UP, 1, 8))
        self.assertEqual(event_from_key_token("MOUSE_WHEEL_DOWN:2:9"), MouseEvent(BUTTON_WHEEL_DOWN, 1, 8))

    def test_malformed_and_unknown_mouse_tokens_are_dropped(self) -> None:
        self.assertIsNone(event_from_key_token("MOUSE_LEFT_DOWN:x:3"))
        self.assertIsNone(event_from_key_token("MOUSE_LEFT_DOWN:3"))
        self.assertIsNone(event_from_key_token("MOUSE_RIGHT_DOWN:3:3"))

    def test_named_keys(self) -> None:
        self.assertEqual(event_from_key_token("UP"), KeyEvent(KEY_UP))
        self.assertEqual(event_from_key_token("DOWN"), KeyEvent(KEY_DOWN))
        for token in ("ENTER", "ENTER_CR", "ENTER_LF"):
            self.assertEqual(event_from_key_token(token), KeyEvent(KEY_ENTER))
        self.assertEqual(event_from_key_token(" "), KeyEvent(KEY_SPACE))

    def test_other_keys_pass_through_and_timeouts_are_none(self) -> None:
        self.assertEqual(event_from_key_token("q"), KeyEvent("q"))
        self.assertIsNone(event_from_key_token(""))


if __name__ == "__main__":
    unittest.main()
