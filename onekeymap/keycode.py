"""Conversion between key names and key codes."""

from __future__ import annotations

from typing import Dict, Optional

from .bimap import BiMap
from .model import KeyCode


def _build_table() -> Dict[str, KeyCode]:
    table: Dict[str, KeyCode] = {}
    for letter in "abcdefghijklmnopqrstuvwxyz":
        table[letter] = KeyCode[letter.upper()]
    for digit in range(10):
        table[str(digit)] = KeyCode["DIGIT_" + str(digit)]
    table.update(
        {
            "capslock": KeyCode.CAPS_LOCK,
            "shift": KeyCode.SHIFT,
            "fn": KeyCode.FUNCTION,
            "ctrl": KeyCode.CONTROL,
            "alt": KeyCode.OPTION,
            "cmd": KeyCode.COMMAND,
            "rightcmd": KeyCode.RIGHT_COMMAND,
            "rightalt": KeyCode.RIGHT_OPTION,
            "rightctrl": KeyCode.RIGHT_CONTROL,
            "rightshift": KeyCode.RIGHT_SHIFT,
            "enter": KeyCode.RETURN,
            "\\": KeyCode.BACKSLASH,
            "`": KeyCode.BACKTICK,
            ",": KeyCode.COMMA,
            "=": KeyCode.EQUAL,
            "-": KeyCode.MINUS,
            "+": KeyCode.PLUS,
            ".": KeyCode.PERIOD,
            "'": KeyCode.QUOTE,
            ";": KeyCode.SEMICOLON,
            "/": KeyCode.SLASH,
            "space": KeyCode.SPACE,
            "tab": KeyCode.TAB,
            "[": KeyCode.LEFT_BRACKET,
            "]": KeyCode.RIGHT_BRACKET,
            "pageup": KeyCode.PAGE_UP,
            "pagedown": KeyCode.PAGE_DOWN,
            "home": KeyCode.HOME,
            "end": KeyCode.END,
            "up": KeyCode.UP_ARROW,
            "right": KeyCode.RIGHT_ARROW,
            "down": KeyCode.DOWN_ARROW,
            "left": KeyCode.LEFT_ARROW,
            "escape": KeyCode.ESCAPE,
            "backspace": KeyCode.DELETE,
            "delete": KeyCode.FORWARD_DELETE,
            "insert": KeyCode.INSERT_OR_HELP,
            "mute": KeyCode.MUTE,
            "volumeup": KeyCode.VOLUME_UP,
            "volumedown": KeyCode.VOLUME_DOWN,
        }
    )
    for number in range(1, 21):
        table["f" + str(number)] = KeyCode["F" + str(number)]
    for digit in range(10):
        table["numpad" + str(digit)] = KeyCode["NUMPAD_" + str(digit)]
    table.update(
        {
            "numpad_clear": KeyCode.NUMPAD_CLEAR,
            "numpad_decimal": KeyCode.NUMPAD_DECIMAL,
            "numpad_divide": KeyCode.NUMPAD_DIVIDE,
            "numpad_enter": KeyCode.NUMPAD_ENTER,
            "numpad_equals": KeyCode.NUMPAD_EQUALS,
            # keymaps are vscode-like, hence "subtract" rather than "minus"
            "numpad_subtract": KeyCode.NUMPAD_MINUS,
            "numpad_multiply": KeyCode.NUMPAD_MULTIPLY,
            "numpad_add": KeyCode.NUMPAD_PLUS,
        }
    )
    return table


_KEY_CODES = BiMap(_build_table())


def from_string(s: str) -> Optional[KeyCode]:
    """Return the key code named by ``s`` (case-insensitive), or None."""
    return _KEY_CODES.get(s.lower())


def to_string(key_code: KeyCode) -> Optional[str]:
    """Return the canonical name of ``key_code``, or None if it has none."""
    return _KEY_CODES.get_inverse(key_code)


def must_key_code(s: str) -> KeyCode:
    """Return the key code named by ``s``; raise ValueError if unknown."""
    key_code = from_string(s)
    if key_code is None:
        raise ValueError(f"keycode not found: {s}")
    return key_code


def is_numpad(key_code: KeyCode) -> bool:
    """Whether ``key_code`` is a numpad key."""
    return int(KeyCode.NUMPAD_0) <= int(key_code) <= int(KeyCode.NUMPAD_INSERT)