"""Parsing and formatting of single key chords such as ``ctrl+shift+f``."""

from __future__ import annotations

from typing import List, Optional

from . import keycode
from .model import KeyChord, KeyCode, KeyModifier, Platform

_MODIFIERS = {
    "shift": KeyModifier.SHIFT,
    "ctrl": KeyModifier.CTRL,
    "alt": KeyModifier.ALT,
    # Command on macOS, Windows key on Windows, super on Linux
    "meta": KeyModifier.META,
    "cmd": KeyModifier.META,
    "win": KeyModifier.META,
}

_META_NAMES = {Platform.MACOS: "cmd", Platform.WINDOWS: "win"}


class KeyChordError(ValueError):
    """Raised when a key chord cannot be parsed or formatted."""


def _key_code_of(name: str) -> KeyCode:
    key_code = keycode.from_string(name)
    if key_code is None:
        raise KeyChordError(f"invalid key code: '{name}'")
    return key_code


def parse(keybind: str, modifier_separator: str = "+") -> KeyChord:
    """Parse a vscode-like chord like ``ctrl+shift+f`` into a KeyChord."""
    if not keybind:
        raise KeyChordError("cannot parse empty string")

    lowered = keybind.lower()
    parts = lowered.split(modifier_separator) if modifier_separator else list(lowered)
    last, potential_modifiers = parts[-1], parts[:-1]

    key_code = KeyCode.UNSPECIFIED
    modifiers: List[KeyModifier] = []

    if last == "" and lowered.endswith(modifier_separator):
        # e.g. "ctrl+alt++": the separator itself is the key
        key_code = _key_code_of(modifier_separator)
    elif last in _MODIFIERS:
        modifiers.append(_MODIFIERS[last])
    else:
        key_code = _key_code_of(last)

    for part in potential_modifiers:
        if part == "":
            continue
        modifier = _MODIFIERS.get(part)
        if modifier is None:
            key_name = keycode.to_string(key_code) or ""
            raise KeyChordError(
                "invalid key chord string: multiple key codes found "
                f"('{part}' and '{key_name}')"
            )
        modifiers.append(modifier)

    if key_code is KeyCode.UNSPECIFIED and len(modifiers) != 1:
        raise KeyChordError(f"invalid key chord string: no key code found in '{keybind}'")

    return KeyChord(key_code=key_code, modifiers=modifiers)


def format_chord(chord: Optional[KeyChord], platform: Platform) -> List[str]:
    """Render a chord as its parts in canonical order: meta, ctrl, shift, alt, key."""
    if chord is None:
        raise KeyChordError("invalid key chord: nil")

    parts: List[str] = []
    if KeyModifier.META in chord.modifiers:
        parts.append(_META_NAMES.get(platform, "meta"))
    for modifier, name in (
        (KeyModifier.CTRL, "ctrl"),
        (KeyModifier.SHIFT, "shift"),
        (KeyModifier.ALT, "alt"),
    ):
        if modifier in chord.modifiers:
            parts.append(name)

    if chord.key_code != KeyCode.UNSPECIFIED:
        key_name = keycode.to_string(chord.key_code)
        if key_name is None:
            raise KeyChordError(f"invalid key code: {chord.key_code!r}")
        parts.append(key_name)
        return parts

    if len(chord.modifiers) == 1:
        return parts

    raise KeyChordError("invalid key chord: empty key code")