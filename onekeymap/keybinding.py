"""Parsing and formatting of key bindings: sequences of chords such as ``ctrl+k ctrl+s``."""

from __future__ import annotations

from typing import Optional

from . import keychord
from .keychord import KeyChordError
from .model import Action, ActionConfig, Keybinding, KeybindingReadable, Platform

DEFAULT_KEY_CHORD_SEPARATOR = "+"


def parse_key_binding(keybind: str, modifier_separator: str = DEFAULT_KEY_CHORD_SEPARATOR) -> KeybindingReadable:
    """Parse a vscode-like binding; chords are separated by spaces.

    Raises KeyChordError when any chord is invalid.
    """
    chords = [keychord.parse(part, modifier_separator) for part in keybind.split(" ")]
    return KeybindingReadable(key_chords=Keybinding(chords=chords))


def must_parse_key_binding(keybind: str) -> KeybindingReadable:
    """Parse ``keybind`` using ``+`` between modifiers."""
    return parse_key_binding(keybind, DEFAULT_KEY_CHORD_SEPARATOR)


def format_key_binding(
    binding: Optional[KeybindingReadable],
    platform: Platform,
    key_chord_separator: str = DEFAULT_KEY_CHORD_SEPARATOR,
) -> str:
    """Render a binding as a vscode-like string, e.g. ``ctrl+k ctrl+s``."""
    if binding is None or not binding.chords:
        raise KeyChordError("invalid key binding: empty key chords")
    return " ".join(
        key_chord_separator.join(keychord.format_chord(chord, platform)) for chord in binding.chords
    )


def must_format_key_binding(binding: Optional[KeybindingReadable], platform: Platform) -> str:
    """Render ``binding`` using ``+`` between modifiers."""
    return format_key_binding(binding, platform, DEFAULT_KEY_CHORD_SEPARATOR)


def _bindings_of(key_chords: tuple) -> list:
    return [
        KeybindingReadable(key_chords=must_parse_key_binding(text).key_chords) for text in key_chords
    ]


def new_action_binding(action: str, *args: str) -> Action:
    """Create an action with one binding per key chord string, without metadata."""
    return Action(name=action, bindings=_bindings_of(args))


def new_action_binding_with_comment(action: str, key_chords: str, comment: str) -> Action:
    """Create an action with a single binding and a comment."""
    result = new_action_binding(action, key_chords)
    result.comment = comment
    return result


def new_action_binding_with_description(action: str, key_chords: str, description: str) -> Action:
    """Create an action with a single binding and a description."""
    result = new_action_binding(action, key_chords)
    result.action_config = ActionConfig(description=description)
    return result