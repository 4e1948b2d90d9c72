"""Core data types describing keymaps, actions and key chords."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import List, Optional


class Platform(str, Enum):
    """Operating system flavour used when rendering modifier names."""

    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"


class KeyModifier(IntEnum):
    """Modifier keys that may be held while pressing a key."""

    UNSPECIFIED = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    META = auto()


class KeyCode(IntEnum):
    """Physical keys. The numpad keys form one contiguous block."""

    UNSPECIFIED = 0
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    DIGIT_0 = auto()
    DIGIT_1 = auto()
    DIGIT_2 = auto()
    DIGIT_3 = auto()
    DIGIT_4 = auto()
    DIGIT_5 = auto()
    DIGIT_6 = auto()
    DIGIT_7 = auto()
    DIGIT_8 = auto()
    DIGIT_9 = auto()
    CAPS_LOCK = auto()
    SHIFT = auto()
    FUNCTION = auto()
    CONTROL = auto()
    OPTION = auto()
    COMMAND = auto()
    RIGHT_COMMAND = auto()
    RIGHT_OPTION = auto()
    RIGHT_CONTROL = auto()
    RIGHT_SHIFT = auto()
    RETURN = auto()
    BACKSLASH = auto()
    BACKTICK = auto()
    COMMA = auto()
    EQUAL = auto()
    MINUS = auto()
    PLUS = auto()
    PERIOD = auto()
    QUOTE = auto()
    SEMICOLON = auto()
    SLASH = auto()
    SPACE = auto()
    TAB = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    UP_ARROW = auto()
    RIGHT_ARROW = auto()
    DOWN_ARROW = auto()
    LEFT_ARROW = auto()
    ESCAPE = auto()
    DELETE = auto()
    FORWARD_DELETE = auto()
    INSERT_OR_HELP = auto()
    MUTE = auto()
    VOLUME_UP = auto()
    VOLUME_DOWN = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    NUMPAD_0 = auto()
    NUMPAD_1 = auto()
    NUMPAD_2 = auto()
    NUMPAD_3 = auto()
    NUMPAD_4 = auto()
    NUMPAD_5 = auto()
    NUMPAD_6 = auto()
    NUMPAD_7 = auto()
    NUMPAD_8 = auto()
    NUMPAD_9 = auto()
    NUMPAD_CLEAR = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_EQUALS = auto()
    NUMPAD_MINUS = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_PLUS = auto()
    NUMPAD_INSERT = auto()


@dataclass
class KeyChord:
    """A single key press together with the modifiers held down."""

    key_code: KeyCode = KeyCode.UNSPECIFIED
    modifiers: List[KeyModifier] = field(default_factory=list)


@dataclass
class Keybinding:
    """An ordered sequence of chords, e.g. ``ctrl+k ctrl+s``."""

    chords: List[KeyChord] = field(default_factory=list)


@dataclass
class KeybindingReadable:
    """A key binding and its human readable rendering."""

    key_chords: Optional[Keybinding] = None
    key_chords_readable: str = ""

    @property
    def chords(self) -> List[KeyChord]:
        """The chords of this binding, empty when none are set."""
        return self.key_chords.chords if self.key_chords is not None else []


@dataclass
class ActionConfig:
    """Descriptive metadata attached to an action."""

    display_name: str = ""
    description: str = ""
    category: str = ""


@dataclass
class Action:
    """A named editor action and the key bindings that trigger it."""

    name: str = ""
    comment: str = ""
    action_config: Optional[ActionConfig] = None
    bindings: List[KeybindingReadable] = field(default_factory=list)


@dataclass
class Keymap:
    """A complete set of actions."""

    actions: List[Action] = field(default_factory=list)