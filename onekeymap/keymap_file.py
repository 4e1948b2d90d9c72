"""Reading and writing the user-facing onekeymap JSON configuration file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Optional, Protocol, Tuple

from .keybinding import format_key_binding, parse_key_binding
from .keychord import KeyChordError
from .model import Action, ActionConfig, Keymap, KeybindingReadable, Platform

CONFIG_VERSION = "1.0"


class InvalidConfigError(ValueError):
    """Raised when a onekeymap configuration file is not well formed."""


class ActionMetadata(Protocol):
    description: str
    name: str
    category: str


class MappingLookup(Protocol):
    def find_by_universal_action(self, action: str) -> Optional[ActionMetadata]: ...


def _string_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidConfigError(f"field '{key}' must be a string")
    return value


def _keybinding_strings(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise InvalidConfigError("keybinding must be a string or an array of strings")


@dataclass
class OneKeymapConfig:
    """One entry of the configuration file."""

    id: str = ""
    keybinding: List[str] = field(default_factory=list)
    comment: str = ""
    description: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "OneKeymapConfig":
        if not isinstance(data, dict):
            raise InvalidConfigError("keymap entry must be an object")
        return cls(
            id=_string_field(data, "id"),
            keybinding=_keybinding_strings(data.get("keybinding")),
            comment=_string_field(data, "comment"),
            description=_string_field(data, "description"),
            name=_string_field(data, "name"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.keybinding:
            out["keybinding"] = self.keybinding[0] if len(self.keybinding) == 1 else list(self.keybinding)
        for key in ("comment", "description", "name"):
            value = getattr(self, key)
            if value:
                out[key] = value
        return out


@dataclass
class OneKeymapSetting:
    """The root of the configuration file."""

    version: str = CONFIG_VERSION
    keymaps: Optional[List[OneKeymapConfig]] = None

    def to_dict(self) -> Dict[str, Any]:
        keymaps = [entry.to_dict() for entry in self.keymaps] if self.keymaps else None
        return {"version": self.version, "keymaps": keymaps}


def _new_action(entry: OneKeymapConfig) -> Action:
    action = Action(name=entry.id, comment=entry.comment)
    if entry.description or entry.name:
        action.action_config = ActionConfig(description=entry.description, display_name=entry.name)
    return action


def _merge_action_metadata(action: Action, entry: OneKeymapConfig) -> None:
    # The first non-empty value wins.
    if not action.comment and entry.comment:
        action.comment = entry.comment
    if entry.description or entry.name:
        if action.action_config is None:
            action.action_config = ActionConfig()
        if not action.action_config.description and entry.description:
            action.action_config.description = entry.description
        if not action.action_config.display_name and entry.name:
            action.action_config.display_name = entry.name


def load(reader: IO) -> Keymap:
    """Read a configuration file and group its entries into actions by id."""
    data = reader.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if not data.strip():
        return Keymap()

    raw = json.loads(data)
    if not isinstance(raw, dict):
        raise InvalidConfigError("config must be a JSON object")
    raw_keymaps = raw.get("keymaps")
    if raw_keymaps is None:
        raise InvalidConfigError("invalid config format: 'keymaps' field is missing or null")
    if not isinstance(raw_keymaps, list):
        raise InvalidConfigError("'keymaps' must be an array")

    grouped: Dict[str, Action] = {}
    for entry in map(OneKeymapConfig.from_dict, raw_keymaps):
        action = grouped.get(entry.id)
        if action is None:
            action = grouped[entry.id] = _new_action(entry)
        else:
            _merge_action_metadata(action, entry)

        for text in entry.keybinding:
            try:
                parsed = parse_key_binding(text, "+")
            except KeyChordError as err:
                raise InvalidConfigError(
                    f"failed to parse keybinding '{text}' for id '{entry.id}': {err}"
                ) from err
            action.bindings.append(
                KeybindingReadable(key_chords=parsed.key_chords, key_chords_readable=text)
            )

    return Keymap(actions=list(grouped.values()))


def save(writer: IO[str], setting: Keymap) -> None:
    """Write ``setting`` in the configuration file format."""
    grouped: Dict[Tuple[str, str, str], OneKeymapConfig] = {}
    for action in setting.actions:
        config = action.action_config
        description = config.description if config is not None else ""
        display_name = config.display_name if config is not None else ""
        key = (action.name, action.comment, description)
        entry = grouped.get(key)
        if entry is None:
            entry = grouped[key] = OneKeymapConfig(
                id=action.name,
                comment=action.comment,
                description=description,
                name=display_name,
            )
        for binding in action.bindings:
            if binding is None or not binding.chords:
                continue
            entry.keybinding.append(format_key_binding(binding, Platform.MACOS, "+"))

    document = OneKeymapSetting(version=CONFIG_VERSION, keymaps=list(grouped.values()))
    writer.write(json.dumps(document.to_dict(), indent=2, ensure_ascii=False) + "\n")


def decorate_setting(setting: Optional[Keymap], config: Optional[MappingLookup]) -> Optional[Keymap]:
    """Fill action metadata from ``config`` and readable chords for every binding."""
    if setting is None or config is None:
        return setting

    for action in setting.actions:
        metadata = config.find_by_universal_action(action.name)
        if metadata is not None:
            if action.action_config is None:
                action.action_config = ActionConfig()
            action.action_config.description = metadata.description
            action.action_config.display_name = metadata.name
            action.action_config.category = metadata.category

        for binding in action.bindings:
            if binding is not None and binding.chords:
                try:
                    binding.key_chords_readable = format_key_binding(binding, Platform.MACOS, "+")
                except KeyChordError:
                    pass

    return setting