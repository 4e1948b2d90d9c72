"""Merging of actions that share a name and removal of duplicate bindings."""

from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional

from .keybinding import must_format_key_binding
from .model import Action, ActionConfig, KeybindingReadable, Platform


def _formatted(binding: KeybindingReadable) -> str:
    return must_format_key_binding(binding, Platform.MACOS)


def pair_key(action: Optional[Action]) -> str:
    """A deterministic signature of an action's name and its sorted bindings."""
    if action is None:
        return "\x00"
    parts = sorted(_formatted(b) for b in action.bindings if b is not None and b.chords)
    return action.name + "\x00" + "".join(p + "\x00" for p in parts)


def _append_unique(target: Action, bindings: List[KeybindingReadable]) -> None:
    seen = {_formatted(b) for b in target.bindings}
    for binding in bindings:
        if binding is None or not binding.chords:
            continue
        formatted = _formatted(binding)
        if formatted not in seen:
            seen.add(formatted)
            target.bindings.append(binding)


def _merge_into_existing(existing: Action, action: Action) -> None:
    _append_unique(existing, action.bindings)
    if not existing.name and action.name:
        existing.name = action.name
    config = action.action_config
    if config is not None:
        if existing.action_config is None:
            existing.action_config = ActionConfig()
        if not existing.action_config.description and config.description:
            existing.action_config.description = config.description
        if not existing.action_config.category and config.category:
            existing.action_config.category = config.category


def dedup_key_bindings(actions: List[Optional[Action]]) -> List[Action]:
    """Merge actions by name, keeping the first occurrence's metadata and order.

    Bindings without chords are dropped; an action whose explicit bindings
    were all empty is dropped entirely.
    """
    position: Dict[str, int] = {}
    out: List[Action] = []

    for action in actions:
        if action is None:
            continue
        if action.name in position:
            _merge_into_existing(out[position[action.name]], action)
            continue

        fresh = Action(name=action.name)
        if action.action_config is not None:
            fresh.action_config = dataclasses.replace(action.action_config)
        _append_unique(fresh, action.bindings)

        if action.bindings and not fresh.bindings:
            continue
        position[action.name] = len(out)
        out.append(fresh)

    return out