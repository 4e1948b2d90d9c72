"""Importing an editor's keymap into the universal format and computing changes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Optional, Tuple

from .dedup import dedup_key_bindings, pair_key
from .keybinding import format_key_binding
from .keychord import KeyChordError
from .keymap_file import decorate_setting
from .model import Action, ActionConfig, Keymap, Platform


class ImportError_(RuntimeError):
    """Raised when an import cannot be carried out."""


@dataclass
class ImportOptions:
    editor_type: str
    input_stream: Optional[IO] = None
    base: Optional[Keymap] = None


@dataclass
class KeymapDiff:
    before: Optional[Action] = None
    after: Optional[Action] = None


@dataclass
class KeymapChanges:
    add: List[Action] = field(default_factory=list)
    remove: List[Action] = field(default_factory=list)
    update: List[KeymapDiff] = field(default_factory=list)


@dataclass
class ImportResult:
    setting: Keymap
    changes: KeymapChanges
    report: Any = None


def has_valid_chord(action: Optional[Action]) -> bool:
    """Whether ``action`` has at least one binding with chords."""
    if action is None:
        return False
    return any(b is not None and b.chords for b in action.bindings)


def _clone_shell(action: Action) -> Action:
    fresh = Action(name=action.name)
    if action.action_config is not None:
        fresh.action_config = dataclasses.replace(action.action_config)
    fresh.bindings = [b for b in action.bindings if b is not None]
    return fresh


def union_with_base(base: Optional[Keymap], imported: Optional[Keymap]) -> Optional[Keymap]:
    """Merge baseline and imported keymaps per action name.

    Baseline bindings are kept in order; imported bindings whose chords are not
    already present are appended. Actions only in the import are added at the end.
    """
    if imported is None:
        return base
    if base is None or not base.actions:
        return imported

    out = Keymap(actions=[])
    by_name: Dict[str, Action] = {}
    for action in base.actions:
        if action is None:
            continue
        shell = _clone_shell(action)
        by_name[shell.name] = shell
        out.actions.append(shell)

    for action in imported.actions:
        if action is None:
            continue
        existing = by_name.get(action.name)
        if existing is None:
            shell = _clone_shell(action)
            by_name[shell.name] = shell
            out.actions.append(shell)
            continue
        for binding in action.bindings:
            if binding is None:
                continue
            if not any(eb.key_chords == binding.key_chords for eb in existing.bindings):
                existing.bindings.append(binding)
    return out


@dataclass
class _ActionIndex:
    by_action: Dict[str, List[Action]] = field(default_factory=dict)
    by_pair: Dict[str, Action] = field(default_factory=dict)


def _build_index(keymap: Optional[Keymap]) -> _ActionIndex:
    index = _ActionIndex()
    for action in keymap.actions if keymap is not None else []:
        if not has_valid_chord(action):
            continue
        index.by_action.setdefault(action.name, []).append(action)
        index.by_pair[pair_key(action)] = action
    return index


def _adds_and_removes(
    base_pair: Dict[str, Action], new_pair: Dict[str, Action]
) -> Tuple[Dict[str, Action], Dict[str, Action]]:
    adds = dict(new_pair)
    removes: Dict[str, Action] = {}
    for key, action in base_pair.items():
        if key in adds:
            del adds[key]
        else:
            removes[key] = action
    return adds, removes


def _updates(
    base_by_action: Dict[str, List[Action]],
    new_by_action: Dict[str, List[Action]],
    adds: Dict[str, Action],
    removes: Dict[str, Action],
) -> List[KeymapDiff]:
    updates: List[KeymapDiff] = []
    for name, before_list in base_by_action.items():
        after_list = new_by_action.get(name)
        if after_list is None or len(before_list) != 1 or len(after_list) != 1:
            continue
        before, after = before_list[0], after_list[0]
        before_key, after_key = pair_key(before), pair_key(after)
        if before_key == after_key:
            continue
        updates.append(KeymapDiff(before=before, after=after))
        adds.pop(after_key, None)
        removes.pop(before_key, None)
    return updates


class ImportService:
    """Looks up a plugin, imports its keymap and compares it with a baseline."""

    def __init__(
        self,
        registry: Any,
        mapping_config: Any = None,
        validator: Any = None,
        recorder: Any = None,
    ) -> None:
        self._registry = registry
        self._mapping_config = mapping_config
        self._validator = validator
        self._recorder = recorder

    def import_keymap(self, options: ImportOptions) -> ImportResult:
        """Import through the editor's plugin and compute changes against ``options.base``."""
        if options.input_stream is None:
            raise ImportError_("input stream is required")
        plugin = self._registry.get(options.editor_type)
        if plugin is None:
            raise ImportError_(f"no plugin found for editor type '{options.editor_type}'")
        try:
            importer = plugin.importer()
        except Exception as err:
            raise ImportError_(f"failed to get importer for {options.editor_type}: {err}") from err
        try:
            setting = importer.import_keymap(options.input_stream)
        except Exception as err:
            raise ImportError_(f"failed to import config: {err}") from err

        setting = decorate_setting(setting, self._mapping_config)
        if setting is not None and setting.actions:
            setting.actions = dedup_key_bindings(setting.actions)

        if self._recorder is not None:
            self._recorder.record_command_processed(options.editor_type, setting)

        if setting is None:
            raise ImportError_("failed to import config: no keybindings found")
        setting.actions.sort(key=lambda a: a.name)

        report = None
        if self._validator is not None:
            try:
                report = self._validator.validate(setting, options)
            except Exception as err:
                raise ImportError_(f"failed to validate config: {err}") from err

        base = options.base
        if base is None or not base.actions:
            return ImportResult(
                setting=setting, changes=KeymapChanges(add=list(setting.actions)), report=report
            )

        setting = union_with_base(base, setting)
        setting.actions = dedup_key_bindings(setting.actions)
        setting = decorate_setting(setting, self._mapping_config)

        changes = self._calculate_changes(base, setting)

        setting.actions = dedup_key_bindings(setting.actions)
        return ImportResult(setting=setting, changes=changes, report=report)

    def _calculate_changes(self, base: Keymap, setting: Keymap) -> KeymapChanges:
        base_index = _build_index(base)
        new_index = _build_index(setting)
        adds, removes = _adds_and_removes(base_index.by_pair, new_index.by_pair)
        updates = _updates(base_index.by_action, new_index.by_action, adds, removes)

        changes = KeymapChanges(
            add=sorted(adds.values(), key=lambda a: a.name),
            remove=sorted(removes.values(), key=lambda a: a.name),
            update=updates,
        )
        for action in changes.add:
            self._decorate_action(action)
        for action in changes.remove:
            self._decorate_action(action)
        for diff in changes.update:
            self._decorate_action(diff.before)
            self._decorate_action(diff.after)
        return changes

    def _decorate_action(self, action: Optional[Action]) -> None:
        if action is None:
            return
        if self._mapping_config is not None:
            metadata = self._mapping_config.find_by_universal_action(action.name)
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