import io
from dataclasses import dataclass
from typing import Optional

import pytest

from onekeymap.import_service import (
    ImportError_,
    ImportOptions,
    ImportService,
    KeymapChanges,
    KeymapDiff,
    has_valid_chord,
    union_with_base,
)
from onekeymap.keybinding import must_format_key_binding, must_parse_key_binding, new_action_binding
from onekeymap.model import (
    Action,
    ActionConfig,
    Keybinding,
    KeybindingReadable,
    Keymap,
    Platform,
)

VSCODE = "vscode"


@dataclass
class _Mapping:
    id: str
    description: str
    name: str
    category: str


class _MappingConfig:
    def __init__(self):
        self.mappings = {
            "actions.editor.copy": _Mapping("actions.editor.copy", "Copy", "Copy", "Editor"),
            "actions.editor.paste": _Mapping("actions.editor.paste", "Paste", "Paste", "Editor"),
            "actions.file.save": _Mapping("actions.file.save", "Save", "Save", "File"),
            "actions.editor.cut": _Mapping("actions.editor.cut", "Cut", "Cut", "Editor"),
        }

    def find_by_universal_action(self, action):
        return self.mappings.get(action)


class _Importer:
    def __init__(self, data, error=None):
        self.data = data
        self.error = error

    def import_keymap(self, stream):
        if self.error is not None:
            raise self.error
        return self.data


class _Plugin:
    def __init__(self, data, error=None):
        self._importer = _Importer(data, error)

    def importer(self):
        return self._importer


class _Recorder:
    def __init__(self):
        self.calls = []

    def record_command_processed(self, editor_type, setting):
        self.calls.append((editor_type, setting))


class _Validator:
    def validate(self, setting, options):
        return {"issues": [], "count": len(setting.actions)}


def _service(data, error=None, validator=None, recorder=None):
    registry = {VSCODE: _Plugin(data, error)}
    return ImportService(registry, _MappingConfig(), validator, recorder)


def _run(data, base: Optional[Keymap] = None, **kwargs):
    service = _service(data, **kwargs)
    return service.import_keymap(
        ImportOptions(editor_type=VSCODE, input_stream=io.StringIO("{}"), base=base)
    )


def _decorated(name, display, category, *keys):
    return Action(
        name=name,
        action_config=ActionConfig(display_name=display, description=display, category=category),
        bindings=[
            KeybindingReadable(key_chords=must_parse_key_binding(k).key_chords, key_chords_readable=k)
            for k in keys
        ],
    )


def _copy(*keys):
    return _decorated("actions.editor.copy", "Copy", "Editor", *keys)


def _paste(*keys):
    return _decorated("actions.editor.paste", "Paste", "Editor", *keys)


def test_sorts_imported_keymaps_by_action_id():
    data = Keymap(
        actions=[
            new_action_binding("actions.editor.paste", "ctrl+v"),
            new_action_binding("actions.editor.copy", "ctrl+c"),
        ]
    )
    result = _run(data)
    assert result.setting == Keymap(actions=[_copy("ctrl+c"), _paste("ctrl+v")])
    assert result.changes == KeymapChanges(add=[_copy("ctrl+c"), _paste("ctrl+v")])


def test_empty_keybindings_in_base_count_as_add():
    base = Keymap(actions=[Action(name="actions.editor.paste", bindings=[])])
    data = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    result = _run(data, base=base)
    assert result.setting == Keymap(actions=[_paste("ctrl+v")])
    assert result.changes == KeymapChanges(add=[_paste("ctrl+v")])


def test_handles_empty_keymap_list():
    result = _run(Keymap(actions=[]))
    assert result.setting == Keymap(actions=[])
    assert result.changes == KeymapChanges()


def test_handles_none_setting_from_plugin():
    with pytest.raises(ImportError_, match="no keybindings found"):
        _run(None)


def test_calculates_no_change():
    base = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    data = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    result = _run(data, base=base)
    assert result.setting == Keymap(actions=[_paste("ctrl+v")])
    assert result.changes == KeymapChanges()


def test_deduplicate():
    base = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    data = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v", "ctrl+v")])
    result = _run(data, base=base)
    assert result.setting == Keymap(actions=[_paste("ctrl+v")])
    assert result.changes == KeymapChanges()


def test_calculates_added_keybindings_with_empty_base():
    data = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    result = _run(data, base=Keymap(actions=[]))
    assert result.setting == Keymap(actions=[_paste("ctrl+v")])
    assert result.changes == KeymapChanges(add=[_paste("ctrl+v")])


def test_unchanged_keybindings_are_not_removed():
    base = Keymap(actions=[new_action_binding("actions.editor.copy", "ctrl+c")])
    data = Keymap(actions=[new_action_binding("actions.editor.copy", "ctrl+c")])
    result = _run(data, base=base)
    assert result.setting == Keymap(actions=[_copy("ctrl+c")])
    assert result.changes == KeymapChanges()


def test_calculates_updated_keybindings():
    base = Keymap(actions=[new_action_binding("actions.editor.copy", "ctrl+c")])
    data = Keymap(actions=[new_action_binding("actions.editor.copy", "cmd+c", "alt+c")])
    result = _run(data, base=base)
    assert result.setting == Keymap(actions=[_copy("ctrl+c", "cmd+c", "alt+c")])
    assert result.changes == KeymapChanges(
        update=[KeymapDiff(before=_copy("ctrl+c"), after=_copy("ctrl+c", "cmd+c", "alt+c"))]
    )


def test_missing_input_stream_raises():
    service = _service(Keymap())
    with pytest.raises(ImportError_, match="input stream is required"):
        service.import_keymap(ImportOptions(editor_type=VSCODE))


def test_unknown_editor_raises():
    service = _service(Keymap())
    with pytest.raises(ImportError_, match="no plugin found for editor type 'zed'"):
        service.import_keymap(ImportOptions(editor_type="zed", input_stream=io.StringIO("")))


def test_importer_error_is_wrapped():
    with pytest.raises(ImportError_, match="failed to import config: boom"):
        _run(Keymap(), error=RuntimeError("boom"))


def test_recorder_and_validator_are_used():
    recorder = _Recorder()
    data = Keymap(actions=[new_action_binding("actions.editor.copy", "ctrl+c")])
    result = _run(data, validator=_Validator(), recorder=recorder)
    assert result.report == {"issues": [], "count": 1}
    assert len(recorder.calls) == 1
    assert recorder.calls[0][0] == VSCODE


def test_removed_action_appears_in_remove():
    base = Keymap(
        actions=[
            new_action_binding("actions.editor.copy", "ctrl+c"),
            new_action_binding("actions.editor.cut", "ctrl+x"),
        ]
    )
    data = Keymap(actions=[new_action_binding("actions.editor.paste", "ctrl+v")])
    result = _run(data, base=base)
    # The union keeps every baseline binding, so nothing is removed.
    assert result.changes.remove == []
    assert [a.name for a in result.changes.add] == ["actions.editor.paste"]
    assert [a.name for a in result.setting.actions] == [
        "actions.editor.copy",
        "actions.editor.cut",
        "actions.editor.paste",
    ]


def test_union_with_base_merges_bindings():
    base = Keymap(actions=[new_action_binding("actions.copy", "ctrl+c")])
    imported = Keymap(
        actions=[
            new_action_binding("actions.copy", "ctrl+c", "cmd+c"),
            new_action_binding("actions.paste", "ctrl+v"),
        ]
    )
    out = union_with_base(base, imported)
    assert [a.name for a in out.actions] == ["actions.copy", "actions.paste"]
    assert [must_format_key_binding(b, Platform.MACOS) for b in out.actions[0].bindings] == [
        "ctrl+c",
        "cmd+c",
    ]
    assert len(base.actions[0].bindings) == 1


def test_union_with_base_edge_cases():
    imported = Keymap(actions=[new_action_binding("actions.copy", "ctrl+c")])
    base = Keymap(actions=[new_action_binding("actions.paste", "ctrl+v")])
    assert union_with_base(None, imported) is imported
    assert union_with_base(Keymap(), imported) is imported
    assert union_with_base(base, None) is base


def test_has_valid_chord():
    assert has_valid_chord(new_action_binding("a", "ctrl+c")) is True
    assert has_valid_chord(Action(name="a")) is False
    assert has_valid_chord(None) is False
    empty = Action(name="a", bindings=[KeybindingReadable(key_chords=Keybinding(chords=[]))])
    assert has_valid_chord(empty) is False