# onekeymap

`onekeymap` is a library for keeping keyboard shortcuts in one
editor-neutral file, `onekeymap.json`. It parses and formats key chords and
key bindings, loads and saves the keymap file, merges and de-duplicates
actions, computes what an import changes against a baseline, and renders
diffs of what an export would write.

## Installation

```
pip install onekeymap
```

To run the test suite as well:

```
pip install "onekeymap[test]"
pytest
```

## Data model

`onekeymap.model` holds plain dataclasses and enums:

- `Keymap` – a list of `Action`s.
- `Action` – `name`, `comment`, an optional `ActionConfig`
  (`display_name`, `description`, `category`) and a list of
  `KeybindingReadable`s.
- `KeybindingReadable` – a `Keybinding` (a list of `KeyChord`s) plus its
  readable text in `key_chords_readable`; its `chords` property gives the
  chords, or an empty list.
- `KeyChord` – a `KeyCode` and a list of `KeyModifier`s.
- `Platform` – `MACOS`, `WINDOWS` or `LINUX`, used when rendering the meta
  modifier (`cmd`, `win` or `meta`).

## The keymap file

```json
{
  "version": "1.0",
  "keymaps": [
    {"id": "actions.editor.copy", "keybinding": "ctrl+c", "comment": "Standard copy"},
    {"id": "actions.find", "keybinding": ["ctrl+f", "cmd+f"]},
    {"id": "actions.file.save", "keybinding": "ctrl+k ctrl+s"}
  ]
}
```

Each entry has an `id`, a `keybinding` that is a string or a list of
strings, and optional `comment`, `description` and `name`. A binding is a
sequence of chords separated by spaces; inside a chord, modifiers and the key
are joined with `+`. Key names are case-insensitive.

```python
from onekeymap.keymap_file import load, save

with open("onekeymap.json", encoding="utf-8") as reader:
    keymap = load(reader)

with open("onekeymap-copy.json", "w", encoding="utf-8") as writer:
    save(writer, keymap)
```

- `load` groups entries with the same `id` into one action, in order of
  first appearance; the first non-empty comment, description and name win.
  An empty or blank file loads as an empty `Keymap`. A missing or null
  `keymaps` field, a wrongly typed field, or a binding that cannot be parsed
  raises `InvalidConfigError` (the last names the binding and the id).
  Malformed JSON raises `json.JSONDecodeError`.
- `save` writes version `"1.0"` with two-space indentation, grouping actions
  by name, comment and description. Bindings are written in their canonical
  macOS form, and a single binding is written as a plain string.
- `decorate_setting(setting, config)` fills each action's description,
  display name and category from `config.find_by_universal_action(name)`
  (any object returning something with `description`, `name` and `category`,
  or None), and sets `key_chords_readable` on every binding with chords.

## Key chords and bindings

```python
from onekeymap.keychord import parse, format_chord, KeyChordError
from onekeymap.keybinding import parse_key_binding, format_key_binding
from onekeymap.model import Platform

chord = parse("ctrl+shift+f", "+")
print(format_chord(chord, Platform.MACOS))          # ['ctrl', 'shift', 'f']

binding = parse_key_binding("ctrl+k ctrl+s", "+")
print(format_key_binding(binding, Platform.MACOS, "-"))  # ctrl-k ctrl-s

try:
    parse("ctrl+a+b", "+")
except KeyChordError as err:
    print(err)  # ... multiple key codes found ...
```

Modifiers are `shift`, `ctrl`, `alt` and `meta`; `cmd` and `win` are read
as `meta`. Formatting always orders modifiers meta, ctrl, shift, alt. A
chord that is a single modifier alone (as in `shift shift`) is allowed; no
key with zero or several modifiers is an error. The separator is a
parameter, so `parse("ctrl-alt--", "-")` gives a chord whose key is `-`, and
`ctrl+alt++` gives one whose key is `+`.

`onekeymap.keycode` maps key names to `KeyCode`s: `from_string`,
`to_string`, `must_key_code` (raises `ValueError` for an unknown name) and
`is_numpad`. `onekeymap.bimap.BiMap` is the two-way mapping it is built on.

`onekeymap.keybinding` also offers `must_parse_key_binding`,
`must_format_key_binding` and the helpers `new_action_binding(name, *chords)`,
`new_action_binding_with_comment` and `new_action_binding_with_description`.

## De-duplicating actions

```python
from onekeymap.dedup import dedup_key_bindings
from onekeymap.keybinding import new_action_binding

actions = dedup_key_bindings([
    new_action_binding("actions.find", "f"),
    new_action_binding("actions.replace", "f", "f"),
    new_action_binding("actions.find", "g"),
])
# -> actions.find with f and g, actions.replace with f
```

Actions with the same name are merged, repeated bindings are dropped, the
first occurrence keeps its place and metadata, and an action whose bindings
all lacked chords is removed. `pair_key(action)` returns the deterministic
signature (name plus sorted formatted bindings) used to compare actions.

## Diffs

`onekeymap.jsondiff.json_ascii_diff(before, after)` compares two objects or
two arrays and returns a line-oriented diff, with removed lines on red and
added lines on green ANSI backgrounds; object keys are shown sorted and array
items with their index. `json_diff` returns the same without colour codes,
and `strip_ansi` removes colour codes from any text. Both return `""` when
nothing changed; `None` counts as an empty array, and other values are
normalised through JSON (dataclasses are converted). An object compared with
an array raises `DiffTypeMismatchError`.

```python
from onekeymap.jsondiff import json_diff

print(json_diff({"a": 1}, {"a": 2}))
```

`onekeymap.unified.unified_diff(before, after, file_path)` returns a
git-style unified diff with three lines of context, headed by
`diff --git a/<path> b/<path>`, `--- a/<path>` and `+++ b/<path>`. The
inputs may be strings, bytes, readable streams or `None`.

## Import and export services

Both services take a registry: any object whose `get(editor_type)` returns a
plugin or `None`.

`ExportService(registry, mapping_config).export(destination, setting, options)`
calls `plugin.exporter()`, then
`exporter.export(writer, setting, existing_config=...)`, where
`existing_config` is a stream over `options.base` (or `None`). What the
exporter writes goes to `destination`. The exporter returns a
`PluginExportReport`, and the service returns an `ExportReport` whose `diff`
follows `options.diff_type`:

- `DiffType.UNIFIED_DIFF` – a unified diff of the base against what was
  written, labelled with `options.file_path`;
- `DiffType.ASCII_DIFF` – `json_ascii_diff` of the report's
  `base_editor_config` and `export_editor_config`;
- otherwise – the report's own `diff`, or `""`.

Failures raise `ExportError`.

`ImportService(registry, mapping_config, validator, recorder).import_keymap(options)`
requires `options.input_stream`, calls `plugin.importer()` and
`importer.import_keymap(stream)`, decorates and de-duplicates the result,
sorts actions by name, and, if given, calls
`recorder.record_command_processed(editor_type, setting)` and
`validator.validate(setting, options)` (its result becomes the report).
Without a base keymap every action is an addition. With one, the two are
merged with `union_with_base`, and `KeymapChanges` lists the actions added,
removed and updated (`KeymapDiff` pairs of before and after). The
`ImportResult` holds the setting, the changes and the report. Failures,
including an importer that returns nothing, raise `ImportError_`.

`has_valid_chord(action)` tells whether an action has any binding with chords.

## Configuration

`onekeymap.cliconfig.load_config(sandbox=False, environ=None, search_paths=None)`
builds a `Config` (`verbose`, `quiet`, `sandbox`, `onekeymap`,
`otel_exporter_otlp_endpoint`, `server_listen`, and `editors`, a mapping of
names to `EditorConfig` with `keymap_path` and `sync_enabled`). Values come
from `ONEKEYMAP_*` environment variables (such as `ONEKEYMAP_VERBOSE` or
`ONEKEYMAP_SERVER_LISTEN`), then from the first `onekeymap.yaml` or
`onekeymap.yml` on the search paths (by default `.`,
`~/.config/onekeymap` and `/etc/onekeymap`), then from defaults; the default
keymap path is `~/.config/onekeymap/onekeymap.json`. In sandbox mode no file
is read and the keymap path defaults to empty. Unreadable files, bad
booleans and enabling both verbose and quiet raise `ConfigError`.

## File helpers

`onekeymap.fileops.backup_if_exists(path)` copies an existing regular file
to `<name>.bak-<YYYYMMDD-HHMMSS>` beside it (adding `-1`, `-2`, … if that
name is taken) and returns the backup path, or `None` when there is no
regular file. `confirm(path, input_stream=None, output_stream=None)` asks
`Write config to <path>? [y/N]:` and returns True only for `y` or `yes`.

## What this package does not do

This is a library only. It has no command-line program, no interactive
screens, no network server, and no editor plugins: reading and writing any
particular editor's own keymap format is left to plugin objects that you
supply to `ImportService` and `ExportService`. It ships no catalogue of
universal actions either; action metadata comes from the mapping object you
pass in.