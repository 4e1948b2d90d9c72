from onekeymap.model import (
    Action,
    ActionConfig,
    KeyChord,
    KeyCode,
    KeyModifier,
    Keybinding,
    KeybindingReadable,
    Keymap,
)


def test_key_chord_defaults_to_unspecified_without_modifiers():
    chord = KeyChord()
    assert chord.key_code is KeyCode.UNSPECIFIED
    assert chord.modifiers == []


def test_default_lists_are_not_shared():
    first = Action(name="actions.copy")
    first.bindings.append(KeybindingReadable())
    assert Action().bindings == []
    chord = KeyChord()
    chord.modifiers.append(KeyModifier.CTRL)
    assert KeyChord().modifiers == []


def test_readable_binding_chords_without_key_chords_is_empty():
    assert KeybindingReadable().chords == []


def test_readable_binding_chords_returns_inner_chords():
    inner = [KeyChord(KeyCode.S, [KeyModifier.CTRL])]
    binding = KeybindingReadable(key_chords=Keybinding(chords=inner))
    assert binding.chords == inner


def test_structural_equality_of_keymaps():
    def build(description):
        return Keymap(
            actions=[
                Action(
                    name="actions.copy",
                    action_config=ActionConfig(description=description),
                    bindings=[
                        KeybindingReadable(
                            key_chords=Keybinding([KeyChord(KeyCode.C, [KeyModifier.CTRL])])
                        )
                    ],
                )
            ]
        )

    assert build("copy") == build("copy")
    assert (build("copy") == build("paste")) is False


def test_numpad_block_is_contiguous():
    first = int(KeyCode.NUMPAD_0)
    last = int(KeyCode.NUMPAD_INSERT)
    members = [KeyCode(value) for value in range(first, last + 1)]
    assert all(member.name.startswith("NUMPAD_") for member in members)
    assert members[0] is KeyCode.NUMPAD_0
    assert members[-1] is KeyCode.NUMPAD_INSERT