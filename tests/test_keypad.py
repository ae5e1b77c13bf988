"""Tests for the hex keypad and host key mapping."""

import pytest

from chip8 import config
from chip8.keypad import KeyMap, Keypad


def test_press_and_release() -> None:
    pad = Keypad()
    assert not pad.is_pressed(0xA)

    assert pad.press(0xA) is True
    assert pad.is_pressed(0xA)
    assert pad.pressed_keys() == [0xA]

    pad.release(0xA)
    assert not pad.is_pressed(0xA)


def test_held_key_is_not_a_new_press() -> None:
    pad = Keypad()
    assert pad.press(3)
    assert not pad.press(3)


def test_keys_use_low_nibble() -> None:
    pad = Keypad()
    pad.press(0x1F)
    assert pad.is_pressed(0xF)


def test_reset() -> None:
    pad = Keypad()
    pad.press(1)
    pad.press(2)
    pad.reset()
    assert pad.pressed_keys() == []


def test_keymap_from_layout() -> None:
    keymap = KeyMap.from_layout(str.lower)

    assert len(keymap) == 16
    assert keymap.key_for("x") == 0x0
    assert keymap.key_for("4") == 0xC
    assert keymap.key_for("v") == 0xF
    assert keymap.key_for("p") is None
    assert "q" in keymap
    assert keymap.symbol_for(0x5) == "w"


def test_layout_covers_every_key() -> None:
    assert sorted(config.KEY_LAYOUT.values()) == list(range(16))


def test_keymap_rejects_bad_keys() -> None:
    with pytest.raises(ValueError):
        KeyMap({"a": 0x10})
