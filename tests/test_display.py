"""Tests for the framebuffer and sprite compositing."""

import pytest

from chip8.display import Display


def test_starts_blank() -> None:
    display = Display()
    assert display.grid().shape == (32, 64)
    assert not display.grid().any()


def test_sprite_wraps_horizontally() -> None:
    display = Display()
    assert display.draw_sprite(60, 0, [0xFF]) is False

    lit = [x for x in range(64) if display.pixel(x, 0)]
    assert lit == [0, 1, 2, 3, 60, 61, 62, 63]
    assert not display.grid()[1].any()


def test_sprite_wraps_vertically() -> None:
    display = Display()
    display.draw_sprite(0, 31, [0x80, 0x80])
    assert display.pixel(0, 31)
    assert display.pixel(0, 0)


def test_coordinates_wrap_before_drawing() -> None:
    display = Display()
    display.draw_sprite(64 + 2, 32 + 1, [0x80])
    assert display.pixel(2, 1)


def test_xor_and_collision() -> None:
    display = Display()
    display.draw_sprite(4, 4, [0xF0])
    assert display.draw_sprite(4, 4, [0x30]) is True
    assert [display.pixel(x, 4) for x in range(4, 8)] == [True, True, False, False]


def test_clear_is_idempotent() -> None:
    display = Display()
    display.draw_sprite(0, 0, [0xFF] * 5)
    display.clear()
    once = display.grid().copy()
    display.clear()
    assert (display.grid() == once).all()
    assert not once.any()


def test_grid_is_read_only() -> None:
    display = Display()
    with pytest.raises(ValueError):
        display.grid()[0, 0] = 1


def test_should_draw_flag() -> None:
    display = Display()
    display.should_draw = False
    display.draw_sprite(0, 0, [0x80])
    assert display.should_draw


def test_to_text() -> None:
    display = Display(width=4, height=2)
    display.draw_sprite(0, 0, [0xA0])
    assert display.to_text() == "#.#.\n...."


def test_to_rgba_is_bottom_up_and_scaled() -> None:
    display = Display()
    display.draw_sprite(0, 0, [0x80])

    data = display.to_rgba(scale=1)
    assert len(data) == 64 * 32 * 4
    top_left = (31 * 64) * 4
    assert data[top_left:top_left + 4] == bytes([255, 255, 255, 255])
    assert data[0:4] == bytes([0, 0, 0, 255])

    assert len(display.to_rgba(scale=2)) == 128 * 64 * 4
