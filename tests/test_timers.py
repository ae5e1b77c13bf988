"""Tests for the 60Hz delay and sound timers."""

import threading

from chip8.timers import Timers


def test_tick_counts_down_to_zero() -> None:
    timers = Timers()
    timers.delay = 2
    timers.sound = 1

    timers.tick()
    assert timers.delay == 1
    assert timers.sound == 0

    timers.tick()
    timers.tick()
    assert timers.delay == 0
    assert timers.sound == 0


def test_values_are_eight_bit() -> None:
    timers = Timers()
    timers.delay = 0x1FF
    assert timers.delay == 0xFF


def test_tone_follows_sound_timer() -> None:
    timers = Timers()
    assert not timers.tone_active
    timers.sound = 2
    assert timers.tone_active
    timers.tick()
    assert timers.tone_active
    timers.tick()
    assert not timers.tone_active


def test_listener_hears_transitions_only() -> None:
    events = []
    timers = Timers()
    timers.add_listener(events.append)

    timers.sound = 2
    timers.sound = 5   # already on
    timers.tick()
    assert events == [True]

    for _ in range(4):
        timers.tick()
    assert events == [True, False]

    timers.sound = 3
    timers.sound = 0
    assert events == [True, False, True, False]


def test_remove_listener() -> None:
    events = []
    timers = Timers()
    timers.add_listener(events.append)
    timers.remove_listener(events.append)
    timers.sound = 1
    assert events == []


def test_reset_stops_tone() -> None:
    events = []
    timers = Timers()
    timers.sound = 9
    timers.delay = 9
    timers.add_listener(events.append)

    timers.reset()
    assert timers.delay == 0
    assert timers.sound == 0
    assert events == [False]


def test_listeners_end_on_current_state_when_another_thread_ticks() -> None:
    events = []
    timers = Timers()

    def tick_elsewhere(active):
        if active:
            worker = threading.Thread(target=timers.tick)
            worker.start()
            worker.join()

    timers.add_listener(tick_elsewhere)
    timers.add_listener(events.append)

    timers.sound = 1
    assert timers.sound == 0
    assert events == [True, False]
    assert events[-1] == timers.tone_active


def test_listener_changing_sound_is_announced() -> None:
    events = []
    timers = Timers()

    def stop_tone(active):
        if active:
            timers.sound = 0

    timers.add_listener(stop_tone)
    timers.add_listener(events.append)

    timers.sound = 4
    assert not timers.tone_active
    assert events == [True, False]
