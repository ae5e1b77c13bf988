# We're subclassing pyglet (that'll handle graphics and keyboard handling)
# and overriding whatever def we need from there. The CPU itself never sees pyglet.

import pyglet
from pyglet.window import key

from . import config
from .audio import Beeper
from .errors import Chip8Error
from .keypad import KeyMap
from .log import log, logger, toggle_logs


def _pyglet_symbol(name):
    # digits are key._1 .. key._4 in pyglet
    return getattr(key, "_" + name if name.isdigit() else name)


# Key mapping - maps physical keyboard keys to CHIP-8 keypad
keymap = KeyMap.from_layout(_pyglet_symbol)


class Chip8Window(pyglet.window.Window):

    def __init__(self, chip, scale=config.scale, clock=config.cpu_hz, beeper=None):
        self.pixel_scale = scale
        self.win_width = config.width * scale
        self.win_height = config.height * scale
        super().__init__(self.win_width, self.win_height, caption="CHIP-8 Emulator", resizable=False)

        self.chip = chip
        self.steps_per_tick = config.steps_per_tick(clock)
        self.beeper = beeper if beeper is not None else Beeper()
        self.beeper.attach(chip.timers)

        self.image = pyglet.image.ImageData(
            self.win_width, self.win_height, 'RGBA', chip.display.to_rgba(scale))

        # ---- Performance Counters ----
        self.frame_count = 0
        self.fps_label = self._label("FPS: 0", self.win_height - 15)
        self.cps_label = self._label("Cycles/s: 0", self.win_height - 30)
        self._last_cycles = chip.cycle_count
        pyglet.clock.schedule_interval(self._update_bench, 1.0)

        # Instructions run in bursts, one burst per 60Hz timer tick
        pyglet.clock.schedule_interval(self._timer_tick, 1.0 / config.timer_HZ)

    def _label(self, text, y):
        return pyglet.text.Label(
            text,
            font_size=12,
            x=5,
            y=y,
            anchor_x='left',
            anchor_y='center',
            color=(255, 255, 255, 255)
        )

    def _update_bench(self, dt):
        cycles = self.chip.cycle_count
        self.fps_label.text = f"FPS: {self.frame_count / dt:.1f}"
        self.cps_label.text = f"Cycles/s: {(cycles - self._last_cycles) / dt:.0f}"
        self.frame_count = 0
        self._last_cycles = cycles

    # ---- CPU cycle + timers ----
    def _timer_tick(self, dt):
        if self.chip.halted:
            return
        try:
            self.chip.run(self.steps_per_tick)
        except Chip8Error as e:
            logger.error("Emulation error: %s", e)
            self.shutdown()
            return
        self.chip.tick()

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        #@Override
        if symbol == key.ESCAPE:
            self.shutdown()
        elif symbol == key.F1:
            log("logsOn:", toggle_logs())
        elif symbol in keymap:
            self.chip.key_down(keymap.key_for(symbol))

    def on_key_release(self, symbol, modifiers):
        #@Override
        if symbol in keymap:
            self.chip.key_up(keymap.key_for(symbol))

    # ---- Drawing ----
    def on_draw(self):
        self.clear()
        display = self.chip.display
        if display.should_draw:
            self.image.set_data('RGBA', self.win_width * 4, display.to_rgba(self.pixel_scale))
            display.should_draw = False
        self.image.blit(0, 0)
        self.fps_label.draw()
        self.cps_label.draw()
        self.frame_count += 1

    # close() does not dispatch on_close, so exits from inside the emulator come here
    def shutdown(self):
        self.beeper.close()
        self.close()

    def on_close(self):
        self.beeper.close()
        super().on_close()
