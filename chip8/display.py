# Output - 64x32 display, array of pixels that are either on or off (0 || 1).
# The framebuffer is addressed [y][x]; sprites wrap around the edges.

import numpy as np

from . import config


class Display:

    def __init__(self, width=config.width, height=config.height):
        self.width = width
        self.height = height
        self.vram = np.zeros((height, width), dtype=np.uint8)
        self.should_draw = True  # so that we only update the display when needed

    def clear(self):
        self.vram[:] = 0
        self.should_draw = True

    def draw_sprite(self, x, y, rows):
        """XOR ``rows`` (one byte per row, MSB leftmost) onto the screen at (x, y).

        Returns True if any lit pixel was switched off.
        """
        x %= self.width
        y %= self.height
        collision = False
        for row, sprite in enumerate(rows):
            if sprite == 0:
                continue
            py = (y + row) % self.height
            for bit in range(8):
                if sprite & (0x80 >> bit):
                    px = (x + bit) % self.width
                    if self.vram[py, px]:
                        collision = True
                    self.vram[py, px] ^= 1
        self.should_draw = True
        return collision

    def pixel(self, x, y):
        return bool(self.vram[y % self.height, x % self.width])

    def grid(self):
        """Read-only [y][x] view of the framebuffer."""
        view = self.vram.view()
        view.flags.writeable = False
        return view

    def to_text(self, on="#", off="."):
        return "\n".join("".join(on if p else off for p in row) for row in self.vram)

    def to_rgba(self, scale=config.scale, color=(255, 255, 255)):
        """RGBA bytes of the screen upscaled by ``scale``, bottom row first."""
        small = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        small[..., 3] = 255
        lit = self.vram[::-1].astype(bool)  # pyglet images start at the bottom-left
        small[lit, 0] = color[0]
        small[lit, 1] = color[1]
        small[lit, 2] = color[2]
        if scale != 1:
            small = np.repeat(np.repeat(small, scale, axis=0), scale, axis=1)
        return small.tobytes()
