# Input - hex keypad state.
# The core only knows logical keys 0x0-0xF. Hosts translate their own key
# identities through a KeyMap built from whatever symbols their input system uses.

import numpy as np

from . import config


class KeyMap:
    """Two-way mapping between host key symbols and logical keys."""

    def __init__(self, mapping):
        self._to_key = dict(mapping)
        self._to_symbol = {}
        for symbol, key in self._to_key.items():
            if not 0 <= key < config.NUM_KEYS:
                raise ValueError("Logical key out of range: %r" % (key,))
            self._to_symbol.setdefault(key, symbol)

    def __contains__(self, symbol):
        return symbol in self._to_key

    def __len__(self):
        return len(self._to_key)

    def key_for(self, symbol):
        """Logical key for a host symbol, or None if it is not mapped."""
        return self._to_key.get(symbol)

    def symbol_for(self, key):
        return self._to_symbol.get(key & 0xF)

    @classmethod
    def from_layout(cls, lookup, layout=None):
        """Build a map by resolving each layout name with ``lookup(name)``."""
        layout = config.KEY_LAYOUT if layout is None else layout
        return cls({lookup(name): key for name, key in layout.items()})


class Keypad:

    def __init__(self):
        self.keys = np.zeros(config.NUM_KEYS, dtype=np.uint8)

    def is_pressed(self, key):
        return bool(self.keys[key & 0xF])

    def press(self, key):
        """Mark ``key`` down. True if this is a new press rather than a held key."""
        key &= 0xF
        was_down = bool(self.keys[key])
        self.keys[key] = 1
        return not was_down

    def release(self, key):
        self.keys[key & 0xF] = 0

    def pressed_keys(self):
        return [k for k in range(config.NUM_KEYS) if self.keys[k]]

    def reset(self):
        self.keys[:] = 0
