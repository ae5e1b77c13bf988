import random

import pytest

from chip8 import Chip8


def _rom(*words):
    return b"".join(w.to_bytes(2, "big") for w in words)


@pytest.fixture
def rom():
    """Turn opcodes into big-endian ROM bytes."""
    return _rom


@pytest.fixture
def make_chip():
    """Build a Chip8 with the given opcodes loaded at 0x200."""

    def _make(*words, **kwargs):
        kwargs.setdefault("rng", random.Random(1))
        chip = Chip8(**kwargs)
        chip.load_rom(_rom(*words))
        return chip

    return _make
