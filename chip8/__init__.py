# CHIP-8 virtual machine

from .cpu import Chip8
from .decoder import Opcode, decode, disassemble
from .display import Display
from .errors import (
    Chip8Error,
    DecodeError,
    MemoryAccessError,
    RomLoadError,
    StackOverflowError,
    StackUnderflowError,
)
from .keypad import KeyMap, Keypad
from .machine import Machine
from .timers import Timers

__version__ = "0.1.0"

__all__ = [
    "Chip8",
    "Chip8Error",
    "DecodeError",
    "Display",
    "KeyMap",
    "Keypad",
    "Machine",
    "MemoryAccessError",
    "Opcode",
    "RomLoadError",
    "StackOverflowError",
    "StackUnderflowError",
    "Timers",
    "decode",
    "disassemble",
]
