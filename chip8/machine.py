# CHIP8 machine state:
# Memory - 4096 bytes: fonts at 0x000, interpreter area up to 0x1FF, ROM from 0x200.
# Registers - 16 general purpose 8-bit registers V0..VF. VF doubles as the
# carry/borrow/collision flag.
# I - 16-bit address register. PC - starts at 0x200.
# Stack - return addresses for CALL/RET.
# Two timers that count down at 60Hz, the 64x32 display, and the 16-key keypad.

from . import config
from .display import Display
from .errors import MemoryAccessError, RomLoadError
from .keypad import Keypad
from .log import log
from .timers import Timers

VF = 0xF


class Machine:

    def __init__(self, stack_depth=config.STACK_DEPTH):
        self.memory = bytearray(config.MEMORY_SIZE)
        self.V = [0] * config.NUM_REGISTERS
        self.I = 0
        self.pc = config.PROGRAM_START
        self.stack = []
        self.stack_depth = stack_depth
        self.timers = Timers()
        self.display = Display()
        self.keypad = Keypad()
        self.rom_size = None

        # Load fontset into memory
        start = config.FONT_START
        self.memory[start:start + len(config.fontset)] = bytes(config.fontset)

    # ---- Memory ----
    @staticmethod
    def check_address(address, what="address"):
        if not 0 <= address <= config.MAX_ADDRESS:
            raise MemoryAccessError(address, what)
        return address

    def read(self, address):
        return self.memory[self.check_address(address)]

    def write(self, address, value):
        self.memory[self.check_address(address)] = value & 0xFF

    def read_block(self, address, length):
        if length:
            self.check_address(address)
            self.check_address(address + length - 1)
        return bytes(self.memory[address:address + length])

    def write_block(self, address, data):
        if data:
            self.check_address(address)
            self.check_address(address + len(data) - 1)
        self.memory[address:address + len(data)] = bytes(data)

    # ---- Timers ----
    @property
    def delay_timer(self):
        return self.timers.delay

    @delay_timer.setter
    def delay_timer(self, value):
        self.timers.delay = value

    @property
    def sound_timer(self):
        return self.timers.sound

    @sound_timer.setter
    def sound_timer(self, value):
        self.timers.sound = value

    # ---- Load ROM ----
    def load_rom(self, data, name="<bytes>"):
        """Copy raw ROM bytes to 0x200. Nothing is written if the ROM is rejected."""
        if self.rom_size is not None:
            raise RomLoadError(name, "a ROM is already loaded")
        data = bytes(data)
        if len(data) > config.MAX_ROM_SIZE:
            raise RomLoadError(
                name, "%d bytes exceeds the %d byte limit" % (len(data), config.MAX_ROM_SIZE))
        start = config.PROGRAM_START
        self.memory[start:start + len(data)] = data
        self.rom_size = len(data)
        log("Loaded ROM:", name, len(data), "bytes")
        return len(data)

    def load_rom_file(self, path):
        log("Loading ROM:", path)
        try:
            with open(path, "rb") as f:
                data = f.read(config.MAX_ROM_SIZE + 1)
        except OSError as e:
            raise RomLoadError(path, e.strerror or str(e)) from e
        return self.load_rom(data, name=str(path))
