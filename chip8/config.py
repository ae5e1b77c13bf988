# CHIP8 Virtual Machine configuration
# Memory - can hold up to 4096 bytes which includes: the interpreter, fonts, and inputted ROM.
# Cowgods CHIP8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM#0.0

# ---- Display ----
scale = 10
width, height = 64, 32
window_width, window_height = width * scale, height * scale

# ---- Clocks ----
cpu_hz = 540
timer_HZ = 60

# ---- Memory map ----
MEMORY_SIZE = 4096
MAX_ADDRESS = 0xFFF
FONT_START = 0x000      # fonts live in the interpreter area
PROGRAM_START = 0x200   # everything below 0x200 is for the interpreter
MAX_ROM_SIZE = MAX_ADDRESS - PROGRAM_START  # 3583 bytes

# ---- CPU ----
NUM_REGISTERS = 16
NUM_KEYS = 16
STACK_DEPTH = 16        # None means the stack may grow without limit

# set fonts (binary pixel patterns)
GLYPH_SIZE = 5
fontset = [
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
] #notice 80 bytes

# Keyboard layout, host key name -> CHIP-8 keypad
#   1 2 3 C        1 2 3 4
#   4 5 6 D   <-   Q W E R
#   7 8 9 E        A S D F
#   A 0 B F        Z X C V
KEY_LAYOUT = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}


def steps_per_tick(clock=None):
    """Instructions executed between two 60Hz timer ticks."""
    clock = cpu_hz if clock is None else clock
    return max(1, clock // timer_HZ)
