# CHIP8 CPU - Cowgods CHIP8 Technical reference http://devernay.free.fr/hacks/chip8/C8TECH10.HTM#0.0
#----------------------------------------------------------------------------------------------
# step() fetches one opcode, decodes it and runs its handler to completion. Handlers are
# looked up by the top nibble; classes 0x0, 0x8, 0xE and 0xF dispatch again on the low
# byte / low nibble. Anything not in the tables is a DecodeError.
#----------------------------------------------------------------------------------------------

import random

from . import config
from . import log as logs
from .decoder import decode, disassemble, fetch_word
from .errors import Chip8Error, DecodeError, StackOverflowError, StackUnderflowError
from .log import log
from .machine import VF, Machine


class Chip8(Machine):

    def __init__(self, stack_depth=config.STACK_DEPTH, rng=None):
        super().__init__(stack_depth=stack_depth)
        self.rng = rng if rng is not None else random.Random()
        self.opcode = None
        self.opcode_pc = self.pc
        self.waiting_register = None  # register index while FX0A waits for a key
        self.error = None
        self.cycle_count = 0

        # Prepare opcode function map
        self.setup_funcmap()

    # ---- Opcode function map ----
    def setup_funcmap(self):
        self.funcmap = {
            0x0: self._0nnn,  # 00E0 / 00EE - Clear screen / Return from subroutine
            0x1: self._1nnn,  # 1nnn - Jump to a specific memory address
            0x2: self._2nnn,  # 2nnn - Call a function (subroutine) at a memory address
            0x3: self._3xkk,  # 3xkk - Skip next instruction if a register equals a specific number
            0x4: self._4xkk,  # 4xkk - Skip next instruction if a register does NOT equal a number
            0x5: self._5xy0,  # 5xy0 - Skip next instruction if two registers are equal
            0x6: self._6xkk,  # 6xkk - Set a register to a specific number
            0x7: self._7xkk,  # 7xkk - Add a number to a register
            0x8: self._8xxx,  # 8xy0..8xyE - Math and logic operations between two registers
            0x9: self._9xy0,  # 9xy0 - Skip next instruction if two registers are NOT equal
            0xA: self._Annn,  # Annn - Set the memory pointer (I) to a specific address
            0xB: self._Bnnn,  # Bnnn - Jump to an address plus the value of register V0
            0xC: self._Cxkk,  # Cxkk - Set a register to a random number ANDed with a value
            0xD: self._Dxyn,  # Dxyn - Draw a sprite on the screen at X,Y coordinates
            0xE: self._Exxx,  # Ex9E / ExA1 - Skip next instruction if a key is pressed or not pressed
            0xF: self._Fxxx,  # Fx07..Fx65 - timers, memory storage, and waiting for keys
        }
        self.alu_funcmap = {
            0x0: self._8xy0,
            0x1: self._8xy1,
            0x2: self._8xy2,
            0x3: self._8xy3,
            0x4: self._8xy4,
            0x5: self._8xy5,
            0x6: self._8xy6,
            0x7: self._8xy7,
            0xE: self._8xyE,
        }
        self.key_funcmap = {
            0x9E: self._Ex9E,
            0xA1: self._ExA1,
        }
        self.misc_funcmap = {
            0x07: self._Fx07,
            0x0A: self._Fx0A,
            0x15: self._Fx15,
            0x18: self._Fx18,
            0x1E: self._Fx1E,
            0x29: self._Fx29,
            0x33: self._Fx33,
            0x55: self._Fx55,
            0x65: self._Fx65,
        }

    # ---- State ----
    @property
    def waiting_for_key(self):
        return self.waiting_register is not None

    @property
    def halted(self):
        return self.error is not None

    @property
    def tone_active(self):
        return self.timers.tone_active

    # ---- Cycle ----
    def step(self):
        """Run one instruction. Returns False, without touching state, while FX0A waits."""
        if self.error is not None:
            raise self.error
        if self.waiting_register is not None:
            return False

        start = self.pc
        try:
            # Fetch opcode
            self.check_address(start, "PC")
            self.check_address(start + 1, "PC")
            word = fetch_word(self.memory[start], self.memory[start + 1])
            op = decode(word)
            self.opcode = op
            self.opcode_pc = start
            self.pc = start + 2

            if logs.logsOn:
                log("%03X: %04X  %s" % (start, word, disassemble(word)))

            self.funcmap[op.kind](op)
        except Chip8Error as e:
            # handlers check before they write, so only PC needs rolling back
            self.pc = start
            self.error = e
            raise

        self.cycle_count += 1
        return True

    def run(self, steps):
        """Run up to ``steps`` instructions; returns how many actually executed."""
        executed = 0
        for _ in range(steps):
            if not self.step():
                break
            executed += 1
        return executed

    # ---- timers ----
    def tick(self):
        self.timers.tick()

    # ---- Input ----
    def key_down(self, key):
        new_press = self.keypad.press(key)
        if new_press and self.waiting_register is not None:
            self.V[self.waiting_register] = key & 0xF
            log("Key", hex(key & 0xF), "stored in V%X" % self.waiting_register)
            self.waiting_register = None

    def key_up(self, key):
        self.keypad.release(key)

    def _unknown(self, op):
        raise DecodeError(op.raw, self.opcode_pc)

    def _skip(self):
        self.pc += 2

    # ---- Opcode Handlers ----

    # 00E0 / 00EE - Clear Screen / Return from subroutine
    def _0nnn(self, op):
        if op.raw in (0x00E0, 0x0000):
            self.display.clear()
        elif op.raw == 0x00EE:
            if not self.stack:
                raise StackUnderflowError(self.opcode_pc)
            self.pc = self.stack.pop()
        else:
            # 0nnn machine code routines are not supported
            self._unknown(op)

    # 1nnn - Jump to address NNN
    def _1nnn(self, op):
        self.pc = op.nnn

    # 2nnn - Call subroutine at NNN
    def _2nnn(self, op):
        if self.stack_depth is not None and len(self.stack) >= self.stack_depth:
            raise StackOverflowError(self.opcode_pc, len(self.stack))
        self.stack.append(self.pc)
        self.pc = op.nnn

    # 3xkk - Skip next instruction if Vx == kk
    def _3xkk(self, op):
        if self.V[op.x] == op.kk:
            self._skip()

    # 4xkk - Skip next instruction if Vx != kk
    def _4xkk(self, op):
        if self.V[op.x] != op.kk:
            self._skip()

    # 5xy0 - Skip next instruction if Vx == Vy
    def _5xy0(self, op):
        if op.n != 0:
            self._unknown(op)
        if self.V[op.x] == self.V[op.y]:
            self._skip()

    # 6xkk - Set Vx = kk
    def _6xkk(self, op):
        self.V[op.x] = op.kk

    # 7xkk - Add immediate, VF untouched
    def _7xkk(self, op):
        self.V[op.x] = (self.V[op.x] + op.kk) & 0xFF

    # 8xy0..8xyE
    def _8xxx(self, op):
        handler = self.alu_funcmap.get(op.n)
        if handler is None:
            self._unknown(op)
        handler(op)

    def _8xy0(self, op):
        self.V[op.x] = self.V[op.y]

    def _8xy1(self, op):
        self.V[op.x] |= self.V[op.y]

    def _8xy2(self, op):
        self.V[op.x] &= self.V[op.y]

    def _8xy3(self, op):
        self.V[op.x] ^= self.V[op.y]

    # The flag is written after the result so it wins when x is F.
    def _8xy4(self, op):
        total = self.V[op.x] + self.V[op.y]
        self.V[op.x] = total & 0xFF
        self.V[VF] = 1 if total > 0xFF else 0

    def _8xy5(self, op):
        not_borrow = 1 if self.V[op.x] >= self.V[op.y] else 0
        self.V[op.x] = (self.V[op.x] - self.V[op.y]) & 0xFF
        self.V[VF] = not_borrow

    def _8xy6(self, op):
        lsb = self.V[op.x] & 1
        self.V[op.x] >>= 1
        self.V[VF] = lsb

    def _8xy7(self, op):
        not_borrow = 1 if self.V[op.y] >= self.V[op.x] else 0
        self.V[op.x] = (self.V[op.y] - self.V[op.x]) & 0xFF
        self.V[VF] = not_borrow

    def _8xyE(self, op):
        msb = (self.V[op.x] >> 7) & 1
        self.V[op.x] = (self.V[op.x] << 1) & 0xFF
        self.V[VF] = msb

    # 9xy0 - Skip next instruction if Vx != Vy
    def _9xy0(self, op):
        if op.n != 0:
            self._unknown(op)
        if self.V[op.x] != self.V[op.y]:
            self._skip()

    # Annn - Set I = NNN
    def _Annn(self, op):
        self.I = op.nnn

    # Bnnn - Jump to address V0 + NNN
    def _Bnnn(self, op):
        target = self.V[0] + op.nnn
        self.pc = self.check_address(target, "PC")

    # Cxkk - RND Vx, byte
    def _Cxkk(self, op):
        self.V[op.x] = self.rng.getrandbits(8) & op.kk

    # Dxyn - DRW Vx, Vy, nibble
    def _Dxyn(self, op):
        rows = self.read_block(self.I, op.n)
        collision = self.display.draw_sprite(self.V[op.x], self.V[op.y], rows)
        self.V[VF] = 1 if collision else 0

    # Ex9E / ExA1 - SKP / SKNP
    def _Exxx(self, op):
        handler = self.key_funcmap.get(op.kk)
        if handler is None:
            self._unknown(op)
        handler(op)

    def _Ex9E(self, op):
        if self.keypad.is_pressed(self.V[op.x] & 0xF):
            self._skip()

    def _ExA1(self, op):
        if not self.keypad.is_pressed(self.V[op.x] & 0xF):
            self._skip()

    # Fx07..Fx65 - timers, memory, I, and key input
    def _Fxxx(self, op):
        handler = self.misc_funcmap.get(op.kk)
        if handler is None:
            self._unknown(op)
        handler(op)

    def _Fx07(self, op):
        self.V[op.x] = self.timers.delay

    # LD Vx, K: park until key_down() delivers a new press
    def _Fx0A(self, op):
        self.waiting_register = op.x
        log("Waiting for key into V%X" % op.x)

    def _Fx15(self, op):
        self.timers.delay = self.V[op.x]

    def _Fx18(self, op):
        self.timers.sound = self.V[op.x]

    def _Fx1E(self, op):
        self.I = self.check_address(self.I + self.V[op.x], "I")

    def _Fx29(self, op):
        self.I = config.FONT_START + config.GLYPH_SIZE * (self.V[op.x] & 0xF)

    def _Fx33(self, op):
        val = self.V[op.x]
        self.write_block(self.I, (val // 100, (val // 10) % 10, val % 10))

    def _Fx55(self, op):
        self.write_block(self.I, self.V[:op.x + 1])

    def _Fx65(self, op):
        self.V[:op.x + 1] = list(self.read_block(self.I, op.x + 1))
