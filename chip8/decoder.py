# CHIP-8 instruction decoding.
# Every 16-bit word decodes into the same set of fields; whether the word is a
# real instruction is decided by the dispatch in cpu.py.


class Opcode:
    """Addressing fields of one 16-bit opcode."""

    __slots__ = ("raw", "kind", "x", "y", "n", "kk", "nnn")

    def __init__(self, raw):
        raw &= 0xFFFF
        self.raw = raw
        self.kind = (raw & 0xF000) >> 12  # top nibble, the opcode class
        self.x = (raw & 0x0F00) >> 8      # VX register index
        self.y = (raw & 0x00F0) >> 4      # VY register index
        self.n = raw & 0x000F             # 4-bit immediate / sprite height
        self.kk = raw & 0x00FF            # 8-bit immediate
        self.nnn = raw & 0x0FFF           # 12-bit address

    def __repr__(self):
        return "Opcode(0x%04X)" % self.raw

    def __eq__(self, other):
        if isinstance(other, Opcode):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self):
        return hash(self.raw)


def decode(word):
    return Opcode(word)


def fetch_word(high, low):
    # opcodes are big-endian: high byte at PC, low byte at PC+1
    return ((high & 0xFF) << 8) | (low & 0xFF)


# mnemonics follow Cowgod's reference
_ALU = {
    0x0: "LD", 0x1: "OR", 0x2: "AND", 0x3: "XOR",
    0x4: "ADD", 0x5: "SUB", 0x6: "SHR", 0x7: "SUBN", 0xE: "SHL",
}

_MISC = {
    0x07: "LD V{x}, DT",
    0x0A: "LD V{x}, K",
    0x15: "LD DT, V{x}",
    0x18: "LD ST, V{x}",
    0x1E: "ADD I, V{x}",
    0x29: "LD F, V{x}",
    0x33: "LD B, V{x}",
    0x55: "LD [I], V{x}",
    0x65: "LD V{x}, [I]",
}


def disassemble(word):
    """Return the mnemonic for ``word``, or ``DATA 0xNNNN`` if it is not an instruction."""
    op = decode(word)
    x = "%X" % op.x
    y = "%X" % op.y
    kind = op.kind

    if kind == 0x0:
        if op.raw in (0x00E0, 0x0000):
            return "CLS"
        if op.raw == 0x00EE:
            return "RET"
    elif kind == 0x1:
        return "JP 0x%03X" % op.nnn
    elif kind == 0x2:
        return "CALL 0x%03X" % op.nnn
    elif kind == 0x3:
        return "SE V%s, 0x%02X" % (x, op.kk)
    elif kind == 0x4:
        return "SNE V%s, 0x%02X" % (x, op.kk)
    elif kind == 0x5 and op.n == 0:
        return "SE V%s, V%s" % (x, y)
    elif kind == 0x6:
        return "LD V%s, 0x%02X" % (x, op.kk)
    elif kind == 0x7:
        return "ADD V%s, 0x%02X" % (x, op.kk)
    elif kind == 0x8 and op.n in _ALU:
        return "%s V%s, V%s" % (_ALU[op.n], x, y)
    elif kind == 0x9 and op.n == 0:
        return "SNE V%s, V%s" % (x, y)
    elif kind == 0xA:
        return "LD I, 0x%03X" % op.nnn
    elif kind == 0xB:
        return "JP V0, 0x%03X" % op.nnn
    elif kind == 0xC:
        return "RND V%s, 0x%02X" % (x, op.kk)
    elif kind == 0xD:
        return "DRW V%s, V%s, %d" % (x, y, op.n)
    elif kind == 0xE:
        if op.kk == 0x9E:
            return "SKP V%s" % x
        if op.kk == 0xA1:
            return "SKNP V%s" % x
    elif kind == 0xF and op.kk in _MISC:
        return _MISC[op.kk].format(x=x)

    return "DATA 0x%04X" % op.raw
