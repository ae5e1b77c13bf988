# Errors raised by the CHIP-8 core.
# Nothing here is retried: the interpreter is deterministic, so the host decides
# whether to abort, reset or report.


class Chip8Error(Exception):
    pass


class DecodeError(Chip8Error):
    def __init__(self, opcode, pc):
        self.opcode = opcode
        self.pc = pc
        super().__init__("Unknown opcode %04X at PC 0x%03X" % (opcode, pc))


class StackUnderflowError(Chip8Error):
    def __init__(self, pc):
        self.pc = pc
        super().__init__("Stack underflow on 00EE at PC 0x%03X" % pc)


class StackOverflowError(Chip8Error):
    def __init__(self, pc, depth):
        self.pc = pc
        self.depth = depth
        super().__init__("Stack overflow on CALL at PC 0x%03X (depth %d)" % (pc, depth))


class MemoryAccessError(Chip8Error):
    def __init__(self, address, what="address"):
        self.address = address
        super().__init__("%s out of bounds: 0x%X" % (what, address))


class RomLoadError(Chip8Error):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__("Cannot load ROM %s: %s" % (path, reason))
