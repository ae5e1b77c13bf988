"""Tests for opcode field extraction and disassembly."""

from chip8.decoder import decode, disassemble, fetch_word


def test_fields() -> None:
    op = decode(0xD123)
    assert op.kind == 0xD
    assert op.x == 0x1
    assert op.y == 0x2
    assert op.n == 0x3
    assert op.kk == 0x23
    assert op.nnn == 0x123


def test_every_word_decodes() -> None:
    op = decode(0xFFFF)
    assert (op.kind, op.x, op.y, op.n, op.kk, op.nnn) == (0xF, 0xF, 0xF, 0xF, 0xFF, 0xFFF)
    assert decode(0x0000).nnn == 0


def test_fetch_word_is_big_endian() -> None:
    assert fetch_word(0x12, 0x34) == 0x1234


def test_opcode_equality() -> None:
    assert decode(0x8014) == decode(0x8014)
    assert decode(0x8014) != decode(0x8015)


def test_disassemble_known_opcodes() -> None:
    assert disassemble(0x00E0) == "CLS"
    assert disassemble(0x00EE) == "RET"
    assert disassemble(0x1234) == "JP 0x234"
    assert disassemble(0x2300) == "CALL 0x300"
    assert disassemble(0x3A05) == "SE VA, 0x05"
    assert disassemble(0x8014) == "ADD V0, V1"
    assert disassemble(0x801E) == "SHL V0, V1"
    assert disassemble(0xB200) == "JP V0, 0x200"
    assert disassemble(0xD125) == "DRW V1, V2, 5"
    assert disassemble(0xE59E) == "SKP V5"
    assert disassemble(0xF30A) == "LD V3, K"
    assert disassemble(0xF233) == "LD B, V2"


def test_disassemble_unknown_opcodes() -> None:
    assert disassemble(0x0123) == "DATA 0x0123"
    assert disassemble(0x5121) == "DATA 0x5121"
    assert disassemble(0x8128) == "DATA 0x8128"
    assert disassemble(0xE0FF) == "DATA 0xE0FF"
    assert disassemble(0xF0FF) == "DATA 0xF0FF"
