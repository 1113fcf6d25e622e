"""CHIP-8 instruction decoding."""

from enum import Enum

from chex import dataclass


class Op(Enum):
    """Closed set of instruction variants, one per opcode table row."""
    CLS = "00E0"
    RET = "00EE"
    JP = "1NNN"
    CALL = "2NNN"
    SE_IMM = "3XNN"
    SNE_IMM = "4XNN"
    SE_REG = "5XY0"
    LD_IMM = "6XNN"
    ADD_IMM = "7XNN"
    LD_REG = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_REG = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_REG = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_KEY = "FX0A"
    LD_DT = "FX15"
    LD_ST = "FX18"
    ADD_I = "FX1E"
    LD_FONT = "FX29"
    BCD = "FX33"
    STORE = "FX55"
    LOAD = "FX65"
    UNKNOWN = "????"


_SYSTEM_OPS = {0x0: Op.CLS, 0xE: Op.RET}

_SIMPLE_OPS = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_IMM,
    0x4: Op.SNE_IMM,
    0x5: Op.SE_REG,
    0x6: Op.LD_IMM,
    0x7: Op.ADD_IMM,
    0x9: Op.SNE_REG,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW,
}

_ALU_OPS = {
    0x0: Op.LD_REG,
    0x1: Op.OR,
    0x2: Op.AND,
    0x3: Op.XOR,
    0x4: Op.ADD_REG,
    0x5: Op.SUB,
    0x6: Op.SHR,
    0x7: Op.SUBN,
    0xE: Op.SHL,
}

_KEY_OPS = {0x9E: Op.SKP, 0xA1: Op.SKNP}

_MISC_OPS = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_KEY,
    0x15: Op.LD_DT,
    0x18: Op.LD_ST,
    0x1E: Op.ADD_I,
    0x29: Op.LD_FONT,
    0x33: Op.BCD,
    0x55: Op.STORE,
    0x65: Op.LOAD,
}


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    op: Op
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)

    def __str__(self) -> str:
        return f"{self.raw:04X} {self.op.name}"


def classify(instruction: int) -> Op:
    """Select the variant of a 16-bit instruction word."""
    family = (instruction & 0xF000) >> 12
    if family == 0x0:
        return _SYSTEM_OPS.get(instruction & 0x000F, Op.UNKNOWN)
    if family in _SIMPLE_OPS:
        return _SIMPLE_OPS[family]
    if family == 0x8:
        return _ALU_OPS.get(instruction & 0x000F, Op.UNKNOWN)
    if family == 0xE:
        return _KEY_OPS.get(instruction & 0x00FF, Op.UNKNOWN)
    return _MISC_OPS.get(instruction & 0x00FF, Op.UNKNOWN)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=instruction,
        op=classify(instruction),
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )
