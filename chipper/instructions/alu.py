"""CHIP-8 ALU operations (8xxx).

Each operation maps (VX, VY) to (result, flag); a flag of None leaves VF
untouched. The flag comes from the pre-instruction operands and is written
first; the result is then computed from the registers as they stand, so an
operand naming VF sees the new flag.
"""

from typing import Optional

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction, Op
from chipper.registers import get_register, set_register, set_flag, advance_pc


def alu_set(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY4 - Add: VX += VY, set carry flag."""
    result = vx + vy
    return result & 0xFF, int(result > 0xFF)


def alu_sub_xy(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY5 - Subtract: VX -= VY, VF = 0 on borrow."""
    return (vx - vy) & 0xFF, 0 if vy > vx else 1


def alu_shift_right(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY6 - Shift right: VX >>= 1, VF = shifted out bit."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY7 - Subtract: VX = VY - VX, VF = 0 on borrow."""
    return (vy - vx) & 0xFF, 0 if vx > vy else 1


def alu_shift_left(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XYE - Shift left: VX <<= 1, VF = shifted out bit."""
    return (vx << 1) & 0xFF, (vx & 0x80) >> 7


ALU_OPERATIONS = {
    Op.LD_REG: alu_set,
    Op.OR: alu_or,
    Op.AND: alu_and,
    Op.XOR: alu_xor,
    Op.ADD_REG: alu_add,
    Op.SUB: alu_sub_xy,
    Op.SHR: alu_shift_right,
    Op.SUBN: alu_sub_yx,
    Op.SHL: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    vx = get_register(state, instruction.x)
    vy = get_register(state, instruction.y)

    operation = ALU_OPERATIONS[instruction.op]
    result, vf = operation(vx, vy)

    if vf is not None:
        state = set_flag(state, vf)
        result, _ = operation(get_register(state, instruction.x), get_register(state, instruction.y))

    state = set_register(state, instruction.x, result)
    return advance_pc(state)
