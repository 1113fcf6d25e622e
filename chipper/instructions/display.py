"""CHIP-8 display operations."""

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction
from chipper.display import draw_sprite
from chipper.ram import read_bytes
from chipper.registers import get_register, get_index, set_flag, advance_pc


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N, VF = collision."""
    sprite_x = get_register(state, instruction.x)
    sprite_y = get_register(state, instruction.y)
    rows = read_bytes(state, get_index(state), instruction.n)

    state = set_flag(state, 0)
    state, collision = draw_sprite(state, sprite_x, sprite_y, rows)
    if collision:
        state = set_flag(state, 1)
    return advance_pc(state)
