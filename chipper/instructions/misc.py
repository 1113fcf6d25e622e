"""CHIP-8 miscellaneous instructions (Fxxx)."""

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction
from chipper.constants import FONT_START, FONT_GLYPH_SIZE, ADDRESS_MASK
from chipper.keypad import pressed_keys
from chipper.ram import read_bytes, write_bytes
from chipper.registers import (
    get_register, set_register, get_index, set_index, set_flag, advance_pc
)
from chipper.timers import set_delay_timer, set_sound_timer


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return advance_pc(set_register(state, instruction.x, int(state.delay_timer)))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return advance_pc(set_delay_timer(state, get_register(state, instruction.x)))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return advance_pc(set_sound_timer(state, get_register(state, instruction.x)))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register, VF = 1 past the 12-bit address space."""
    new_i = get_index(state) + get_register(state, instruction.x)
    state = set_flag(state, int(new_i > ADDRESS_MASK))
    return advance_pc(set_index(state, new_i))


def is_waiting_for_key(state: EmulatorState) -> bool:
    """True when FX0A would stall: no key is pressed."""
    return not pressed_keys(state)


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press, polling.

    With no key pressed the state is returned unchanged, so the same
    instruction runs again on the next step. Otherwise the highest pressed
    key is stored in VX.
    """
    keys = pressed_keys(state)
    if not keys:
        return state
    return advance_pc(set_register(state, instruction.x, keys[-1]))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + get_register(state, instruction.x) * FONT_GLYPH_SIZE
    return advance_pc(set_index(state, font_address))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = get_register(state, instruction.x)
    digits = [value // 100, (value // 10) % 10, value % 10]
    return advance_pc(write_bytes(state, get_index(state), digits))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I, then I = X + 1."""
    values = [get_register(state, i) for i in range(instruction.x + 1)]
    state = write_bytes(state, get_index(state), values)
    return advance_pc(set_index(state, instruction.x + 1))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I, then I = X + 1."""
    values = read_bytes(state, get_index(state), instruction.x + 1)
    for i, value in enumerate(values):
        state = set_register(state, i, value)
    return advance_pc(set_index(state, instruction.x + 1))
