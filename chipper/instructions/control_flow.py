"""CHIP-8 control flow instructions."""

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction
from chipper.constants import NUM_KEYS
from chipper.errors import KeyFault
from chipper.keypad import is_pressed
from chipper.registers import get_register, get_pc, set_pc, advance_pc
from chipper.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return set_pc(state, instruction.nnn)


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN, saving the call-site PC."""
    state = state.replace(stack=push(state.stack, get_pc(state)))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        return advance_pc(state, 4 if condition_fn(state, instruction) else 2)
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) == get_register(state, inst.y)
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) != get_register(state, inst.y)
)


def _key_in_vx(state: EmulatorState, instruction: DecodedInstruction) -> bool:
    key = get_register(state, instruction.x)
    if key >= NUM_KEYS:
        raise KeyFault(key)
    return is_pressed(state, key)


execute_skip_if_key = make_skip_instruction(_key_in_vx)

execute_skip_if_not_key = make_skip_instruction(
    lambda state, inst: not _key_in_vx(state, inst)
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    return set_pc(state, instruction.nnn + get_register(state, 0))
