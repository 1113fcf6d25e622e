"""CHIP-8 system instructions (0x0xxx)."""

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction
from chipper.display import clear_display
from chipper.registers import advance_pc, set_pc
from chipper.stack import pop


def no_op(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Unknown instruction: leave the state, PC included, untouched."""
    return state


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    return advance_pc(clear_display(state))


def execute_return(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00EE - Return from subroutine to the instruction after the call."""
    stack, address = pop(state.stack)
    return advance_pc(set_pc(state.replace(stack=stack), address))
