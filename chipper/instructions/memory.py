"""CHIP-8 memory and register operations."""

import jax

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction
from chipper.registers import get_register, set_register, set_index, advance_pc


def execute_set(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """6XNN - Set VX = NN."""
    return advance_pc(set_register(state, instruction.x, instruction.nn))


def execute_add(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """7XNN - Add NN to VX, wrapping, VF untouched."""
    value = get_register(state, instruction.x) + instruction.nn
    return advance_pc(set_register(state, instruction.x, value))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return advance_pc(set_index(state, instruction.nnn))


def execute_random(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """CXNN - Set VX = random & NN."""
    key, subkey = jax.random.split(state.rng)
    random_value = int(jax.random.randint(subkey, shape=(), minval=0, maxval=256))
    state = set_register(state.replace(rng=key), instruction.x, random_value & instruction.nn)
    return advance_pc(state)
