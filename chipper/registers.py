"""CHIP-8 register file helpers.

Values cross this boundary as plain Python ints; storage keeps the
fixed-width JAX dtypes of ``EmulatorState``.
"""

import jax.numpy as jnp

from chipper.constants import BYTE_MASK, WORD_MASK, FLAG_REGISTER
from chipper.state import EmulatorState


def get_register(state: EmulatorState, index: int) -> int:
    return int(state.V[index])


def set_register(state: EmulatorState, index: int, value: int) -> EmulatorState:
    return state.replace(V=state.V.at[index].set(value & BYTE_MASK))


def set_flag(state: EmulatorState, value: int) -> EmulatorState:
    """Write VF."""
    return set_register(state, FLAG_REGISTER, value)


def get_index(state: EmulatorState) -> int:
    return int(state.I)


def set_index(state: EmulatorState, value: int) -> EmulatorState:
    return state.replace(I=jnp.asarray(value & WORD_MASK, dtype=jnp.uint16))


def get_pc(state: EmulatorState) -> int:
    return int(state.pc)


def set_pc(state: EmulatorState, address: int) -> EmulatorState:
    return state.replace(pc=jnp.asarray(address & WORD_MASK, dtype=jnp.uint16))


def advance_pc(state: EmulatorState, amount: int = 2) -> EmulatorState:
    """Move to the next instruction, or skip one with ``amount=4``."""
    return set_pc(state, get_pc(state) + amount)
