"""Bounds-checked access to CHIP-8 memory."""

from typing import Sequence

import jax.numpy as jnp

from chipper.errors import MemoryFault
from chipper.state import EmulatorState


def check_range(state: EmulatorState, address: int, length: int = 1) -> None:
    """Raise MemoryFault unless ``[address, address + length)`` lies inside RAM."""
    size = state.memory_size
    if address < 0 or address >= size:
        raise MemoryFault(address, size)
    if address + length > size:
        raise MemoryFault(address + length - 1, size)


def read_byte(state: EmulatorState, address: int) -> int:
    """Read one byte."""
    check_range(state, address)
    return int(state.memory[address])


def read_bytes(state: EmulatorState, address: int, length: int) -> list[int]:
    """Read ``length`` consecutive bytes starting at ``address``."""
    if length == 0:
        return []
    check_range(state, address, length)
    return [int(b) for b in state.memory[address:address + length]]


def write_bytes(state: EmulatorState, address: int, values: Sequence[int]) -> EmulatorState:
    """Write consecutive bytes starting at ``address``."""
    if len(values) == 0:
        return state
    check_range(state, address, len(values))
    data = jnp.array(values, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[address:address + len(values)].set(data))
