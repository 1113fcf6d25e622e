"""CHIP-8 emulator state structures."""

from typing import Optional

import jax
import jax.numpy as jnp
from flax.struct import PyTreeNode

from chipper.config import MachineConfig, validate_config
from chipper.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, SCREEN_WIDTH, SCREEN_HEIGHT, NUM_REGISTERS, NUM_KEYS
)


class StackState(PyTreeNode):
    """Stack state for subroutine calls."""
    data: jnp.ndarray
    pointer: int = 0

    @property
    def depth(self) -> int:
        return self.data.shape[0]


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    The display is indexed ``[x, y]`` with shape (SCREEN_WIDTH, SCREEN_HEIGHT).
    """
    rng: jax.random.PRNGKey
    memory: jnp.ndarray
    pc: jnp.ndarray
    display: jnp.ndarray
    stack: StackState
    delay_timer: jnp.ndarray
    sound_timer: jnp.ndarray
    keypad: jnp.ndarray
    V: jnp.ndarray
    I: jnp.ndarray
    redraw: jnp.ndarray

    @property
    def memory_size(self) -> int:
        return self.memory.shape[0]


def create_state(config: Optional[MachineConfig] = None,
                 rng: Optional[jax.random.PRNGKey] = None) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    config = validate_config(config or MachineConfig())
    if rng is None:
        rng = jax.random.PRNGKey(0)

    memory = jnp.zeros(config.ram_size, dtype=jnp.uint8)
    memory = memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(jnp.array(FONT_DATA, dtype=jnp.uint8))

    return EmulatorState(
        rng=rng,
        memory=memory,
        pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16),
        display=jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_),
        stack=StackState(data=jnp.zeros(config.stack_size, dtype=jnp.uint16)),
        delay_timer=jnp.zeros((), dtype=jnp.uint8),
        sound_timer=jnp.zeros((), dtype=jnp.uint8),
        keypad=jnp.zeros(NUM_KEYS, dtype=jnp.bool_),
        V=jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8),
        I=jnp.zeros((), dtype=jnp.uint16),
        # Raised so the host draws its first frame.
        redraw=jnp.asarray(True),
    )
