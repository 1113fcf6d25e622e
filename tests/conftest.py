"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from chipper import create_state, MachineConfig
from chipper.logging import get_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep diagnostics out of test output unless a test asks for them."""
    logger = get_logger()
    level = logger.log_level
    logger.set_level("CRITICAL")
    yield logger
    logger.set_level(level)


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def small_state():
    """A machine with the smallest useful RAM and a two-entry stack."""
    return create_state(MachineConfig(ram_size=0x210, stack_size=2))


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def setup_program(state, words, address=0x200):
    """Helper to write big-endian instruction words into memory."""
    data = []
    for word in words:
        data += [(word >> 8) & 0xFF, word & 0xFF]
    return setup_sprite_in_memory(state, address, data)
