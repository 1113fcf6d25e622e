"""Tests for system instructions (0xxx)."""

import pytest
import jax.numpy as jnp
from chipper import execute, poll_redraw, StackUnderflowFault


def test_execute_clear_screen(fresh_state):
    """Test 00E0 - Clear display."""
    state = fresh_state.replace(display=fresh_state.display.at[0, 0].set(True).at[63, 31].set(True))
    state, _ = poll_redraw(state)

    state = execute(state, 0x00E0)

    assert jnp.sum(state.display) == 0
    assert state.pc == 0x202
    state, redraw = poll_redraw(state)
    assert redraw
    state, redraw = poll_redraw(state)
    assert not redraw


def test_execute_call_and_return(fresh_state):
    """Test 2NNN (call) and 00EE (return) together."""
    state = execute(fresh_state, 0x1400)  # Jump to the call site
    call_site = int(state.pc)

    state = execute(state, 0x2300)  # Call 0x300
    assert state.pc == 0x300
    assert state.stack.data[state.stack.pointer - 1] == call_site

    state = execute(state, 0x00EE)  # Return
    assert state.pc == call_site + 2
    assert state.stack.pointer == 0


def test_nested_calls(fresh_state):
    """Returns unwind in LIFO order."""
    state = execute(fresh_state, 0x2300)
    state = execute(state, 0x2400)
    state = execute(state, 0x00EE)
    assert state.pc == 0x302
    state = execute(state, 0x1500)
    state = execute(state, 0x00EE)
    assert state.pc == 0x202


def test_return_with_empty_stack(fresh_state):
    """00EE - Returning with nothing to return to faults."""
    with pytest.raises(StackUnderflowFault):
        execute(fresh_state, 0x00EE)


@pytest.mark.parametrize("instruction", [0x0123, 0x00E1, 0x00FF])
def test_unknown_system_instruction(fresh_state, instruction):
    """0NNN words whose low nibble is neither 0 nor E change nothing."""
    state = execute(fresh_state, instruction)
    assert state.pc == 0x200
    assert (state.memory == fresh_state.memory).all()


def test_zero_word_clears_screen(fresh_state):
    """0000 dispatches on its low nibble like 00E0."""
    state = fresh_state.replace(display=fresh_state.display.at[5, 5].set(True))

    state = execute(state, 0x0000)

    assert jnp.sum(state.display) == 0
    assert state.pc == 0x202


def test_return_from_any_0nne_word(fresh_state):
    state = execute(fresh_state, 0x2400)
    state = execute(state, 0x01FE)
    assert state.pc == 0x202
