"""CHIP-8 delay and sound timers."""

import jax.numpy as jnp

from chipper.state import EmulatorState


def _u8(value: int) -> jnp.ndarray:
    return jnp.asarray(value & 0xFF, dtype=jnp.uint8)


def set_delay_timer(state: EmulatorState, value: int) -> EmulatorState:
    return state.replace(delay_timer=_u8(value))


def set_sound_timer(state: EmulatorState, value: int) -> EmulatorState:
    return state.replace(sound_timer=_u8(value))


def tick_timers(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Decrement both timers by one, never below zero.

    Returns the new state and whether the sound timer just reached zero
    (its value before the tick was exactly 1).
    """
    delay = int(state.delay_timer)
    sound = int(state.sound_timer)
    sound_event = sound == 1
    return state.replace(
        delay_timer=_u8(max(delay - 1, 0)),
        sound_timer=_u8(max(sound - 1, 0)),
    ), sound_event
