"""CHIP-8 display surface."""

import jax.numpy as jnp
import numpy as np

from chipper.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH
from chipper.errors import DisplayFault
from chipper.state import EmulatorState


def raise_redraw(state: EmulatorState) -> EmulatorState:
    """Mark the display as changed since the last poll."""
    return state.replace(redraw=jnp.asarray(True))


def poll_redraw(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Return the redraw flag and reset it.

    Any number of raises between two polls collapse into a single True.
    """
    return state.replace(redraw=jnp.asarray(False)), bool(state.redraw)


def clear_display(state: EmulatorState) -> EmulatorState:
    """Turn every pixel off and raise the redraw flag."""
    return raise_redraw(state.replace(display=jnp.zeros_like(state.display)))


def sprite_pixels(x: int, y: int, rows: list[int]) -> tuple[list[int], list[int]]:
    """Coordinates of the set bits of an 8-pixel-wide sprite, MSB first."""
    xs, ys = [], []
    for j, row in enumerate(rows):
        for i in range(SPRITE_WIDTH):
            if row & (0x80 >> i):
                xs.append(x + i)
                ys.append(y + j)
    return xs, ys


def draw_sprite(state: EmulatorState, x: int, y: int, rows: list[int]) -> tuple[EmulatorState, bool]:
    """XOR a sprite onto the display at (x, y) without wrapping.

    Returns the new state and whether any lit pixel was turned off.
    Raises DisplayFault before touching the display if a set pixel falls
    outside the grid.
    """
    xs, ys = sprite_pixels(x, y, rows)
    for px, py in zip(xs, ys):
        if px >= SCREEN_WIDTH or py >= SCREEN_HEIGHT:
            raise DisplayFault(px, py)

    xs = jnp.array(xs, dtype=jnp.int32)
    ys = jnp.array(ys, dtype=jnp.int32)
    previous = state.display[xs, ys]
    collision = bool(jnp.any(previous))
    display = state.display.at[xs, ys].set(~previous)
    return raise_redraw(state.replace(display=display)), collision


def read_display(state: EmulatorState) -> np.ndarray:
    """Snapshot of the display as a (rows, columns) uint8 array."""
    return np.array(state.display, dtype=np.uint8).T
