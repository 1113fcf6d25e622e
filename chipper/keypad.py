"""CHIP-8 hexadecimal keypad latch."""

from chipper.constants import NUM_KEYS
from chipper.errors import InvalidKeyError
from chipper.state import EmulatorState


def _check_key(index: int) -> int:
    if not 0 <= index < NUM_KEYS:
        raise InvalidKeyError(index)
    return index


def set_key(state: EmulatorState, index: int, pressed: bool) -> EmulatorState:
    """Latch key ``index`` as pressed or released."""
    return state.replace(keypad=state.keypad.at[_check_key(index)].set(bool(pressed)))


def is_pressed(state: EmulatorState, index: int) -> bool:
    return bool(state.keypad[_check_key(index)])


def pressed_keys(state: EmulatorState) -> list[int]:
    """Indices of currently pressed keys, ascending."""
    return [i for i in range(NUM_KEYS) if state.keypad[i]]
