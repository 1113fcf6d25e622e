"""CHIP-8 stack operations."""

from chipper.constants import WORD_MASK
from chipper.errors import StackOverflowFault, StackUnderflowFault
from chipper.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push address onto stack."""
    pointer = int(stack.pointer)
    if pointer >= stack.depth:
        raise StackOverflowFault(stack.depth)
    new_data = stack.data.at[pointer].set(address & WORD_MASK)
    return stack.replace(data=new_data, pointer=pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop address from stack."""
    pointer = int(stack.pointer)
    if pointer == 0:
        raise StackUnderflowFault()
    new_pointer = pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
