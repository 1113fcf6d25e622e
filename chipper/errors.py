"""Exceptions raised by the Chipper virtual machine."""

from typing import Optional


class ChipperError(Exception):
    """Base class for all Chipper errors."""


class ConfigError(ChipperError, ValueError):
    """Invalid machine configuration."""


class ProgramTooLargeError(ChipperError):
    """Program does not fit in memory above the reserved region."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"Program size {size} bytes exceeds available space of {capacity} bytes")


class InvalidKeyError(ChipperError, ValueError):
    """Key index outside the 16-key keypad."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid key index {index}, expected 0-15")


class MachineFault(ChipperError):
    """Runtime fault raised by a malformed or adversarial program.

    Faults halt the interpreter: the state passed to ``step`` is left
    untouched and nothing after the faulting instruction runs.
    """

    def __init__(self, message: str, pc: Optional[int] = None):
        self.pc = pc
        if pc is not None:
            message = f"{message} (pc=0x{pc:03X})"
        super().__init__(message)


class MemoryFault(MachineFault):
    """Memory access outside the configured RAM."""

    def __init__(self, address: int, size: int, pc: Optional[int] = None):
        self.address = address
        self.size = size
        super().__init__(f"Memory access at 0x{address:X} outside RAM of {size} bytes", pc)


class StackOverflowFault(MachineFault):
    """Subroutine call with a full stack."""

    def __init__(self, depth: int, pc: Optional[int] = None):
        self.depth = depth
        super().__init__(f"Stack overflow, depth {depth} exhausted", pc)


class StackUnderflowFault(MachineFault):
    """Return with an empty stack."""

    def __init__(self, pc: Optional[int] = None):
        super().__init__("Stack underflow, return with empty stack", pc)


class DisplayFault(MachineFault):
    """Sprite pixel outside the display grid."""

    def __init__(self, x: int, y: int, pc: Optional[int] = None):
        self.x = x
        self.y = y
        super().__init__(f"Sprite pixel ({x}, {y}) outside display", pc)


class KeyFault(MachineFault):
    """Key skip instruction naming a key outside the keypad."""

    def __init__(self, index: int, pc: Optional[int] = None):
        self.index = index
        super().__init__(f"Key index {index} outside keypad", pc)
