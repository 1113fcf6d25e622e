"""CHIP-8 virtual machine package."""

from chipper.config import MachineConfig, load_config
from chipper.state import EmulatorState, StackState, create_state
from chipper.emulator import StepResult, StepStatus, execute, fetch, step, load_program, load_rom
from chipper.decode import DecodedInstruction, Op, decode
from chipper.display import poll_redraw, read_display
from chipper.keypad import set_key
from chipper.timers import tick_timers
from chipper.errors import (
    ChipperError, ConfigError, ProgramTooLargeError, InvalidKeyError, MachineFault,
    MemoryFault, StackOverflowFault, StackUnderflowFault, DisplayFault, KeyFault
)
from chipper.constants import PROGRAM_START, FONT_START, FONT_DATA, SCREEN_WIDTH, SCREEN_HEIGHT

__all__ = [
    "MachineConfig",
    "load_config",
    "EmulatorState",
    "StackState",
    "create_state",
    "StepResult",
    "StepStatus",
    "fetch",
    "execute",
    "step",
    "load_program",
    "load_rom",
    "DecodedInstruction",
    "Op",
    "decode",
    "poll_redraw",
    "read_display",
    "set_key",
    "tick_timers",
    "ChipperError",
    "ConfigError",
    "ProgramTooLargeError",
    "InvalidKeyError",
    "MachineFault",
    "MemoryFault",
    "StackOverflowFault",
    "StackUnderflowFault",
    "DisplayFault",
    "KeyFault",
    "PROGRAM_START",
    "FONT_START",
    "FONT_DATA",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
