"""Main CHIP-8 emulator execution engine."""

from enum import Enum
from typing import Callable, Optional

from chex import dataclass

from chipper.state import EmulatorState
from chipper.decode import DecodedInstruction, Op, decode
from chipper.constants import PROGRAM_START, RESERVED_SIZE
from chipper.errors import MachineFault, ProgramTooLargeError
from chipper.logging import get_logger
from chipper.ram import read_bytes, write_bytes
from chipper.registers import get_pc
from chipper.timers import tick_timers
from chipper.instructions.system import execute_clear_screen, execute_return, no_op
from chipper.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key, execute_skip_if_not_key
)
from chipper.instructions.alu import execute_alu_operation
from chipper.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chipper.instructions.display import execute_display
from chipper.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers,
    is_waiting_for_key
)

Executor = Callable[[EmulatorState, DecodedInstruction], EmulatorState]

EXECUTORS: dict[Op, Executor] = {
    Op.CLS: execute_clear_screen,
    Op.RET: execute_return,
    Op.JP: execute_jump,
    Op.CALL: execute_call,
    Op.SE_IMM: execute_skip_if_equal_immediate,
    Op.SNE_IMM: execute_skip_if_not_equal_immediate,
    Op.SE_REG: execute_skip_if_equal_register,
    Op.LD_IMM: execute_set,
    Op.ADD_IMM: execute_add,
    Op.LD_REG: execute_alu_operation,
    Op.OR: execute_alu_operation,
    Op.AND: execute_alu_operation,
    Op.XOR: execute_alu_operation,
    Op.ADD_REG: execute_alu_operation,
    Op.SUB: execute_alu_operation,
    Op.SHR: execute_alu_operation,
    Op.SUBN: execute_alu_operation,
    Op.SHL: execute_alu_operation,
    Op.SNE_REG: execute_skip_if_not_equal_register,
    Op.LD_I: execute_set_index,
    Op.JP_V0: execute_jump_with_offset,
    Op.RND: execute_random,
    Op.DRW: execute_display,
    Op.SKP: execute_skip_if_key,
    Op.SKNP: execute_skip_if_not_key,
    Op.LD_VX_DT: execute_get_delay_timer,
    Op.LD_KEY: execute_wait_for_key,
    Op.LD_DT: execute_set_delay_timer,
    Op.LD_ST: execute_set_sound_timer,
    Op.ADD_I: execute_add_to_index,
    Op.LD_FONT: execute_font_character,
    Op.BCD: execute_bcd_conversion,
    Op.STORE: execute_store_registers,
    Op.LOAD: execute_load_registers,
    Op.UNKNOWN: no_op,
}

_missing = set(Op) - set(EXECUTORS)
if _missing:
    raise RuntimeError(f"No executor for {sorted(op.name for op in _missing)}")


class StepStatus(Enum):
    """Outcome of a single interpreter step."""
    ADVANCED = "advanced"
    BLOCKED = "blocked"
    UNKNOWN_OPCODE = "unknown_opcode"


@dataclass(frozen=True)
class StepResult:
    """Observable facts of one fetch-decode-execute-tick cycle.

    Attributes:
        status: Whether the instruction made progress
        instruction: The decoded instruction
        sound: The sound timer went from 1 to 0 on this step
        diagnostic: Message describing an unknown opcode, else None
    """
    status: StepStatus
    instruction: DecodedInstruction
    sound: bool = False
    diagnostic: Optional[str] = None


def fetch(state: EmulatorState) -> int:
    """Fetch the big-endian instruction word at PC."""
    high, low = read_bytes(state, get_pc(state), 2)
    return (high << 8) | low


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)
    return EXECUTORS[decoded_instruction.op](state, decoded_instruction)


def step(state: EmulatorState, tick_timers_after: bool = True) -> tuple[EmulatorState, StepResult]:
    """Run one fetch-decode-execute-tick cycle.

    Args:
        state: Current emulator state
        tick_timers_after: Tick both timers after the instruction. Hosts
            running timers at their own rate pass False and call
            ``tick_timers`` themselves.

    Returns:
        Tuple of the new state and the StepResult of this cycle.

    Raises:
        MachineFault: The instruction accessed memory, stack or display out
            of range. ``state`` is left as it was before the step.
    """
    logger = get_logger()
    pc = get_pc(state)

    try:
        decoded_instruction = decode(fetch(state))
        status = StepStatus.ADVANCED
        diagnostic = None

        if decoded_instruction.op is Op.UNKNOWN:
            status = StepStatus.UNKNOWN_OPCODE
            diagnostic = f"Invalid opcode {decoded_instruction.raw:04X} at 0x{pc:03X}"
            logger.warning(diagnostic)
        elif decoded_instruction.op is Op.LD_KEY and is_waiting_for_key(state):
            status = StepStatus.BLOCKED
            logger.debug(f"Waiting for key at 0x{pc:03X}")

        state = EXECUTORS[decoded_instruction.op](state, decoded_instruction)
    except MachineFault as fault:
        if fault.pc is None:
            fault.pc = pc
        logger.error(f"{type(fault).__name__} at 0x{pc:03X}: {fault}")
        raise

    sound = False
    if tick_timers_after:
        state, sound = tick_timers(state)
        if sound:
            logger.debug(f"Sound timer expired at 0x{pc:03X}")

    return state, StepResult(
        status=status,
        instruction=decoded_instruction,
        sound=sound,
        diagnostic=diagnostic,
    )


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Load program bytes into CHIP-8 memory starting at 0x200."""
    capacity = state.memory_size - RESERVED_SIZE
    if len(program) > capacity:
        raise ProgramTooLargeError(len(program), capacity)
    state = write_bytes(state, PROGRAM_START, list(program))
    get_logger().info(f"Loaded {len(program)} bytes at 0x{PROGRAM_START:03X}")
    return state


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)
