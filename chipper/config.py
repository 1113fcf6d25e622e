"""Machine configuration."""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from chipper.constants import DEFAULT_MEMORY_SIZE, DEFAULT_STACK_SIZE, MAX_MEMORY_SIZE, RESERVED_SIZE
from chipper.errors import ConfigError


@dataclass
class MachineConfig:
    """Construction-time options of the virtual machine.

    Attributes:
        ram_size: Memory capacity in bytes, reserved region included
        stack_size: Maximum number of nested subroutine calls
        verbose: Emit debug diagnostics to the console
    """
    ram_size: int = DEFAULT_MEMORY_SIZE
    stack_size: int = DEFAULT_STACK_SIZE
    verbose: bool = False


def validate_config(config: MachineConfig) -> MachineConfig:
    """Check option ranges, raising ConfigError on the first violation."""
    if config.ram_size <= RESERVED_SIZE:
        raise ConfigError(f"ram_size must be larger than the reserved 0x{RESERVED_SIZE:X} bytes, got {config.ram_size}")
    if config.ram_size > MAX_MEMORY_SIZE:
        raise ConfigError(f"ram_size must be at most {MAX_MEMORY_SIZE} bytes, got {config.ram_size}")
    if config.stack_size < 1:
        raise ConfigError(f"stack_size must be at least 1, got {config.stack_size}")
    return config


def to_machine_config(cfg: Union[DictConfig, dict]) -> MachineConfig:
    """Build a validated MachineConfig from an OmegaConf node or plain mapping."""
    try:
        merged = OmegaConf.merge(OmegaConf.structured(MachineConfig), cfg)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigError(str(e)) from e
    return validate_config(config)


def load_config(overrides: Optional[Iterable[str]] = None) -> MachineConfig:
    """Load defaults merged with dot-list overrides such as ``ram_size=8192``."""
    try:
        cfg = OmegaConf.from_dotlist(list(overrides or []))
    except OmegaConfBaseException as e:
        raise ConfigError(str(e)) from e
    return to_machine_config(cfg)
