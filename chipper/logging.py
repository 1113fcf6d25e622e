"""Console logging for Chipper.

The package logger is shared by the interpreter, the loader and the command
line runner. Its verbosity follows ``MachineConfig.verbose``.
"""

import sys
from typing import Optional

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConsoleLogger:
    """Prints ``[LEVEL][name] message`` lines at or above a minimum level."""

    def __init__(self, name: str = "Chipper", log_level: str = "WARNING", stream=None):
        self.name = name
        self.stream = stream
        self.set_level(log_level)

    def set_level(self, log_level: str):
        level = log_level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{log_level}'. Available: {list(LEVELS)}")
        self.log_level = level

    def log(self, level: str, message: str):
        if LEVELS.index(level) >= LEVELS.index(self.log_level):
            print(f"[{level}][{self.name}] {message}", file=self.stream or sys.stderr, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


_logger: Optional[ConsoleLogger] = None


def get_logger() -> ConsoleLogger:
    """Return the shared package logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = ConsoleLogger()
    return _logger


def configure_logging(verbose: bool) -> ConsoleLogger:
    """Print debug diagnostics when verbose, otherwise warnings and above."""
    logger = get_logger()
    logger.set_level("DEBUG" if verbose else "WARNING")
    return logger
