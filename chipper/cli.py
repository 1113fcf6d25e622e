"""Headless command line runner.

Usage::

    chipper rom=games/pong.ch8 cycles=5000 machine.verbose=true
"""

import hydra
from omegaconf import DictConfig
from tqdm import tqdm

from chipper.config import to_machine_config
from chipper.display import read_display, poll_redraw
from chipper.emulator import StepStatus, load_rom, step
from chipper.errors import ChipperError, MachineFault
from chipper.logging import configure_logging
from chipper.state import EmulatorState, create_state


def display_to_text(state: EmulatorState, on: str = "#", off: str = " ") -> str:
    """Render the display as one text line per pixel row."""
    return "\n".join("".join(on if pixel else off for pixel in row) for row in read_display(state))


def run(cfg: DictConfig) -> int:
    """Run ``cfg.cycles`` steps of ``cfg.rom`` and print the final screen.

    Returns a process exit status: 0 on success, 1 when loading fails or the
    program faults.
    """
    try:
        config = to_machine_config(cfg.machine)
    except ChipperError as e:
        configure_logging(False).error(str(e))
        return 1
    logger = configure_logging(config.verbose)

    state = create_state(config)
    try:
        state = load_rom(state, cfg.rom)
    except (OSError, ChipperError) as e:
        logger.error(f"Could not load {cfg.rom}: {e}")
        return 1

    exit_code = 0
    frames = 0
    blocked = 0
    for _ in tqdm(range(cfg.cycles), desc=f"Running {cfg.rom}", unit="step", disable=not config.verbose):
        try:
            state, result = step(state)
        except MachineFault:
            exit_code = 1
            break
        if result.status is StepStatus.BLOCKED:
            blocked += 1
        state, redraw = poll_redraw(state)
        frames += redraw

    logger.info(f"{frames} frames drawn, {blocked} steps waiting for a key")
    print(display_to_text(state))
    return exit_code


@hydra.main(version_base=None, config_path="conf", config_name="config")
def _main(cfg: DictConfig) -> None:
    exit_code = run(cfg)
    if exit_code:
        raise SystemExit(exit_code)


def main():
    _main()


if __name__ == "__main__":
    main()
