"""Tests for machine configuration."""

import pytest
from omegaconf import OmegaConf
from chipper import load_config, create_state, MachineConfig, ConfigError
from chipper.config import to_machine_config


def test_defaults():
    config = load_config()
    assert config == MachineConfig(ram_size=4096, stack_size=16, verbose=False)


def test_overrides():
    config = load_config(["ram_size=8192", "stack_size=4", "verbose=true"])
    assert config.ram_size == 8192
    assert config.stack_size == 4
    assert config.verbose is True


def test_from_omegaconf_node():
    node = OmegaConf.create({"ram_size": 1024, "stack_size": 8, "verbose": False})
    assert to_machine_config(node) == MachineConfig(ram_size=1024, stack_size=8)


@pytest.mark.parametrize("overrides", [
    ["ram_size=512"],
    ["ram_size=100"],
    ["ram_size=65537"],
    ["stack_size=0"],
    ["stack_size=-3"],
])
def test_out_of_range(overrides):
    with pytest.raises(ConfigError):
        load_config(overrides)


def test_unknown_option():
    with pytest.raises(ConfigError):
        load_config(["clock_hz=500"])


def test_wrong_type():
    with pytest.raises(ConfigError):
        load_config(["ram_size=lots"])


def test_create_state_validates():
    with pytest.raises(ConfigError):
        create_state(MachineConfig(stack_size=0))
