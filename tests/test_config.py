"""Tests for configuration loading and seeding helpers."""

import dataclasses

import numpy as np
import pytest

from swarm_sim.utils.config import Config, SimulationConfig, config_from_dict, load_config, save_config
from swarm_sim.utils.reproducibility import get_seed_info, make_rng


def test_defaults():
    """Defaults match the reference scene."""
    sim = SimulationConfig()
    assert sim.ship_count == 100
    assert sim.planet_count == 10
    assert sim.area_size == 50.0
    assert (sim.min_planet_radius, sim.max_planet_radius) == (1.0, 5.0)
    assert (sim.min_ship_speed, sim.max_ship_speed) == (1.0, 5.0)
    assert sim.gravitational_constant == 9.8

    config = Config()
    assert config.strategy == "sequential"
    assert config.dt == 0.02
    assert config.seed is None


def test_simulation_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SimulationConfig().ship_count = 5


@pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml"])
def test_save_and_load(tmp_path, suffix):
    """Config survives a trip through each file format."""
    config = Config(
        simulation=SimulationConfig(ship_count=7, area_size=12.5),
        strategy="batched",
        chunk_size=4,
        seed=11,
    )
    path = tmp_path / f"run{suffix}"
    save_config(config, str(path))
    assert load_config(str(path)) == config


def test_nested_dict():
    config = config_from_dict({"simulation": {"planet_count": 3}, "steps": 10})
    assert isinstance(config.simulation, SimulationConfig)
    assert config.simulation.planet_count == 3
    assert config.simulation.ship_count == 100
    assert config.steps == 10
    assert config_from_dict(None) == Config()


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "run.toml"
    path.write_text("steps = 1\n")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(str(path))
    with pytest.raises(ValueError):
        save_config(Config(), str(path))


def test_unknown_key():
    with pytest.raises(TypeError):
        config_from_dict({"galaxies": 2})


def test_make_rng():
    rng = np.random.default_rng(1)
    assert make_rng(rng) is rng
    assert make_rng(5).uniform() == np.random.default_rng(5).uniform()


def test_seed_info():
    assert get_seed_info() == {"deterministic": False}
    info = get_seed_info(42)
    assert info["deterministic"] and info["seed"] == 42
    assert info["bit_generator"] == "PCG64"


def test_malformed_yaml(tmp_path):
    """YAML syntax errors surface as ValueError."""
    path = tmp_path / "run.yaml"
    path.write_text("simulation: [ship_count: 3\n  bad: : :\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(str(path))


def test_non_mapping_file(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(str(path))


@pytest.mark.parametrize("data", [
    {"steps": "abc"},
    {"dt": "fast"},
    {"seed": 1.5},
    {"workers": True},
    {"strategy": 3},
    {"simulation": {"ship_count": "ten"}},
    {"simulation": {"area_size": None}},
    {"simulation": [1, 2]},
])
def test_wrong_value_types(data):
    """Wrongly typed values are rejected when the config is built."""
    with pytest.raises(ValueError, match="invalid value|must be a mapping"):
        config_from_dict(data)


def test_int_accepted_for_float_fields():
    config = config_from_dict({"dt": 1, "simulation": {"area_size": 20}})
    assert config.dt == 1
    assert config.simulation.area_size == 20
