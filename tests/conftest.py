"""Shared fixtures."""

import numpy as np
import pytest

from swarm_sim.physics.world import World
from swarm_sim.presets.random_field import initialize
from swarm_sim.utils.config import SimulationConfig


@pytest.fixture
def small_config():
    """A few dozen ships around a handful of planets."""
    return SimulationConfig(ship_count=40, planet_count=4, area_size=50.0)


@pytest.fixture
def seeded_world(small_config):
    return initialize(small_config, 1234)


@pytest.fixture
def empty_space():
    """Config with no planets (ships fly straight until a wall)."""
    return SimulationConfig(ship_count=1, planet_count=0, area_size=50.0)


@pytest.fixture
def single_ship_world():
    """Factory: world with one ship and optional (position, mass) planets."""
    def make(position, velocity, planets=()):
        planet_positions = [p for p, _ in planets]
        planet_masses = [m for _, m in planets]
        return World(
            np.array([position], dtype=float),
            np.array([velocity], dtype=float),
            np.array(planet_positions, dtype=float).reshape(-1, 3),
            np.array(planet_masses, dtype=float),
        )
    return make
