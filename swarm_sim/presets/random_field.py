"""Uniformly scattered planets and ships inside the simulation area."""

import logging

import numpy as np

from swarm_sim.physics.vector import Vector3
from swarm_sim.physics.world import World
from swarm_sim.presets.base import Preset
from swarm_sim.utils.config import SimulationConfig
from swarm_sim.utils.reproducibility import SeedLike

logger = logging.getLogger(__name__)


class RandomField(Preset):
    """Random planets, then random ships, all within ``[-area, area]^2``.

    Draw order is fixed (it is what makes a seed reproducible):

    - per planet: x, y, radius; ``mass = radius**2``
    - per ship: x, y, direction x, direction y (each in [-1, 1]), speed;
      velocity is the normalized direction scaled by speed

    Degenerate ranges (min above max) are the caller's responsibility and are
    not checked.
    """

    @property
    def name(self) -> str:
        return "random_field"

    def generate(self) -> World:
        config = self.config
        rng = self.rng
        area = config.area_size

        planet_positions = np.zeros((config.planet_count, 3))
        planet_radii = np.zeros(config.planet_count)
        for i in range(config.planet_count):
            planet_positions[i, 0] = rng.uniform(-area, area)
            planet_positions[i, 1] = rng.uniform(-area, area)
            planet_radii[i] = rng.uniform(config.min_planet_radius, config.max_planet_radius)
        planet_masses = planet_radii * planet_radii

        ship_positions = np.zeros((config.ship_count, 3))
        ship_velocities = np.zeros((config.ship_count, 3))
        for i in range(config.ship_count):
            ship_positions[i, 0] = rng.uniform(-area, area)
            ship_positions[i, 1] = rng.uniform(-area, area)
            direction = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), 0.0)
            speed = rng.uniform(config.min_ship_speed, config.max_ship_speed)
            ship_velocities[i] = (direction.normalized() * speed).to_tuple()

        world = World(ship_positions, ship_velocities, planet_positions, planet_masses, planet_radii)
        logger.info("Generated %r in area +/-%g", world, area)
        return world


def initialize(config: SimulationConfig, rng: SeedLike = None) -> World:
    """Build the initial world for ``config``.

    Args:
        config: Simulation parameters
        rng: numpy Generator (consumed), integer seed, or None

    Returns:
        New World with ``config.planet_count`` planets and ``config.ship_count`` ships
    """
    return RandomField(config, rng).generate()
