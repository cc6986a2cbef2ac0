"""Tests for the random-field initializer and World state."""

import numpy as np
import pytest

from swarm_sim.physics.vector import Vector3
from swarm_sim.physics.world import Planet, Ship, World
from swarm_sim.presets import RandomField, initialize
from swarm_sim.utils.config import SimulationConfig


def test_counts_and_bounds():
    """Generated world matches the configured counts and ranges."""
    config = SimulationConfig(ship_count=300, planet_count=12, area_size=20.0,
                              min_planet_radius=1.0, max_planet_radius=3.0,
                              min_ship_speed=2.0, max_ship_speed=4.0)
    world = initialize(config, 42)

    assert world.ship_count == 300
    assert world.planet_count == 12
    assert np.all(np.abs(world.ship_positions[:, :2]) <= 20.0)
    assert np.all(np.abs(world.planet_positions[:, :2]) <= 20.0)
    assert np.all(world.ship_positions[:, 2] == 0.0)
    assert np.all(world.ship_velocities[:, 2] == 0.0)

    assert np.all((world.planet_radii >= 1.0) & (world.planet_radii <= 3.0))
    assert np.allclose(world.planet_masses, world.planet_radii ** 2)

    speeds = np.linalg.norm(world.ship_velocities, axis=1)
    assert np.all((speeds >= 2.0 - 1e-9) & (speeds <= 4.0 + 1e-9))


def test_seed_reproducible():
    """Same config and seed give identical worlds."""
    config = SimulationConfig(ship_count=50, planet_count=5)
    a = initialize(config, 99)
    b = initialize(config, 99)
    assert np.array_equal(a.ship_positions, b.ship_positions)
    assert np.array_equal(a.ship_velocities, b.ship_velocities)
    assert np.array_equal(a.planet_positions, b.planet_positions)
    assert np.array_equal(a.planet_masses, b.planet_masses)

    c = initialize(config, 100)
    assert not np.array_equal(a.ship_positions, c.ship_positions)


def test_generator_is_consumed():
    """Passing one Generator twice yields two different worlds."""
    config = SimulationConfig(ship_count=10, planet_count=2)
    rng = np.random.default_rng(5)
    first = initialize(config, rng)
    second = initialize(config, rng)
    assert not np.array_equal(first.ship_positions, second.ship_positions)


def test_draw_order():
    """Planets are drawn before ships, each field in a fixed order."""
    config = SimulationConfig(ship_count=1, planet_count=1, area_size=10.0,
                              min_planet_radius=1.0, max_planet_radius=2.0,
                              min_ship_speed=1.0, max_ship_speed=3.0)
    world = initialize(config, 3)

    rng = np.random.default_rng(3)
    px, py = rng.uniform(-10, 10), rng.uniform(-10, 10)
    radius = rng.uniform(1.0, 2.0)
    sx, sy = rng.uniform(-10, 10), rng.uniform(-10, 10)
    direction = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0).normalized()
    speed = rng.uniform(1.0, 3.0)

    assert world.planet(0) == Planet(Vector3(px, py, 0.0), radius * radius, radius)
    assert world.ship(0).position == Vector3(sx, sy, 0.0)
    assert np.allclose(world.ship_velocities[0], (direction * speed).to_tuple())


def test_empty_world():
    """Zero ships and zero planets is a valid (idle) world."""
    world = initialize(SimulationConfig(ship_count=0, planet_count=0), 1)
    assert world.ship_count == 0
    assert world.planet_count == 0
    assert world.ships == []
    assert world.planets == ()


def test_preset_name():
    assert RandomField(SimulationConfig(), 0).name == "random_field"


def test_world_records_round_trip():
    """Record views and from_records agree with the arrays."""
    ships = [Ship(Vector3(1, 2, 0), Vector3(0, 1, 0)), Ship(Vector3(-3, 4, 0), Vector3(2, 0, 0))]
    planets = [Planet(Vector3(5, 5, 0), 4.0, 2.0)]
    world = World.from_records(ships, planets)

    assert world.ships == ships
    assert world.planets == tuple(planets)

    world.set_ship(1, Vector3(7, 7, 0), Vector3(-1, -1, 0))
    assert world.ship(1) == Ship(Vector3(7, 7, 0), Vector3(-1, -1, 0))
    assert world.ship(0) == ships[0]


def test_world_copy_is_independent(seeded_world):
    """Mutating a copy leaves the original untouched."""
    clone = seeded_world.copy()
    clone.ship_positions[0] = (0.0, 0.0, 0.0)
    assert not np.array_equal(clone.ship_positions, seeded_world.ship_positions)
    assert not clone.planet_positions.flags.writeable


def test_world_rejects_bad_shapes():
    with pytest.raises(ValueError):
        World(np.zeros((2, 3)), np.zeros((3, 3)), np.zeros((0, 3)), np.zeros(0))
