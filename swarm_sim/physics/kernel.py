"""Batched ship update using only backend ops (no host transfer).

Array twin of ``engine.update_ship``. Planets are summed one at a time in
index order rather than reduced over a (ships, planets) matrix, so every
floating-point operation happens in the same order as the scalar rule and
float64 NumPy results match it bit for bit.
"""

from typing import Any, Tuple

from swarm_sim.backends.base import Backend
from swarm_sim.physics.engine import BOUNCE_FACTOR, BOUNDED_AXES, MIN_DISTANCE
from swarm_sim.physics.vector import NORMALIZE_EPSILON


def total_forces(positions: Any, planet_positions: Any, planet_masses: Any, G: float, backend: Backend) -> Any:
    """Net planet force on every ship.

    Args:
        positions: (n, 3) ship positions
        planet_positions: (m, 3) planet positions
        planet_masses: (m,) planet masses
        G: Gravitational constant
        backend: Compute backend

    Returns:
        (n, 3) forces (unit ship mass, so also accelerations)
    """
    forces = backend.zeros_like(positions)
    for j in range(planet_positions.shape[0]):
        # (3,) - (n, 3) -> (n, 3)
        to_planet = backend.subtract(planet_positions[j], positions)
        dx = to_planet[:, 0]
        dy = to_planet[:, 1]
        dz = to_planet[:, 2]
        distance = backend.sqrt(
            backend.add(
                backend.add(backend.multiply(dx, dx), backend.multiply(dy, dy)),
                backend.multiply(dz, dz),
            )
        )
        clamped = backend.maximum(distance, MIN_DISTANCE)
        magnitude = backend.divide(G * planet_masses[j], backend.multiply(clamped, clamped))

        # Direction from the unclamped separation; zero when ship sits on the planet
        has_direction = distance > NORMALIZE_EPSILON
        safe_distance = backend.where(has_direction, distance, 1.0)
        direction = backend.divide(to_planet, backend.expand_dims(safe_distance, 1))
        direction = backend.where(backend.expand_dims(has_direction, 1), direction, 0.0)

        forces = backend.add(forces, backend.multiply(direction, backend.expand_dims(magnitude, 1)))
    return forces


def reflect_all(positions: Any, velocities: Any, area_size: float, backend: Backend) -> Tuple[Any, Any]:
    """Per-axis lossy bounce and clamp for every ship at once."""
    pos_columns = [positions[:, k] for k in range(3)]
    vel_columns = [velocities[:, k] for k in range(3)]
    for axis in BOUNDED_AXES:
        p = pos_columns[axis]
        outside = (p < -area_size) | (p > area_size)
        vel_columns[axis] = backend.where(
            outside,
            backend.multiply(vel_columns[axis], BOUNCE_FACTOR),
            vel_columns[axis],
        )
        # clip leaves in-range values untouched
        pos_columns[axis] = backend.clip(p, -area_size, area_size)
    return backend.stack(pos_columns, axis=1), backend.stack(vel_columns, axis=1)


def update_ships(
    positions: Any,
    velocities: Any,
    planet_positions: Any,
    planet_masses: Any,
    dt: float,
    G: float,
    area_size: float,
    backend: Backend,
) -> Tuple[Any, Any]:
    """Advance a batch of ships by one tick.

    Pure: inputs are not modified, new (positions, velocities) are returned.
    """
    forces = total_forces(positions, planet_positions, planet_masses, G, backend)
    velocities = backend.add(velocities, backend.multiply(forces, dt))
    positions = backend.add(positions, backend.multiply(velocities, dt))
    return reflect_all(positions, velocities, area_size, backend)
