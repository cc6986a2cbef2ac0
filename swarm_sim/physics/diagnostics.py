"""Diagnostics for a running world.

Energies use unit ship mass and the same distance floor as the force law.
They are monitoring aids, not conserved quantities: every bounce removes
three quarters of the kinetic energy in the reflected axis.
"""

import logging
from typing import Dict

import numpy as np

from swarm_sim.physics.engine import BOUNDED_AXES, MIN_DISTANCE
from swarm_sim.physics.world import World
from swarm_sim.utils.config import SimulationConfig

logger = logging.getLogger(__name__)


def kinetic_energy(world: World) -> float:
    """K = 0.5 * sum |v|^2 over ships."""
    v = world.ship_velocities
    return float(0.5 * np.sum(v * v))


def potential_energy(world: World, G: float) -> float:
    """U = -sum_i sum_j G * m_j / max(d_ij, MIN_DISTANCE)."""
    if world.ship_count == 0 or world.planet_count == 0:
        return 0.0
    # (n, 1, 3) - (1, m, 3) -> (n, m)
    r_diff = world.ship_positions[:, np.newaxis, :] - world.planet_positions[np.newaxis, :, :]
    distance = np.maximum(np.linalg.norm(r_diff, axis=2), MIN_DISTANCE)
    return float(-G * np.sum(world.planet_masses[np.newaxis, :] / distance))


def out_of_bounds_count(world: World, area_size: float) -> int:
    """Ships outside the area on any bounded axis (0 after every tick)."""
    p = world.ship_positions[:, list(BOUNDED_AXES)]
    return int(np.count_nonzero(np.any(np.abs(p) > area_size, axis=1)))


def summary(world: World, config: SimulationConfig) -> Dict[str, float]:
    """Kinetic/potential/total energy, speed spread and bound violations."""
    K = kinetic_energy(world)
    U = potential_energy(world, config.gravitational_constant)
    speeds = np.linalg.norm(world.ship_velocities, axis=1)
    return {
        "kinetic": K,
        "potential": U,
        "total": K + U,
        "mean_speed": float(np.mean(speeds)) if speeds.size else 0.0,
        "max_speed": float(np.max(speeds)) if speeds.size else 0.0,
        "out_of_bounds": out_of_bounds_count(world, config.area_size),
    }


def log_summary(world: World, config: SimulationConfig, step: int):
    """Log one diagnostics line at INFO."""
    s = summary(world, config)
    logger.info(
        "[Diag] step=%d K=%.4f U=%.4f E=%.4f v_mean=%.3f v_max=%.3f oob=%d",
        step, s["kinetic"], s["potential"], s["total"],
        s["mean_speed"], s["max_speed"], s["out_of_bounds"],
    )
    return s
