"""Authoritative simulation state: ships and planets.

Storage is struct-of-arrays (one NumPy array per field) so the batched
strategy can hand whole columns to a compute backend, while ``Ship`` and
``Planet`` records give the scalar path and the host a per-index view.
Indices are stable for the whole run: nothing is inserted, removed or
reordered after construction.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from swarm_sim.physics.vector import Vector3


@dataclass(frozen=True)
class Planet:
    """Fixed gravitating body. Mass is the square of the radius."""
    position: Vector3
    mass: float
    radius: float = 0.0


@dataclass(frozen=True)
class Ship:
    """Massless test particle (snapshot of one row of the world)."""
    position: Vector3
    velocity: Vector3


def _as_vectors(array, n: int, label: str) -> np.ndarray:
    out = np.array(array, dtype=np.float64).reshape(-1, 3) if n else np.zeros((0, 3))
    if out.shape != (n, 3):
        raise ValueError(f"{label} must have shape ({n}, 3), got {out.shape}")
    return out


class World:
    """Ships and planets for one run.

    Planet arrays are made read-only; ship arrays are mutated in place by the
    execution strategies once per tick.
    """

    def __init__(
        self,
        ship_positions,
        ship_velocities,
        planet_positions,
        planet_masses,
        planet_radii=None,
    ):
        """Initialize world.

        Args:
            ship_positions: (n, 3) positions
            ship_velocities: (n, 3) velocities
            planet_positions: (m, 3) positions
            planet_masses: (m,) masses
            planet_radii: Optional (m,) radii (defaults to sqrt(mass))
        """
        n = len(ship_positions)
        m = len(planet_masses)
        self.ship_positions = _as_vectors(ship_positions, n, "ship_positions")
        self.ship_velocities = _as_vectors(ship_velocities, n, "ship_velocities")
        self.planet_positions = _as_vectors(planet_positions, m, "planet_positions")
        self.planet_masses = np.array(planet_masses, dtype=np.float64).reshape(m)
        if planet_radii is None:
            planet_radii = np.sqrt(self.planet_masses)
        self.planet_radii = np.array(planet_radii, dtype=np.float64).reshape(m)

        for arr in (self.planet_positions, self.planet_masses, self.planet_radii):
            arr.flags.writeable = False

    @classmethod
    def from_records(cls, ships: Sequence[Ship], planets: Sequence[Planet]) -> "World":
        """Build a world from record lists (index order is preserved)."""
        return cls(
            [s.position.to_tuple() for s in ships],
            [s.velocity.to_tuple() for s in ships],
            [p.position.to_tuple() for p in planets],
            [p.mass for p in planets],
            [p.radius for p in planets],
        )

    @property
    def ship_count(self) -> int:
        return self.ship_positions.shape[0]

    @property
    def planet_count(self) -> int:
        return self.planet_masses.shape[0]

    def ship(self, index: int) -> Ship:
        return Ship(
            Vector3.from_tuple(self.ship_positions[index]),
            Vector3.from_tuple(self.ship_velocities[index]),
        )

    def planet(self, index: int) -> Planet:
        return Planet(
            Vector3.from_tuple(self.planet_positions[index]),
            float(self.planet_masses[index]),
            float(self.planet_radii[index]),
        )

    @property
    def ships(self) -> List[Ship]:
        return [self.ship(i) for i in range(self.ship_count)]

    @property
    def planets(self) -> Tuple[Planet, ...]:
        return tuple(self.planet(i) for i in range(self.planet_count))

    def set_ship(self, index: int, position: Vector3, velocity: Vector3):
        """Overwrite one ship's state."""
        self.ship_positions[index] = position.to_tuple()
        self.ship_velocities[index] = velocity.to_tuple()

    def copy(self) -> "World":
        """Independent deep copy (planet arrays stay read-only)."""
        return World(
            self.ship_positions.copy(),
            self.ship_velocities.copy(),
            self.planet_positions.copy(),
            self.planet_masses.copy(),
            self.planet_radii.copy(),
        )

    def get_state(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copies of (ship_positions, ship_velocities) for a host to read."""
        return self.ship_positions.copy(), self.ship_velocities.copy()

    def __repr__(self) -> str:
        return f"World(ships={self.ship_count}, planets={self.planet_count})"
