"""Three-component float vector used by the scalar simulation path."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

# Magnitudes at or below this normalize to the zero vector
NORMALIZE_EPSILON = 1e-5


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector.

    The simulation is planar, so z stays 0 for every ship and planet, but the
    third component is kept so positions can be handed to a 3D host as-is.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    @property
    def sqr_magnitude(self) -> float:
        """Squared length (avoids sqrt for comparisons)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def magnitude(self) -> float:
        """Vector length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return the unit vector in the same direction.

        Vectors shorter than ``NORMALIZE_EPSILON`` have no usable direction and
        normalize to zero instead of dividing by (almost) nothing.
        """
        mag = self.magnitude
        if mag > NORMALIZE_EPSILON:
            return self / mag
        return Vector3.zero()

    def with_axis(self, axis: int, value: float) -> Vector3:
        """Copy of this vector with one component replaced."""
        components = [self.x, self.y, self.z]
        components[axis] = value
        return Vector3(*components)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def from_tuple(cls, t: Iterable[float]) -> Vector3:
        x, y, z = t
        return cls(float(x), float(y), float(z))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"Vector3({self.x:.6g}, {self.y:.6g}, {self.z:.6g})"
