"""Abstract base class for execution strategies."""

from abc import ABC, abstractmethod
from typing import Sequence

from swarm_sim.physics.world import Planet, World
from swarm_sim.utils.config import SimulationConfig


class Strategy(ABC):
    """Abstract interface for advancing every ship by one tick.

    Implementations differ only in how the per-ship rule is scheduled. When
    ``step`` returns, every ship has been updated; no caller ever sees a world
    with part of a tick applied.
    """

    def __init__(self):
        self._planet_world = None
        self._planets: Sequence[Planet] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this strategy."""
        pass

    @abstractmethod
    def step(self, world: World, dt: float, config: SimulationConfig) -> None:
        """Advance all ships in ``world`` by ``dt``.

        Args:
            world: World to update in place (planets are read-only)
            dt: Time step
            config: Physical parameters (G, area size)
        """
        pass

    def close(self) -> None:
        """Release worker pools or device buffers (no-op by default)."""
        return None

    def _planets_for(self, world: World) -> Sequence[Planet]:
        """Planet records for ``world``, built once since planets never change."""
        if self._planet_world is not world:
            self._planets = world.planets
            self._planet_world = world
        return self._planets

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def chunk_bounds(n: int, chunk_size: int):
    """Split ``range(n)`` into contiguous ``(start, stop)`` pairs."""
    chunk_size = max(1, int(chunk_size))
    return [(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]
