"""Base class for initial-condition presets."""

from abc import ABC, abstractmethod

from swarm_sim.physics.world import World
from swarm_sim.utils.config import SimulationConfig
from swarm_sim.utils.reproducibility import SeedLike, make_rng


class Preset(ABC):
    """Abstract base class for world generators."""

    def __init__(self, config: SimulationConfig, rng: SeedLike = None):
        """Initialize preset.

        Args:
            config: Counts and ranges to draw from
            rng: numpy Generator, integer seed, or None for OS entropy
        """
        self.config = config
        self.rng = make_rng(rng)

    @abstractmethod
    def generate(self) -> World:
        """Generate the initial world (consumes ``self.rng``)."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
