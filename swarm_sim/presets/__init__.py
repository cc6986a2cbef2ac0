"""Initial-condition generators."""

from swarm_sim.presets.base import Preset
from swarm_sim.presets.random_field import RandomField, initialize

__all__ = ["Preset", "RandomField", "initialize"]
