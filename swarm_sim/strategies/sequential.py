"""Sequential strategy: every ship on the calling thread, in index order."""

from swarm_sim.physics import engine
from swarm_sim.physics.world import World
from swarm_sim.strategies.base import Strategy
from swarm_sim.utils.config import SimulationConfig


class SequentialStrategy(Strategy):
    """Baseline for correctness and for timing the ships x planets loop.

    Needs nothing beyond the interpreter, so it is always available as the
    fallback when no concurrent substrate is.
    """

    @property
    def name(self) -> str:
        return "sequential"

    def step(self, world: World, dt: float, config: SimulationConfig) -> None:
        engine.step(world, dt, config, planets=self._planets_for(world))
