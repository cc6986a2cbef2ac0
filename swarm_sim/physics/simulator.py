"""Main simulator controller."""

import logging
import time
from typing import Callable, Optional

from swarm_sim.physics.diagnostics import log_summary
from swarm_sim.physics.world import World
from swarm_sim.presets.random_field import initialize
from swarm_sim.strategies.base import Strategy
from swarm_sim.strategies.sequential import SequentialStrategy
from swarm_sim.utils.config import SimulationConfig
from swarm_sim.utils.reproducibility import SeedLike

logger = logging.getLogger(__name__)


class Simulator:
    """Main simulation controller.

    Owns the world and the execution strategy and keeps tick bookkeeping. A
    host calls ``step(dt)`` once per frame and reads ``world`` in between.
    """

    def __init__(
        self,
        world: World,
        config: SimulationConfig,
        strategy: Optional[Strategy] = None,
        dt: float = 0.02,
    ):
        """Initialize simulator.

        Args:
            world: Initialized world (mutated in place by ``step``)
            config: Physical parameters used to build ``world``
            strategy: Execution strategy (default: sequential)
            dt: Time step used when ``step`` is called without one
        """
        self.world = world
        self.config = config
        self.strategy = strategy or SequentialStrategy()
        self.dt = dt

        self.time = 0.0
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._last_step_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.log_interval: int = 0

    @classmethod
    def from_config(
        cls,
        config: SimulationConfig,
        rng: SeedLike = None,
        strategy: Optional[Strategy] = None,
        dt: float = 0.02,
    ) -> "Simulator":
        """Build a world with the random-field initializer and wrap it."""
        world = initialize(config, rng)
        return cls(world, config, strategy=strategy, dt=dt)

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step wall time in ms (None until a profiled step ran)."""
        return {"step_ms": self._last_step_ms}

    def step(self, dt: Optional[float] = None):
        """Advance the world by one tick.

        Args:
            dt: Time step for this tick (default: ``self.dt``); must be >= 0

        Raises:
            ValueError: If dt is negative
        """
        if dt is None:
            dt = self.dt
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        if self._profile:
            t0 = time.perf_counter()
        self.strategy.step(self.world, dt, self.config)
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0
            logger.debug("step %d took %.3f ms (%s)", self.step_count + 1, self._last_step_ms, self.strategy.name)

        self.time += dt
        self.step_count += 1

        if self.log_interval and (self.step_count % self.log_interval == 0):
            log_summary(self.world, self.config, self.step_count)

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int, dt: Optional[float] = None):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
            dt: Time step for every tick (default: ``self.dt``)
        """
        for _ in range(n_steps):
            self.step(dt)

    def set_strategy(self, strategy: Strategy):
        """Swap execution strategy between ticks (the old one is closed)."""
        if strategy is not self.strategy:
            self.strategy.close()
        self.strategy = strategy
        logger.info("Switched to %s strategy", strategy.name)

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (ship_positions, ship_velocities, time, step_count); arrays are copies
        """
        positions, velocities = self.world.get_state()
        return positions, velocities, self.time, self.step_count

    def close(self):
        self.strategy.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
