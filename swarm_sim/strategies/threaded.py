"""Threaded strategy: disjoint ship chunks evaluated on a thread pool."""

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from swarm_sim.physics.engine import update_range
from swarm_sim.physics.world import World
from swarm_sim.strategies.base import Strategy, chunk_bounds
from swarm_sim.utils.config import SimulationConfig

logger = logging.getLogger(__name__)


class ThreadedStrategy(Strategy):
    """Fan the scalar rule out over worker threads, one chunk of ships each.

    Workers only read the world during the tick and return their results;
    the results are written back after every future has completed, so the
    world moves from one whole tick to the next. Because each ship runs the
    exact scalar rule, trajectories equal the sequential strategy's.
    """

    def __init__(self, workers: Optional[int] = None, chunk_size: Optional[int] = None):
        """Initialize threaded strategy.

        Args:
            workers: Pool size (default: CPU count)
            chunk_size: Ships per task (default: ship count split evenly over workers)
        """
        super().__init__()
        self.workers = workers or os.cpu_count() or 1
        self.chunk_size = chunk_size
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def name(self) -> str:
        return "threaded"

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="swarm-sim"
            )
            logger.debug("Started thread pool with %d workers", self.workers)
        return self._executor

    def step(self, world: World, dt: float, config: SimulationConfig) -> None:
        n = world.ship_count
        if n == 0:
            return
        planets = self._planets_for(world)
        chunk = self.chunk_size or math.ceil(n / self.workers)
        bounds = chunk_bounds(n, chunk)

        executor = self._get_executor()
        futures = [
            executor.submit(update_range, world, planets, start, stop, dt, config)
            for start, stop in bounds
        ]
        # Barrier: nothing is written until every chunk has finished
        results = [future.result() for future in futures]

        for (start, _), chunk_results in zip(bounds, results):
            for offset, (position, velocity) in enumerate(chunk_results):
                world.set_ship(start + offset, position, velocity)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __repr__(self) -> str:
        return f"ThreadedStrategy(workers={self.workers}, chunk_size={self.chunk_size})"
