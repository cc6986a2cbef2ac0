"""Batched strategy: vectorized ship chunks on a compute backend.

This is the accelerator path. Ships are treated as a struct-of-arrays batch,
one row per ship, and advanced by ``physics.kernel.update_ships`` on the
chosen backend. On a GPU backend a single batch plays the role of one
compute dispatch with a thread per ship.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from swarm_sim.backends.base import Backend
from swarm_sim.backends.factory import get_backend
from swarm_sim.backends.numpy_backend import NumPyBackend
from swarm_sim.physics.kernel import update_ships
from swarm_sim.physics.world import World
from swarm_sim.strategies.base import Strategy, chunk_bounds
from swarm_sim.utils.config import SimulationConfig

logger = logging.getLogger(__name__)


class BatchedStrategy(Strategy):
    """Evaluate ships in independent batches and gather them at tick end.

    With ``workers > 1`` on a CPU backend the batches run concurrently on a
    thread pool (NumPy releases the GIL inside its kernels). Device backends
    run batches back to back on their own stream. Either way the world is
    written only after every batch is done.
    """

    def __init__(
        self,
        backend: Union[Backend, str, None] = "numpy",
        chunk_size: Optional[int] = None,
        workers: Optional[int] = None,
        fallback: bool = True,
        **backend_kwargs,
    ):
        """Initialize batched strategy.

        Args:
            backend: Backend instance or name ('numpy', 'jax', 'pytorch', 'cupy');
                None auto-selects, preferring a GPU
            chunk_size: Ships per batch (default: whole population in one batch)
            workers: Threads used for CPU batches (default: 1, or CPU count
                when chunk_size is given)
            fallback: Use NumPy if the requested backend cannot be created
            **backend_kwargs: Passed to ``get_backend``
        """
        super().__init__()
        self.backend = self._resolve_backend(backend, fallback, backend_kwargs)
        self.chunk_size = chunk_size
        if workers is None:
            workers = (os.cpu_count() or 1) if chunk_size else 1
        self.workers = workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._planet_arrays = None
        logger.info("Batched strategy on %s (%s)", self.backend.name, self.backend.device)

    @staticmethod
    def _resolve_backend(backend, fallback: bool, backend_kwargs) -> Backend:
        if isinstance(backend, Backend):
            return backend
        try:
            return get_backend(backend, **backend_kwargs)
        except (ValueError, ImportError, RuntimeError) as exc:
            if not fallback:
                raise
            logger.warning("Backend %r unavailable (%s); falling back to numpy", backend, exc)
            return NumPyBackend()

    @property
    def name(self) -> str:
        return "batched"

    def _planet_arrays_for(self, world: World):
        """Upload planet data once per world; it is read-only for the whole run."""
        if self._planet_world is not world or self._planet_arrays is None:
            self._planet_arrays = (
                self.backend.array(world.planet_positions),
                self.backend.array(world.planet_masses),
            )
            self._planet_world = world
        return self._planet_arrays

    def _run_batches(self, batches):
        use_pool = self.workers > 1 and len(batches) > 1 and not self.backend.is_accelerator
        if not use_pool:
            return [batch() for batch in batches]
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="swarm-sim-batch"
            )
        futures = [self._executor.submit(batch) for batch in batches]
        return [future.result() for future in futures]

    def step(self, world: World, dt: float, config: SimulationConfig) -> None:
        n = world.ship_count
        if n == 0:
            return
        backend = self.backend
        planet_positions, planet_masses = self._planet_arrays_for(world)
        # On host backends these alias the world arrays; the kernel only reads them
        positions = backend.array(world.ship_positions)
        velocities = backend.array(world.ship_velocities)
        G = config.gravitational_constant
        area = config.area_size

        def make_batch(start, stop):
            def batch():
                return update_ships(
                    positions[start:stop],
                    velocities[start:stop],
                    planet_positions,
                    planet_masses,
                    dt,
                    G,
                    area,
                    backend,
                )
            return batch

        bounds = chunk_bounds(n, self.chunk_size or n)
        results = self._run_batches([make_batch(start, stop) for start, stop in bounds])

        if len(results) == 1:
            new_positions, new_velocities = results[0]
        else:
            new_positions = backend.concatenate([r[0] for r in results], axis=0)
            new_velocities = backend.concatenate([r[1] for r in results], axis=0)
        backend.synchronize()

        world.ship_positions[...] = backend.to_numpy(new_positions)
        world.ship_velocities[...] = backend.to_numpy(new_velocities)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._planet_arrays = None

    def __repr__(self) -> str:
        return (
            f"BatchedStrategy(backend={self.backend.name!r}, "
            f"chunk_size={self.chunk_size}, workers={self.workers})"
        )
