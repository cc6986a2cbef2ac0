"""
Swarm Simulator - massless ships falling through a field of fixed planets.

Features:
- Seeded random initializer for planets and ships
- Per-ship gravity, semi-implicit Euler and lossy wall bounces
- Interchangeable execution strategies (sequential, threaded, batched)
- Batched strategy on NumPy, JAX, PyTorch or CuPy backends
- Headless CLI for runs and strategy benchmarks
"""

__version__ = "0.1.0"

from swarm_sim.utils.config import SimulationConfig
from swarm_sim.physics.world import Planet, Ship, World
from swarm_sim.presets.random_field import initialize
from swarm_sim.physics.simulator import Simulator
from swarm_sim.strategies.factory import get_strategy, list_strategies
from swarm_sim.backends.factory import get_backend, list_available_backends

__all__ = [
    "SimulationConfig",
    "Planet",
    "Ship",
    "World",
    "initialize",
    "Simulator",
    "get_strategy",
    "list_strategies",
    "get_backend",
    "list_available_backends",
]
