"""Interchangeable execution strategies over the same per-ship rule."""

from swarm_sim.strategies.base import Strategy
from swarm_sim.strategies.sequential import SequentialStrategy
from swarm_sim.strategies.threaded import ThreadedStrategy
from swarm_sim.strategies.batched import BatchedStrategy
from swarm_sim.strategies.factory import get_strategy, list_strategies

__all__ = [
    "Strategy",
    "SequentialStrategy",
    "ThreadedStrategy",
    "BatchedStrategy",
    "get_strategy",
    "list_strategies",
]
