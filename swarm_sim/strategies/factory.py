"""Strategy factory."""

from typing import List

from swarm_sim.strategies.base import Strategy
from swarm_sim.strategies.batched import BatchedStrategy
from swarm_sim.strategies.sequential import SequentialStrategy
from swarm_sim.strategies.threaded import ThreadedStrategy

_STRATEGIES = {
    "sequential": SequentialStrategy,
    "threaded": ThreadedStrategy,
    "batched": BatchedStrategy,
}


def list_strategies() -> List[str]:
    """Names accepted by ``get_strategy``."""
    return list(_STRATEGIES)


def get_strategy(name: str = "sequential", **kwargs) -> Strategy:
    """Create a strategy by name.

    Args:
        name: 'sequential', 'threaded' or 'batched'
        **kwargs: Passed to the strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If the name is unknown
    """
    strategy_class = _STRATEGIES.get(name.lower())
    if strategy_class is None:
        raise ValueError(f"Unknown strategy '{name}'. Available: {list_strategies()}")
    return strategy_class(**kwargs)
