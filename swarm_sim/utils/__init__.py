"""Utility functions for reproducibility and configuration."""

from swarm_sim.utils.reproducibility import make_rng, get_seed_info
from swarm_sim.utils.config import (
    Config,
    SimulationConfig,
    config_from_dict,
    load_config,
    save_config,
)

__all__ = [
    "make_rng",
    "get_seed_info",
    "Config",
    "SimulationConfig",
    "config_from_dict",
    "load_config",
    "save_config",
]
