"""Reproducibility utilities for deterministic simulations."""

from typing import Optional, Union

import numpy as np

SeedLike = Union[None, int, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """Return a NumPy Generator for ``seed``.

    An existing Generator is passed through untouched so callers can share one
    stream across several draws; an int gives a fresh deterministic stream and
    ``None`` an OS-seeded one.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def get_seed_info(seed: Optional[int] = None) -> dict:
    """Describe how a run was seeded (for logging alongside results)."""
    info = {"deterministic": seed is not None}
    if seed is not None:
        info["seed"] = seed
        info["bit_generator"] = type(np.random.default_rng(seed).bit_generator).__name__
    return info
