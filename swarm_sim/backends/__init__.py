"""Compute backend abstractions for the batched strategy."""

from swarm_sim.backends.base import Backend
from swarm_sim.backends.factory import get_backend, list_available_backends

__all__ = ["Backend", "get_backend", "list_available_backends"]
