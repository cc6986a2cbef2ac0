"""Backend factory for creating and managing compute backends."""

import logging
from typing import List, Optional
from swarm_sim.backends.base import Backend
from swarm_sim.backends.numpy_backend import NumPyBackend
from swarm_sim.backends.jax_backend import JAX_AVAILABLE, JAXBackend
from swarm_sim.backends.pytorch_backend import TORCH_AVAILABLE, PyTorchBackend
from swarm_sim.backends.cupy_backend import CUPY_AVAILABLE, CuPyBackend

logger = logging.getLogger(__name__)

# Optional backends, in GPU preference order
_OPTIONAL_BACKENDS = {
    "cupy": (CUPY_AVAILABLE, CuPyBackend, "pip install cupy"),
    "jax": (JAX_AVAILABLE, JAXBackend, "pip install jax jaxlib"),
    "pytorch": (TORCH_AVAILABLE, PyTorchBackend, "pip install torch"),
}


def list_available_backends() -> List[str]:
    """List all available backends.

    Returns:
        List of backend names whose library can be imported
    """
    backends = ["numpy"]  # Always available
    backends.extend(name for name, (available, _, _) in _OPTIONAL_BACKENDS.items() if available)
    return backends


def get_backend(name: Optional[str] = None, prefer_gpu: bool = True, **kwargs) -> Backend:
    """Get a backend instance.

    Args:
        name: Backend name ('numpy', 'jax', 'pytorch', 'cupy'). If None, auto-selects.
        prefer_gpu: If True and name is None, prefer GPU backends over CPU.
        **kwargs: Passed to the named backend's constructor (ignored when auto-selecting)

    Returns:
        Backend instance

    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        if prefer_gpu:
            for candidate, (available, backend_class, _) in _OPTIONAL_BACKENDS.items():
                if not available:
                    continue
                try:
                    backend = backend_class()
                except (ImportError, RuntimeError) as exc:
                    # Library present but no usable device
                    logger.debug("Skipping %s backend: %s", candidate, exc)
                    continue
                if backend.is_accelerator:
                    return backend
        return NumPyBackend()

    name_lower = name.lower()

    if name_lower == "numpy":
        return NumPyBackend(**kwargs)
    if name_lower in _OPTIONAL_BACKENDS:
        available, backend_class, hint = _OPTIONAL_BACKENDS[name_lower]
        if not available:
            raise ValueError(f"{name_lower} backend not available. Install with: {hint}")
        return backend_class(**kwargs)

    available = list_available_backends()
    raise ValueError(f"Unknown backend '{name}'. Available: {available}")
