"""JAX backend implementation (optional, GPU support)."""

from typing import Any, Sequence
import numpy as np
from swarm_sim.backends.base import Backend

try:
    import jax
    import jax.numpy as jnp
    JAX_AVAILABLE = True
except ImportError:
    JAX_AVAILABLE = False


class JAXBackend(Backend):
    """JAX-based backend with GPU support.

    JAX arrays are immutable, so the kernel never updates in place; each tick
    produces fresh arrays that the strategy copies back to the host.
    """

    def __init__(self, device: str = None, use_float32: bool = True):
        """Initialize JAX backend.

        Args:
            device: Device string (e.g., 'cpu', 'gpu'). Auto-selects if None.
            use_float32: Use float32 for arrays (faster on GPU, less memory).
                float64 additionally needs ``jax_enable_x64``.
        """
        if not JAX_AVAILABLE:
            raise ImportError("JAX not available. Install with: pip install jax jaxlib")

        self._device = jax.devices(device)[0] if device else jax.devices()[0]
        self._dtype = jnp.float32 if use_float32 else jnp.float64

    @property
    def name(self) -> str:
        return "jax"

    @property
    def device(self) -> str:
        return f"{self._device.platform}:{self._device.id}"

    def array(self, data: Any) -> Any:
        return jax.device_put(jnp.asarray(data, dtype=self._dtype), self._device)

    def zeros_like(self, array: Any) -> Any:
        return jnp.zeros_like(array)

    def sqrt(self, array: Any) -> Any:
        return jnp.sqrt(array)

    def add(self, a: Any, b: Any) -> Any:
        return jnp.add(a, b)

    def subtract(self, a: Any, b: Any) -> Any:
        return jnp.subtract(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        return jnp.multiply(a, b)

    def divide(self, a: Any, b: Any) -> Any:
        return jnp.divide(a, b)

    def maximum(self, a: Any, b: Any) -> Any:
        return jnp.maximum(a, b)

    def clip(self, array: Any, min_val: float, max_val: float) -> Any:
        return jnp.clip(array, min_val, max_val)

    def where(self, condition: Any, x: Any, y: Any) -> Any:
        return jnp.where(condition, x, y)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return jnp.stack(arrays, axis=axis)

    def concatenate(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return jnp.concatenate(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return jnp.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array, dtype=np.float64)

    def synchronize(self) -> None:
        # JAX dispatch is asynchronous; block on an empty computation
        jnp.zeros(()).block_until_ready()
