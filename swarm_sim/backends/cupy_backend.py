"""CuPy backend implementation (optional, CUDA-only)."""

from typing import Any, Sequence
import numpy as np
from swarm_sim.backends.base import Backend

try:
    import cupy as cp
    CUPY_AVAILABLE = True
except ImportError:
    CUPY_AVAILABLE = False


class CuPyBackend(Backend):
    """CuPy-based backend (CUDA GPU only)."""

    def __init__(self, device: int = 0, use_float32: bool = False):
        """Initialize CuPy backend.

        Args:
            device: CUDA device ID
            use_float32: Use float32 arrays instead of float64.
        """
        if not CUPY_AVAILABLE:
            raise ImportError("CuPy not available. Install with: pip install cupy")

        self._device = device
        cp.cuda.Device(device).use()
        self._dtype = cp.float32 if use_float32 else cp.float64

    @property
    def name(self) -> str:
        return "cupy"

    @property
    def device(self) -> str:
        return f"cuda:{self._device}"

    def array(self, data: Any) -> Any:
        return cp.asarray(data, dtype=self._dtype)

    def zeros_like(self, array: Any) -> Any:
        return cp.zeros_like(array)

    def sqrt(self, array: Any) -> Any:
        return cp.sqrt(array)

    def add(self, a: Any, b: Any) -> Any:
        return cp.add(a, b)

    def subtract(self, a: Any, b: Any) -> Any:
        return cp.subtract(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        return cp.multiply(a, b)

    def divide(self, a: Any, b: Any) -> Any:
        return cp.divide(a, b)

    def maximum(self, a: Any, b: Any) -> Any:
        return cp.maximum(a, b)

    def clip(self, array: Any, min_val: float, max_val: float) -> Any:
        return cp.clip(array, min_val, max_val)

    def where(self, condition: Any, x: Any, y: Any) -> Any:
        return cp.where(condition, x, y)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return cp.stack(arrays, axis=axis)

    def concatenate(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return cp.concatenate(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return cp.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return cp.asnumpy(array).astype(np.float64)

    def synchronize(self) -> None:
        cp.cuda.Device(self._device).synchronize()
