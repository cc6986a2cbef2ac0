"""NumPy backend implementation."""

from typing import Any, Sequence
import numpy as np
from swarm_sim.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available).

    With the default float64 dtype the batched kernel reproduces the scalar
    rule bit for bit.
    """

    def __init__(self, dtype=np.float64):
        self._dtype = np.dtype(dtype)

    @property
    def name(self) -> str:
        return "numpy"

    @property
    def device(self) -> str:
        return "cpu"

    def array(self, data: Any) -> np.ndarray:
        # Host data already in the right dtype is used as is, without a copy
        return np.asarray(data, dtype=self._dtype)

    def zeros_like(self, array: Any) -> np.ndarray:
        return np.zeros_like(array)

    def sqrt(self, array: Any) -> np.ndarray:
        return np.sqrt(array)

    def add(self, a: Any, b: Any) -> np.ndarray:
        return np.add(a, b)

    def subtract(self, a: Any, b: Any) -> np.ndarray:
        return np.subtract(a, b)

    def multiply(self, a: Any, b: Any) -> np.ndarray:
        return np.multiply(a, b)

    def divide(self, a: Any, b: Any) -> np.ndarray:
        return np.divide(a, b)

    def maximum(self, a: Any, b: Any) -> np.ndarray:
        return np.maximum(a, b)

    def clip(self, array: Any, min_val: float, max_val: float) -> np.ndarray:
        return np.clip(array, min_val, max_val)

    def where(self, condition: Any, x: Any, y: Any) -> np.ndarray:
        return np.where(condition, x, y)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> np.ndarray:
        return np.stack(arrays, axis=axis)

    def concatenate(self, arrays: Sequence[Any], axis: int = 0) -> np.ndarray:
        return np.concatenate(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array, dtype=np.float64)
