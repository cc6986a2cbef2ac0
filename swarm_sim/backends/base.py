"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any, Sequence
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.

    Lets the batched strategy run the same ship-update kernel on different
    execution engines (NumPy, JAX, PyTorch, CuPy). Arrays returned by one
    backend are only ever passed back to the same backend.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass

    @property
    @abstractmethod
    def device(self) -> str:
        """Return the device type (e.g., 'cpu', 'cuda:0')."""
        pass

    @property
    def is_accelerator(self) -> bool:
        """True if arrays live off the host (copies needed to read them)."""
        return not self.device.startswith("cpu")

    @abstractmethod
    def array(self, data: Any) -> Any:
        """Create a backend array (in this backend's float dtype) from host data.

        Host backends may return ``data`` itself when no conversion is needed,
        so the result is treated as read-only.

        Args:
            data: Input data (list, numpy array, etc.)

        Returns:
            Backend array object
        """
        pass

    @abstractmethod
    def zeros_like(self, array: Any) -> Any:
        """Create an array of zeros with same shape as input."""
        pass

    @abstractmethod
    def sqrt(self, array: Any) -> Any:
        """Compute square root."""
        pass

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Element-wise addition."""
        pass

    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        """Element-wise subtraction."""
        pass

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """Element-wise multiplication (b may be a Python scalar)."""
        pass

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        """Element-wise division."""
        pass

    @abstractmethod
    def maximum(self, a: Any, b: Any) -> Any:
        """Element-wise maximum (b may be a Python scalar)."""
        pass

    @abstractmethod
    def clip(self, array: Any, min_val: float, max_val: float) -> Any:
        """Clip array values to range."""
        pass

    @abstractmethod
    def where(self, condition: Any, x: Any, y: Any) -> Any:
        """Conditional selection (x or y may be a Python scalar)."""
        pass

    @abstractmethod
    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        """Stack arrays along a new axis. E.g. stack([x, y, z], axis=1) -> (n, 3)."""
        pass

    @abstractmethod
    def concatenate(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        """Join arrays along an existing axis (used to gather ship chunks)."""
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to a float64 NumPy array.

        Used only at the boundary where results are written back to the World.
        """
        pass

    def synchronize(self) -> None:
        """Block until queued device work has finished (no-op on CPU)."""
        return None
