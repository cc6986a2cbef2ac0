"""PyTorch backend implementation (optional, GPU support)."""

from numbers import Number
from typing import Any, Sequence
import numpy as np
from swarm_sim.backends.base import Backend

try:
    import torch
    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False


class PyTorchBackend(Backend):
    """PyTorch-based backend with GPU support."""

    def __init__(self, device: str = None, use_float32: bool = False):
        """Initialize PyTorch backend.

        Args:
            device: Device string (e.g., 'cpu', 'cuda:0'). Auto-selects if None.
            use_float32: Use float32 tensors instead of float64.
        """
        if not TORCH_AVAILABLE:
            raise ImportError("PyTorch not available. Install with: pip install torch")

        if device is None:
            self._device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
        else:
            self._device = torch.device(device)
        self._dtype = torch.float32 if use_float32 else torch.float64

    @property
    def name(self) -> str:
        return "pytorch"

    @property
    def device(self) -> str:
        return str(self._device)

    def array(self, data: Any) -> Any:
        if isinstance(data, np.ndarray):
            tensor = torch.from_numpy(np.array(data))
        else:
            tensor = torch.as_tensor(data)
        return tensor.to(device=self._device, dtype=self._dtype)

    def zeros_like(self, array: Any) -> Any:
        return torch.zeros_like(array)

    def sqrt(self, array: Any) -> Any:
        return torch.sqrt(array)

    def add(self, a: Any, b: Any) -> Any:
        return torch.add(a, b)

    def subtract(self, a: Any, b: Any) -> Any:
        return torch.subtract(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        return torch.multiply(a, b)

    def divide(self, a: Any, b: Any) -> Any:
        return torch.divide(a, b)

    def maximum(self, a: Any, b: Any) -> Any:
        # torch.maximum only accepts tensors
        if isinstance(b, Number):
            return torch.clamp(a, min=b)
        return torch.maximum(a, b)

    def clip(self, array: Any, min_val: float, max_val: float) -> Any:
        return torch.clamp(array, min_val, max_val)

    def where(self, condition: Any, x: Any, y: Any) -> Any:
        return torch.where(condition, x, y)

    def stack(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return torch.stack(list(arrays), dim=axis)

    def concatenate(self, arrays: Sequence[Any], axis: int = 0) -> Any:
        return torch.cat(list(arrays), dim=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return torch.unsqueeze(array, dim=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        if isinstance(array, torch.Tensor):
            return array.detach().cpu().numpy().astype(np.float64)
        return np.asarray(array, dtype=np.float64)

    def synchronize(self) -> None:
        if self._device.type == 'cuda':
            torch.cuda.synchronize(self._device)
