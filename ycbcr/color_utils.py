from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np
import torch

Vector3 = Union[Sequence[float], np.ndarray, torch.Tensor]


def _as_float(value) -> float:
    # ints beyond float range saturate to +/-inf
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def clamp_channel(value: float, lo: float = 0.0, hi: float = 255.0) -> float:
    """Clamp a single channel value to [lo, hi]. NaN maps to lo."""
    value = _as_float(value)
    if value != value:
        return lo
    return max(lo, min(hi, value))


def vector_to_channels(vector: Vector3) -> Tuple[float, float, float]:
    """Flatten a 3-element vector (sequence, ndarray or tensor) into three floats."""
    if isinstance(vector, torch.Tensor):
        arr = vector.detach().cpu().to(torch.float64).numpy()
    else:
        try:
            arr = np.asarray(vector, dtype=np.float64)
        except OverflowError:
            arr = np.array([_as_float(v) for v in vector], dtype=np.float64)
    arr = arr.reshape(-1)
    if arr.shape[0] != 3:
        raise ValueError(f"expected a 3-element vector, got {arr.shape[0]} elements")
    return float(arr[0]), float(arr[1]), float(arr[2])
