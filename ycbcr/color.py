from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np
import torch

from .color_utils import Vector3, clamp_channel, vector_to_channels


@dataclass(frozen=True)
class YCbCrColor:
    """
    YCbCr (luma, blue chroma, red chroma) color as used by JFIF (ITU-T T.871).

    Every channel is clamped to [0, 255] on construction, so out-of-range values
    coming from upstream arithmetic never fail. NaN channels become 0.
    Equality is exact per channel; hashing follows the (y, cb, cr) order.
    """

    MIN_VALUE: ClassVar[float] = 0.0
    MAX_VALUE: ClassVar[float] = 255.0

    y: float
    cb: float
    cr: float

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the clamped values
        object.__setattr__(self, "y", clamp_channel(self.y, self.MIN_VALUE, self.MAX_VALUE))
        object.__setattr__(self, "cb", clamp_channel(self.cb, self.MIN_VALUE, self.MAX_VALUE))
        object.__setattr__(self, "cr", clamp_channel(self.cr, self.MIN_VALUE, self.MAX_VALUE))

    @classmethod
    def from_vector(cls, vector: Vector3) -> "YCbCrColor":
        """Build from a 3-element (y, cb, cr) tuple, list, ndarray or tensor."""
        y, cb, cr = vector_to_channels(vector)
        return cls(y, cb, cr)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.y, self.cb, self.cr)

    def to_numpy(self, dtype=np.float32) -> np.ndarray:
        return np.array(self.as_tuple(), dtype=dtype)

    def to_tensor(self, dtype: torch.dtype = torch.float32) -> torch.Tensor:
        return torch.tensor(self.as_tuple(), dtype=dtype)

    def __str__(self) -> str:
        return f"YCbCr [ Y={self.y}, Cb={self.cb}, Cr={self.cr} ]"
