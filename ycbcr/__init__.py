from .color import YCbCrColor
from .color_utils import clamp_channel, vector_to_channels

__all__ = [
    "YCbCrColor",
    "clamp_channel",
    "vector_to_channels",
]
