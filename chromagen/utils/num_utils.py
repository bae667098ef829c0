import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import MAX_RGB


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def to_channel(value: float) -> int:
    """Scale a unit float to an RGB channel in [0, 255]."""
    return min(MAX_RGB, max(0, round_half_up(value * MAX_RGB)))


def np_to_channel(values: NDArray) -> NDArray:
    """Vectorized: Scale unit floats to integer RGB channels in [0, 255]."""
    scaled = np.floor(np.asarray(values, dtype=float) * MAX_RGB + 0.5)
    return np.clip(scaled, 0, MAX_RGB).astype(int)


def wrap_hue(hue: float) -> float:
    """Normalize a hue into [0, 1)."""
    hue = hue - math.floor(hue)
    # hue - floor(hue) rounds up to exactly 1.0 for tiny negative inputs
    return 0.0 if hue >= 1.0 else hue


def np_wrap_hue(hue: NDArray) -> NDArray:
    """Vectorized: Normalize hues into [0, 1)."""
    hue = np.asarray(hue, dtype=float)
    hue = hue - np.floor(hue)
    return np.where(hue >= 1.0, 0.0, hue)
