"""Redmean color distance, a red-weighted Euclidean approximation of perceived difference."""
import math
import numpy as np
from numpy import ndarray as NDArray

from .types.color_types import ColorInput, element_to_array


def color_distance(color1: ColorInput, color2: ColorInput) -> float:
    """
    Weighted Euclidean distance between two RGB (0-255) colors.

    Symmetric, zero only for identical colors, not bounded above.
    """
    r1, g1, b1 = (float(c) for c in color1)
    r2, g2, b2 = (float(c) for c in color2)
    rmean = (r1 + r2) / 2
    dr = r1 - r2
    dg = g1 - g2
    db = b1 - b2
    return math.sqrt(
        (512 + rmean) * dr * dr / 256
        + 4 * dg * dg
        + (767 - rmean) * db * db / 256
    )


def np_color_distance(colors1: NDArray, colors2: NDArray) -> NDArray:
    """
    Vectorized redmean distance.

    Both inputs carry RGB on the last axis and broadcast against each other,
    so a single color can be compared against a whole palette.
    """
    a = element_to_array(colors1)
    b = element_to_array(colors2)
    rmean = (a[..., 0] + b[..., 0]) / 2
    diff = a - b
    dr, dg, db = diff[..., 0], diff[..., 1], diff[..., 2]
    return np.sqrt(
        (512 + rmean) * dr * dr / 256
        + 4 * dg * dg
        + (767 - rmean) * db * db / 256
    )
