"""
Random Color Generation
=======================

Uniform random RGB colors and random brightness offsets of a base color.
"""
import math
import warnings

from .types.color_types import RGB, ColorInput
from .types.format_type import MAX_RGB
from .utils.random import RandomSource, resolve_rng


def random_rgb(*, rng: RandomSource = None) -> RGB:
    """Three independent uniform channels in 0-255."""
    gen = resolve_rng(rng)
    r, g, b = gen.integers(0, MAX_RGB + 1, size=3)
    return int(r), int(g), int(b)


def random_offset_rgb(base: ColorInput, offset: float, *, rng: RandomSource = None) -> RGB:
    """
    Random grey offset of a base color.

    The mean of the base channels is moved uniformly within
    ``[mean - offset, mean + offset]`` and the resulting ratio scales the
    base's red channel, which is used for all three output channels. The
    output is therefore always grey.

    Args:
        base: (r, g, b) in 0-255
        offset: maximum change of the channel mean

    Returns:
        (v, v, v) with v floored and clamped to 0-255
    """
    gen = resolve_rng(rng)
    red = float(base[0])
    mean = (red + float(base[1]) + float(base[2])) / 3
    new_mean = mean + 2 * gen.random() * offset - offset
    if mean == 0:
        warnings.warn(
            "random_offset_rgb called with an all-zero base color; returning black",
            RuntimeWarning,
            stacklevel=2,
        )
        return 0, 0, 0

    ratio = new_mean / mean
    value = min(MAX_RGB, max(0, int(math.floor(red * ratio))))
    return value, value, value
