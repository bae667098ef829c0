from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from typing import Callable, Dict, Union

from ..conversions.to_rgb import np_hsb_to_rgb
from ..errors import InvalidGradientRange
from ..types.format_type import GOLDEN_RATIO_CONJUGATE
from ..types.strategy_type import GradientStrategy, to_gradient_strategy
from ..utils.random import RandomSource, resolve_rng

HueSampler = Callable[[int, float, float, np.random.Generator], NDArray]

MAX_JITTER = 0.5


def _uniform_random(n: int, start: float, span: float, rng: np.random.Generator) -> NDArray:
    return start + rng.random(n) * span


def _grid(n: int, start: float, span: float, rng: np.random.Generator) -> NDArray:
    return start + np.arange(n) * (span / n)


def _jittered_grid(n: int, start: float, span: float, rng: np.random.Generator) -> NDArray:
    i = np.arange(n)
    jitter = (2 * rng.random(n) - 1) * MAX_JITTER
    return start + i * jitter * span / n


def _golden_ratio(n: int, start: float, span: float, rng: np.random.Generator) -> NDArray:
    # one offset shared by the whole call
    offset = rng.random()
    i = np.arange(n)
    return start + (offset + (GOLDEN_RATIO_CONJUGATE * i) % 1) * span / n


HUE_SAMPLERS: Dict[GradientStrategy, HueSampler] = {
    GradientStrategy.UNIFORM_RANDOM: _uniform_random,
    GradientStrategy.GRID: _grid,
    GradientStrategy.JITTERED_GRID: _jittered_grid,
    GradientStrategy.GOLDEN_RATIO: _golden_ratio,
}


def _validate_range(start: float, end: float) -> tuple[float, float]:
    if not (0.0 <= start <= 1.0 and 0.0 <= end <= 1.0):
        raise InvalidGradientRange(f"Bad gradient range: {start} -> {end} (expected 0-1)")
    if start > end:
        start, end = end, start
    return start, end


def sample_gradient_hues(
    n: int,
    start: float,
    end: float,
    strategy: Union[GradientStrategy, str],
    *,
    rng: RandomSource = None,
) -> NDArray:
    """
    Pick ``n`` hues along ``[start, end]`` without converting them.

    Hues may land slightly outside the interval (jitter, golden ratio
    offset); they are wrapped onto the ring during conversion.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    start, end = _validate_range(start, end)
    sampler = HUE_SAMPLERS[to_gradient_strategy(strategy)]
    if n == 0:
        return np.empty(0, dtype=float)
    return sampler(n, start, end - start, resolve_rng(rng))


def gradient_rgb(
    n: int,
    start: float,
    end: float,
    strategy: Union[GradientStrategy, str],
    sat: float = 1.0,
    bri: float = 1.0,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """
    Generate ``n`` colors along an interval of the hue ring.

    Args:
        n: number of colors
        start: start of the interval, 0-1
        end: end of the interval, 0-1; swapped with ``start`` if smaller
        strategy: how hues are picked
            "UR": Uniform Random, independent draw per color.
            "G": Grid, evenly spaced, no two colors closer than span/n.
            "JG": Jittered Grid, grid with a random jitter.
            "GR": Golden Ratio, low discrepancy spacing with a random offset.
        sat: saturation for every color, 0-1
        bri: brightness for every color, 0-1
        rng: random source (None, seed or numpy Generator)

    Returns:
        int array of shape (n, 3), in sample order

    Raises:
        InvalidGradientRange: start or end outside [0, 1]
        UnknownGradientStrategy: unrecognized strategy
        InvalidColorValue: sat or bri outside [0, 1]
    """
    hues = sample_gradient_hues(n, start, end, strategy, rng=rng)
    if n == 0:
        return np.empty((0, 3), dtype=int)
    return np_hsb_to_rgb(hues, sat, bri)
