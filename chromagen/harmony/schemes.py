"""Named harmony schemes, each a fixed parametrization of ``standard_harmony``."""
from __future__ import annotations
from dataclasses import replace
from typing import Optional
from numpy import ndarray as NDArray

from .standard import HarmonyOptions, DEFAULT_OPTIONS, standard_harmony
from ..errors import InvalidHarmonyRange
from ..utils.default import value_or_default
from ..utils.random import RandomSource

COMPLEMENTARY_OFFSET = 0.5
SPLIT_COMPLEMENTARY_BASE = 180.0
TRIAD_OFFSETS = (0.33333, 0.66667)


def analogous(
    n: int,
    hue_range: float,
    options: Optional[HarmonyOptions] = None,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """Colors within ``hue_range`` centred on the reference hue."""
    return standard_harmony(n, hue_range, 0, 0, options, rng=rng)


def complementary(
    n: int,
    range1: float,
    range2: float,
    options: Optional[HarmonyOptions] = None,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """Colors around the reference hue and around its opposite. ``offset1`` is fixed to 0.5."""
    opts = replace(value_or_default(options, DEFAULT_OPTIONS), offset1=COMPLEMENTARY_OFFSET)
    return standard_harmony(n, range1, range2, 0, opts, rng=rng)


def split_complementary(
    n: int,
    range1: float,
    range2: float,
    range3: float,
    variation: float,
    options: Optional[HarmonyOptions] = None,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """
    Split complementary scheme.

    The side sectors are offset by ``180 - variation`` and ``180 + variation``;
    both ``range2`` and ``range3`` must be smaller than ``2 * variation``.
    Offsets from ``options`` are ignored.

    Raises:
        InvalidHarmonyRange: range2 or range3 >= 2 * variation
    """
    if range2 >= 2 * variation or range3 >= 2 * variation:
        raise InvalidHarmonyRange(
            f"Bad ranges for split complementary scheme: range2={range2}, "
            f"range3={range3} must be < {2 * variation}"
        )
    opts = replace(
        value_or_default(options, DEFAULT_OPTIONS),
        offset1=SPLIT_COMPLEMENTARY_BASE - variation,
        offset2=SPLIT_COMPLEMENTARY_BASE + variation,
    )
    return standard_harmony(n, range1, range2, range3, opts, rng=rng)


def triad(
    n: int,
    range1: float,
    range2: float,
    range3: float,
    options: Optional[HarmonyOptions] = None,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """Three sectors a third of the ring apart. Offsets from ``options`` are ignored."""
    offset1, offset2 = TRIAD_OFFSETS
    opts = replace(value_or_default(options, DEFAULT_OPTIONS), offset1=offset1, offset2=offset2)
    return standard_harmony(n, range1, range2, range3, opts, rng=rng)
