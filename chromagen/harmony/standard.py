from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np
from numpy import ndarray as NDArray

from ..conversions.to_rgb import np_hsb_to_rgb, validate_sat_bri
from ..utils.default import value_or_default
from ..utils.random import RandomSource, resolve_rng


@dataclass(frozen=True)
class HarmonyOptions:
    """
    Optional parameters shared by the harmony generators.

    Attributes:
        reference: reference hue; None draws one at random per call
        sat: saturation of every color, 0-1
        bri: brightness of every color, 0-1
        offset1: shift of the second hue sector
        offset2: shift of the third hue sector
    """
    reference: Optional[float] = None
    sat: float = 1.0
    bri: float = 1.0
    offset1: float = 0.0
    offset2: float = 0.0


DEFAULT_OPTIONS = HarmonyOptions()


def harmony_hues(
    n: int,
    range1: float,
    range2: float,
    range3: float,
    reference: float,
    offset1: float,
    offset2: float,
    rng: np.random.Generator,
) -> NDArray:
    """
    Draw ``n`` hues from three sectors of the hue ring.

    A draw in ``[0, range1 + range2 + range3)`` lands in the first sector
    (centred on the reference), the second (shifted by ``offset1``) or the
    third (shifted by ``offset2``). Results are wrapped into [0, 1).
    """
    rand_a = rng.random(n) * (range1 + range2 + range3)
    shift = np.where(
        rand_a < range1,
        -range1 / 2,
        np.where(rand_a < range1 + range2, offset1 - range2, offset2 - range3),
    )
    # Python/numpy modulo already maps negative hues into [0, 1)
    return (rand_a + shift + reference) % 1.0


def standard_harmony(
    n: int,
    range1: float,
    range2: float,
    range3: float,
    options: Optional[HarmonyOptions] = None,
    *,
    rng: RandomSource = None,
) -> NDArray:
    """
    Generate colors following the standard harmony template scheme
    (Cohen-Or et al., "Color Harmonization", SIGGRAPH 2006).

    Args:
        n: number of colors
        range1: width of the sector around the reference hue
        range2: width of the sector shifted by ``offset1``
        range3: width of the sector shifted by ``offset2``
        options: reference hue, sat, bri and offsets
        rng: random source (None, seed or numpy Generator)

    Returns:
        int array of shape (n, 3)
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    opts = value_or_default(options, DEFAULT_OPTIONS)
    validate_sat_bri(opts.sat, opts.bri)
    gen = resolve_rng(rng)
    reference = gen.random() if opts.reference is None else opts.reference
    if n == 0:
        return np.empty((0, 3), dtype=int)

    hues = harmony_hues(
        n, range1, range2, range3, reference, opts.offset1, opts.offset2, gen
    )
    return np_hsb_to_rgb(hues, opts.sat, opts.bri)
