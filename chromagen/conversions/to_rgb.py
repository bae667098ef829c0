import numpy as np
from numpy import ndarray as NDArray
from typing import Callable, Dict, Tuple

from ..errors import InvalidColorValue, InternalConversionError
from ..types.color_types import RGB
from ..types.format_type import HSB_MAX, HUE_SECTORS
from ..utils.num_utils import to_channel, np_to_channel, wrap_hue, np_wrap_hue

UnitTriple = Tuple[float, float, float]

# (bri, p, q, t) -> (r, g, b) for each sector of the hue ring
HSB_SECTORS: Dict[int, Callable[[float, float, float, float], UnitTriple]] = {
    0: lambda v, p, q, t: (v, t, p),
    1: lambda v, p, q, t: (q, v, p),
    2: lambda v, p, q, t: (p, v, t),
    3: lambda v, p, q, t: (p, q, v),
    4: lambda v, p, q, t: (t, p, v),
    5: lambda v, p, q, t: (v, p, q),
}


def validate_sat_bri(sat: float, bri: float) -> None:
    if not (0.0 <= sat <= HSB_MAX and 0.0 <= bri <= HSB_MAX):
        raise InvalidColorValue(f"Bad HSB value: sat={sat}, bri={bri} (expected 0-1)")


def hsb_to_unit_rgb(hue: float, sat: float, bri: float) -> UnitTriple:
    """
    Convert HSB (all 0-1) to unit RGB floats (0-1).

    The hue is wrapped onto the ring first, so 1.5 and 0.5 are the same hue.
    """
    validate_sat_bri(sat, bri)
    if sat == 0:
        return bri, bri, bri

    hue = wrap_hue(hue)
    i = int(HUE_SECTORS * hue)
    f = HUE_SECTORS * hue - i
    p = bri * (1 - sat)
    q = bri * (1 - sat * f)
    t = bri * (1 - sat * (1 - f))
    try:
        sector = HSB_SECTORS[i]
    except KeyError:
        raise InternalConversionError(f"Impossible hue sector {i} for hue {hue}") from None
    return sector(bri, p, q, t)


def hsb_to_rgb(hue: float, sat: float, bri: float) -> RGB:
    """
    Convert an HSB color to RGB.

    Args:
        hue: 0-1, wrapped if outside
        sat: 0-1
        bri: 0-1

    Returns:
        (r, g, b) ints in 0-255

    Raises:
        InvalidColorValue: sat or bri outside [0, 1]
    """
    r, g, b = hsb_to_unit_rgb(hue, sat, bri)
    return to_channel(r), to_channel(g), to_channel(b)


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert HSB arrays to unit RGB, channels on the last axis."""
    h, s, b = np.broadcast_arrays(
        np.asarray(h, dtype=float),
        np.asarray(s, dtype=float),
        np.asarray(b, dtype=float),
    )
    bad = ~((s >= 0.0) & (s <= HSB_MAX) & (b >= 0.0) & (b <= HSB_MAX))
    if np.any(bad):
        raise InvalidColorValue(
            f"Bad HSB value: {int(np.count_nonzero(bad))} sat/bri entries outside 0-1"
        )

    h = np_wrap_hue(h)
    i = np.floor(HUE_SECTORS * h).astype(int)
    if np.any((i < 0) | (i >= HUE_SECTORS)):
        raise InternalConversionError("Impossible hue sector in array conversion")
    f = HUE_SECTORS * h - i
    p = b * (1 - s)
    q = b * (1 - s * f)
    t = b * (1 - s * (1 - f))

    conditions = [i == k for k in range(HUE_SECTORS)]
    red = np.select(conditions, [b, q, p, p, t, b])
    green = np.select(conditions, [t, b, b, q, p, p])
    blue = np.select(conditions, [p, p, t, b, b, q])
    return np.stack([red, green, blue], axis=-1)


def np_hsb_to_rgb(h: NDArray, s: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized HSB -> RGB.

    Inputs broadcast against each other; the result has the broadcast shape
    plus a trailing channel axis of integer values in 0-255.
    """
    return np_to_channel(np_hsb_to_unit_rgb(h, s, b))
