import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSB
from ..types.format_type import MAX_RGB


def rgb_to_hsb(r: int, g: int, b: int) -> HSB:
    """
    Convert RGB (0-255) to HSB (0-1).

    Channels are assumed to already be in range; they are not validated.
    """
    # numpy uint8 channels would wrap around in the differences below
    r, g, b = float(r), float(g), float(b)
    mx = max(r, g, b)
    mn = min(r, g, b)
    bri = mx / MAX_RGB
    sat = 0.0 if mx == 0 else (mx - mn) / mx
    if sat == 0:
        return 0.0, float(sat), float(bri)

    delta = (mx - mn) * 6
    if r == mx:
        hue = (g - b) / delta
    elif g == mx:
        hue = 1 / 3 + (b - r) / delta
    else:
        hue = 2 / 3 + (r - g) / delta
    if hue < 0:
        hue += 1
    return float(hue), float(sat), float(bri)


def np_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert RGB arrays (0-255) to HSB, channels on the last axis."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    )
    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    bri = mx / MAX_RGB
    chroma = mx - mn

    sat = np.divide(chroma, mx, out=np.zeros_like(mx), where=mx != 0)
    delta = chroma * 6
    safe_delta = np.where(delta == 0, 1.0, delta)

    hue = np.where(
        r == mx,
        (g - b) / safe_delta,
        np.where(g == mx, 1 / 3 + (b - r) / safe_delta, 2 / 3 + (r - g) / safe_delta),
    )
    hue = np.where(hue < 0, hue + 1, hue)
    hue = np.where(sat == 0, 0.0, hue)
    return np.stack([hue, sat, bri], axis=-1)
