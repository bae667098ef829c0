import numpy as np
from typing import Callable, Dict, Tuple, Union

from .to_rgb import np_hsb_to_rgb, hsb_to_rgb
from .to_hsb import np_rgb_to_hsb, rgb_to_hsb
from ..types.color_types import ColorInput, ColorSpace, validate_color_space, element_to_array

ColorTuple = Union[Tuple[int, int, int], Tuple[float, float, float]]

CONVERT_SCALAR: Dict[Tuple[str, str], Callable[..., ColorTuple]] = {
    ("hsb", "rgb"): hsb_to_rgb,
    ("rgb", "hsb"): rgb_to_hsb,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("hsb", "rgb"): np_hsb_to_rgb,
    ("rgb", "hsb"): np_rgb_to_hsb,
}


def convert(color: ColorInput, from_space: ColorSpace, to_space: ColorSpace) -> ColorTuple:
    """Convert a single color between ``"rgb"`` and ``"hsb"``."""
    fs = validate_color_space(from_space)
    ts = validate_color_space(to_space)
    c0, c1, c2 = color
    if fs == ts:
        # No conversion needed
        if fs == "rgb":
            return int(c0), int(c1), int(c2)
        return float(c0), float(c1), float(c2)
    return CONVERT_SCALAR[(fs, ts)](c0, c1, c2)


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """Convert an array of colors (channels on the last axis) between spaces."""
    fs = validate_color_space(from_space)
    ts = validate_color_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    arr = element_to_array(color)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected 3 channels on the last axis, got shape {arr.shape}")
    return CONVERT_NUMPY[(fs, ts)](arr[..., 0], arr[..., 1], arr[..., 2])
