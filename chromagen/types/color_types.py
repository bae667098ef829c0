from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

RGB = Tuple[int, int, int]
HSB = Tuple[float, float, float]
ColorInput = Union[Sequence[int], Sequence[float], ndarray]
ColorSpace = Literal["rgb", "hsb"]
COLOR_SPACES = {"rgb", "hsb"}


def element_to_array(element: ColorInput) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple, list or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.array(element, dtype=float)


def validate_color_space(color_space: str) -> ColorSpace:
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {color_space}")
    return space  # type: ignore[return-value]
