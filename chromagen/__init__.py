"""
Chromagen - Procedural Color Generation
=======================================

Generate colors, palettes and gradients from a handful of numbers.

Key Features
------------
- RGB <-> HSB conversion, scalar and vectorized
- Redmean perceptual distance between RGB colors
- Uniform random colors and grey offsets of a base color
- Hue-ring gradients (uniform random, grid, jittered grid, golden ratio)
- Harmony palettes (analogous, complementary, split complementary, triad)
- Random three color mixing with grey control
- Injectable, per-thread random source for reproducible output

Quick Start
-----------
>>> from chromagen import gradient_rgb, triad, HarmonyOptions
>>>
>>> # Five evenly spaced hues between cyan and magenta
>>> gradient_rgb(5, 0.5, 0.85, "G")
>>>
>>> # A reproducible triad palette around a fixed reference hue
>>> triad(6, 0.05, 0.05, 0.05, HarmonyOptions(reference=0.1, bri=0.9), rng=42)
"""

from .errors import (
    ChromagenError,
    InvalidColorValue,
    InvalidGradientRange,
    UnknownGradientStrategy,
    InvalidHarmonyRange,
    InternalConversionError,
)
from .types.color_types import RGB, HSB
from .types.strategy_type import GradientStrategy
from .conversions import (
    hsb_to_rgb,
    rgb_to_hsb,
    np_hsb_to_rgb,
    np_rgb_to_hsb,
    convert,
    np_convert,
)
from .distance import color_distance, np_color_distance
from .random_colors import random_rgb, random_offset_rgb
from .gradients import gradient_rgb
from .harmony import (
    HarmonyOptions,
    standard_harmony,
    analogous,
    complementary,
    split_complementary,
    triad,
)
from .mixing import triad_mixing, triad_mixing_weights
from .utils.random import seed

__version__ = "1.0.0"

__all__ = [
    # errors
    "ChromagenError",
    "InvalidColorValue",
    "InvalidGradientRange",
    "UnknownGradientStrategy",
    "InvalidHarmonyRange",
    "InternalConversionError",
    # types
    "RGB",
    "HSB",
    "GradientStrategy",
    # conversions
    "hsb_to_rgb",
    "rgb_to_hsb",
    "np_hsb_to_rgb",
    "np_rgb_to_hsb",
    "convert",
    "np_convert",
    # distance
    "color_distance",
    "np_color_distance",
    # random colors
    "random_rgb",
    "random_offset_rgb",
    # gradients
    "gradient_rgb",
    # harmony
    "HarmonyOptions",
    "standard_harmony",
    "analogous",
    "complementary",
    "split_complementary",
    "triad",
    # mixing
    "triad_mixing",
    "triad_mixing_weights",
    # random source
    "seed",
    "__version__",
]
