"""
Chromagen Color Model Conversions
=================================

Bidirectional RGB <-> HSB conversion, scalar and vectorized (numpy).

RGB channels are integers in 0-255. HSB components are floats in 0-1; hue
is circular and is wrapped onto [0, 1) before conversion.

Conversion Functions
--------------------
HSB -> RGB:
    hsb_to_rgb(h, s, b)
        Scalar conversion, returns an (r, g, b) tuple of ints
    np_hsb_to_rgb(h, s, b)
        Vectorized conversion, returns an int array (..., 3)

RGB -> HSB:
    rgb_to_hsb(r, g, b)
        Scalar conversion, returns an (h, s, b) tuple of floats
    np_rgb_to_hsb(r, g, b)
        Vectorized conversion, returns a float array (..., 3)

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from chromagen.conversions import hsb_to_rgb, rgb_to_hsb
>>> hsb_to_rgb(0.5, 1.0, 1.0)
(0, 255, 255)
>>> rgb_to_hsb(255, 0, 0)
(0.0, 1.0, 1.0)
"""

from .to_rgb import hsb_to_rgb, hsb_to_unit_rgb, np_hsb_to_rgb, np_hsb_to_unit_rgb
from .to_hsb import rgb_to_hsb, np_rgb_to_hsb
from .wrapper import convert, np_convert

__all__ = [
    'hsb_to_rgb',
    'hsb_to_unit_rgb',
    'np_hsb_to_rgb',
    'np_hsb_to_unit_rgb',
    'rgb_to_hsb',
    'np_rgb_to_hsb',
    'convert',
    'np_convert',
]
