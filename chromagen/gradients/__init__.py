"""
Hue-ring gradient sampling.

``gradient_rgb`` picks ``n`` hues inside an interval of the hue ring using one
of four strategies and converts them to RGB at a fixed saturation and
brightness.
"""
from .sampler import gradient_rgb, sample_gradient_hues, HUE_SAMPLERS
from ..types.strategy_type import GradientStrategy

__all__ = [
    "gradient_rgb",
    "sample_gradient_hues",
    "HUE_SAMPLERS",
    "GradientStrategy",
]
