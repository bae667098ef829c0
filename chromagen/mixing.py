import numpy as np
from numpy import ndarray as NDArray

from .types.color_types import RGB, ColorInput, element_to_array
from .types.format_type import MAX_RGB
from .utils.random import RandomSource, resolve_rng


def triad_mixing_weights(grey_control: float, *, rng: RandomSource = None) -> NDArray:
    """
    Draw three mixing weights that sum to 1.

    One weight, picked uniformly at random, is scaled by ``grey_control``
    before normalization; the other two are unconstrained uniform draws.
    """
    gen = resolve_rng(rng)
    damped = int(gen.integers(3))
    weights = gen.random(3)
    weights[damped] *= grey_control
    return weights / weights.sum()


def triad_mixing(
    color1: ColorInput,
    color2: ColorInput,
    color3: ColorInput,
    grey_control: float,
    *,
    rng: RandomSource = None,
) -> RGB:
    """
    Mix three RGB colors with random weights.

    Args:
        color1, color2, color3: (r, g, b) in 0-255
        grey_control: 0-1, how much the randomly damped color may contribute.
            0 removes it from the mix, 1 gives an unconstrained three way mix.

    Returns:
        (r, g, b), a convex combination of the inputs rounded to ints
    """
    weights = triad_mixing_weights(grey_control, rng=rng)
    colors = np.stack([element_to_array(c) for c in (color1, color2, color3)])
    mixed = np.clip(np.floor(weights @ colors + 0.5), 0, MAX_RGB).astype(int)
    r, g, b = (int(c) for c in mixed)
    return r, g, b
