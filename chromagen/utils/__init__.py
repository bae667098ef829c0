from .num_utils import round_half_up, to_channel, wrap_hue, np_wrap_hue, np_to_channel
from .random import RandomSource, default_rng, resolve_rng, seed
from .default import value_or_default

__all__ = [
    "round_half_up",
    "to_channel",
    "wrap_hue",
    "np_wrap_hue",
    "np_to_channel",
    "RandomSource",
    "default_rng",
    "resolve_rng",
    "seed",
    "value_or_default",
]
