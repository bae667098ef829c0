from enum import Enum
from typing import Union

from ..errors import UnknownGradientStrategy


class GradientStrategy(str, Enum):
    """How hues are picked along a gradient interval."""
    UNIFORM_RANDOM = "UR"
    GRID = "G"
    JITTERED_GRID = "JG"
    GOLDEN_RATIO = "GR"


_ALIASES = {
    "ur": GradientStrategy.UNIFORM_RANDOM,
    "uniform_random": GradientStrategy.UNIFORM_RANDOM,
    "random": GradientStrategy.UNIFORM_RANDOM,
    "g": GradientStrategy.GRID,
    "grid": GradientStrategy.GRID,
    "jg": GradientStrategy.JITTERED_GRID,
    "jittered_grid": GradientStrategy.JITTERED_GRID,
    "jittered": GradientStrategy.JITTERED_GRID,
    "gr": GradientStrategy.GOLDEN_RATIO,
    "golden_ratio": GradientStrategy.GOLDEN_RATIO,
    "golden": GradientStrategy.GOLDEN_RATIO,
}


def to_gradient_strategy(strategy: Union[GradientStrategy, str]) -> GradientStrategy:
    """Resolve a strategy token, enum member or alias into a GradientStrategy."""
    if isinstance(strategy, GradientStrategy):
        return strategy
    if isinstance(strategy, str):
        resolved = _ALIASES.get(strategy.strip().lower())
        if resolved is not None:
            return resolved
    raise UnknownGradientStrategy(f"Unknown gradient strategy: {strategy!r}")
