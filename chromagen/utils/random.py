"""
Random number source shared by every generator in chromagen.

Each thread lazily owns its own ``numpy.random.Generator``; a Generator
instance is not safe to share between threads, so the default is never
shared. Every public generator accepts an ``rng`` argument that overrides it.
"""
from __future__ import annotations
import threading
from typing import Optional, Union
import numpy as np

from .default import value_or_default

RandomSource = Union[None, int, np.random.Generator]

_local = threading.local()


def default_rng() -> np.random.Generator:
    """Return the calling thread's default generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def seed(value: Optional[int] = None) -> None:
    """Reseed the calling thread's default generator."""
    _local.rng = np.random.default_rng(value)


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Turn an ``rng`` argument into a Generator.

    Args:
        rng: None for the thread default, an int seed, or a Generator

    Returns:
        numpy Generator to draw from
    """
    rng = value_or_default(rng, default_rng())
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(f"Unsupported random source: {type(rng).__name__}")
