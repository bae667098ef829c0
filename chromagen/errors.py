"""
Exception taxonomy for chromagen.

Validation errors derive from ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class ChromagenError(Exception):
    """Base class for every error raised by chromagen."""


class InvalidColorValue(ChromagenError, ValueError):
    """Saturation or brightness outside [0, 1]."""


class InvalidGradientRange(ChromagenError, ValueError):
    """Gradient start or end outside [0, 1]."""


class UnknownGradientStrategy(ChromagenError, ValueError):
    """Unrecognized gradient strategy token."""


class InvalidHarmonyRange(ChromagenError, ValueError):
    """Ranges incompatible with the split complementary scheme."""


class InternalConversionError(ChromagenError, RuntimeError):
    """Hue sector outside 0..5. Indicates a bug, not bad input."""
