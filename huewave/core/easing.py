"""Interpolation and easing curves used to shape the palette.

All angles are in turns (1.0 == 360 degrees).
"""

import math

# Smallest normal 32-bit float, added last so rounding cannot cancel it.
_TINY = 1.1754943508222875e-38

GOLDEN_CONJUGATE = 0.6180339887498949


def lerp(start: float, end: float, progress: float) -> float:
    return start + (end - start) * progress


def lerp_angle(from_turns: float, to_turns: float, progress: float) -> float:
    """Interpolate between two angles along the shorter arc.

    Wraps at 1.0, so 0.95 -> 0.05 passes through 0.0 rather than 0.5.
    progress is in [0, 1]; the result is always in [0, 1).
    """
    d = to_turns - from_turns + 0.5
    d = from_turns + progress * (d - math.floor(d) - 0.5)
    d -= math.floor(d)
    # d - floor(d) rounds up to 1.0 for tiny negative d
    return 0.0 if d >= 1.0 else d


def bias_spline(x: float, shape: float, turning: float) -> float:
    """Bias/gain S-curve on [0, 1].

    Below `turning` the curve bends like a bias curve controlled by `shape`;
    above it the mirrored curve takes over, meeting at (turning, turning).
    Passes through (0, 0) and (1, 1) and never decreases in x.
    """
    d = turning - x
    if d >= 0.0:
        return turning * x / (x + shape * d + _TINY)
    return (1.0 - turning) * (x - 1.0) / ((1.0 - x - shape * d) + _TINY) + 1.0


def golden_fraction(index: int) -> float:
    """Fractional part of index * golden-ratio conjugate (low-discrepancy, not random)."""
    v = index * GOLDEN_CONJUGATE
    return v - math.floor(v)
