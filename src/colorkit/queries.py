"""Predicates and metrics over one or two colors.

Nothing here modifies its arguments. Only :func:`difference_between` needs the
HSB representation; the rest work on raw RGB channels.
"""

import math

from .config import (
    BLACK_LOWER_BOUND,
    BLACK_UPPER_BOUND,
    DEFAULT_DIFFERENCE_THRESHOLD,
    DEFAULT_EQUALITY_THRESHOLD,
)
from .hsb import rgb_to_hsb
from .types import Color, as_color

__all__ = [
    "BLACK_UPPER_BOUND",
    "BLACK_LOWER_BOUND",
    "is_black",
    "is_greyscale",
    "is_approximately_greyscale",
    "approximately_equal",
    "difference_between",
    "get_raw_difference_between",
    "is_strong",
]

# Relative and absolute tolerances for "the same float" in is_greyscale.
_REL_TOL = 1e-6
_ABS_TOL = 1e-9


def is_black(color: Color) -> bool:
    """True if all channels are exactly equal and no brighter than 0.15."""
    c = as_color(color)
    if c.r == c.g and c.g == c.b:
        return c.r <= BLACK_UPPER_BOUND
    return False


def is_greyscale(color: Color) -> bool:
    """True for a grey that is not black.

    Channels are compared with a tight relative/absolute tolerance, so only
    rounding noise is forgiven. Use :func:`is_approximately_greyscale` for a
    looser check.
    """
    c = as_color(color)
    if is_black(c):
        return False
    return math.isclose(c.r, c.g, rel_tol=_REL_TOL, abs_tol=_ABS_TOL) and math.isclose(
        c.r, c.b, rel_tol=_REL_TOL, abs_tol=_ABS_TOL
    )


def is_approximately_greyscale(
    color: Color, threshold: float = DEFAULT_EQUALITY_THRESHOLD
) -> bool:
    """True if red/green and green/blue each differ by at most ``threshold``.

    Unlike :func:`is_greyscale`, black is not excluded.
    """
    c = as_color(color)
    return abs(c.r - c.g) <= threshold and abs(c.g - c.b) <= threshold


def approximately_equal(
    a: Color, b: Color, threshold: float = DEFAULT_EQUALITY_THRESHOLD
) -> bool:
    """True if no RGB channel differs by more than ``threshold``."""
    ca = as_color(a)
    cb = as_color(b)

    if abs(ca.r - cb.r) > threshold:
        return False

    if abs(ca.g - cb.g) > threshold:
        return False

    if abs(ca.b - cb.b) > threshold:
        return False

    return True


def _fold(delta: float) -> float:
    if delta > 0.5:
        delta = 1.0 - (1.0 - delta)
    return delta


def difference_between(a: Color, b: Color) -> float:
    """Loose perceptual difference between two colors, used for sorting.

    Sums the absolute hue, saturation and brightness differences. Components
    above 0.5 pass through ``1.0 - (1.0 - x)``, which leaves them as they are,
    so the result lies in [0, 3] and hue is not treated as circular here.

    Args:
        a: First color.
        b: Second color.

    Returns:
        float: Sum of the three HSB component differences.
    """
    ha = rgb_to_hsb(a)
    hb = rgb_to_hsb(b)

    h = _fold(abs(ha.h - hb.h))
    s = _fold(abs(ha.s - hb.s))
    k = _fold(abs(ha.b - hb.b))

    return h + s + k


def get_raw_difference_between(a: Color, b: Color) -> float:
    """Mean absolute RGB channel difference, in [0, 1] for in-range colors."""
    ca = as_color(a)
    cb = as_color(b)
    diff = abs(ca.r - cb.r) + abs(ca.g - cb.g) + abs(ca.b - cb.b)
    return diff / 3.0


def is_strong(color: Color, threshold: float = DEFAULT_DIFFERENCE_THRESHOLD) -> bool:
    """True if any two RGB channels differ by at least ``threshold``."""
    c = as_color(color)
    rg = abs(c.r - c.g)
    gb = abs(c.g - c.b)
    rb = abs(c.r - c.b)
    return rg >= threshold or gb >= threshold or rb >= threshold
