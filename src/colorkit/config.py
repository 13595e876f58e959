"""Thresholds, constants and environment-driven settings for colorkit."""

import os

__all__ = [
    "BLACK_UPPER_BOUND",
    "BLACK_LOWER_BOUND",
    "DEFAULT_EQUALITY_THRESHOLD",
    "DEFAULT_DIFFERENCE_THRESHOLD",
    "COLOR_DIVISOR",
    "HUE_STEP",
    "RESTRICT_DECIMALS_ENV",
    "restrict_decimals_enabled",
]

# A grey at or below this value counts as black.
BLACK_UPPER_BOUND = 0.15
# Not used by any predicate here; kept for callers that want a darker cutoff.
BLACK_LOWER_BOUND = 0.075

DEFAULT_EQUALITY_THRESHOLD = 0.05
DEFAULT_DIFFERENCE_THRESHOLD = 0.55

# The hue circle is split into twelve 30 degree intervals.
COLOR_DIVISOR = 12
HUE_STEP = 1.0 / COLOR_DIVISOR

RESTRICT_DECIMALS_ENV = "COLORKIT_RESTRICT_DECIMALS"

_TRUTHY = {"1", "true", "yes", "on"}


def restrict_decimals_enabled() -> bool:
    """Whether random channel values should be rounded to 2 decimal places.

    Off unless the ``COLORKIT_RESTRICT_DECIMALS`` environment variable is set
    to one of ``1``, ``true``, ``yes`` or ``on``.
    """
    return os.environ.get(RESTRICT_DECIMALS_ENV, "").strip().lower() in _TRUTHY
