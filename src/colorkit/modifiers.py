"""Single-color transforms and random color generation.

Every function returns a new :class:`~colorkit.types.Color`; alpha is carried
through unchanged. Brightness, saturation and hue edits round-trip through
HSB, clamping saturation and brightness into [0, 1] and wrapping hue.

Random functions take an optional ``rng``: any object with a
``uniform(low, high)`` method, such as a seeded ``numpy.random.Generator``.
When omitted, the global ``numpy.random`` state is used.
"""

from typing import Any

import numpy as np

from .config import restrict_decimals_enabled
from .hsb import clamp01, hsb_to_rgb, rgb_to_hsb, wrap_float
from .types import Color, as_color

__all__ = [
    "random_float",
    "random_greyscale_color",
    "random_color",
    "flip_color",
    "vary_float",
    "vary_color",
    "increment_hue",
    "darken_color",
    "brighten_color",
    "darken_color_normalized",
    "brighten_color_normalized",
    "saturate_color",
    "saturate_color_normalized",
]


def _uniform(rng: Any, low: float, high: float) -> float:
    source = np.random if rng is None else rng
    return float(source.uniform(low, high))


def random_float(restrict_decimals: bool | None = None, rng: Any = None) -> float:
    """Uniform random value in [0, 1].

    Args:
        restrict_decimals: Round to 2 decimal places. ``None`` defers to the
            ``COLORKIT_RESTRICT_DECIMALS`` environment setting.
        rng: Optional random source.
    """
    if restrict_decimals is None:
        restrict_decimals = restrict_decimals_enabled()
    value = _uniform(rng, 0.0, 1.0)
    if restrict_decimals:
        return round(value, 2)
    return value


def random_greyscale_color(rng: Any = None) -> Color:
    """Random grey between 0.25 and 0.75, rounded to 2 decimal places."""
    value = round(_uniform(rng, 0.25, 0.75), 2)
    return Color(value, value, value)


def random_color(restrict_decimals: bool | None = None, rng: Any = None) -> Color:
    """Color with three independent uniform random channels."""
    return Color(
        random_float(restrict_decimals, rng),
        random_float(restrict_decimals, rng),
        random_float(restrict_decimals, rng),
    )


def flip_color(color: Color) -> Color:
    """Invert each RGB channel (``1 - value``)."""
    c = as_color(color)
    return c._replace(r=1.0 - c.r, g=1.0 - c.g, b=1.0 - c.b)


def vary_float(
    value: float,
    intensity: float,
    minimum: float = 0.0,
    maximum: float = 1.0,
    rng: Any = None,
) -> float:
    """Shift ``value`` by a random amount in [-intensity, intensity].

    The result is clamped into [minimum, maximum] and rounded to 2 decimal
    places.
    """
    value += _uniform(rng, -intensity, intensity)

    if value < minimum:
        value = minimum

    if value > maximum:
        value = maximum

    return round(value, 2)


def vary_color(
    color: Color,
    intensity: float,
    per_channel_random: bool = False,
    rng: Any = None,
) -> Color:
    """Randomly vary a color by up to +/- ``intensity``.

    Without ``per_channel_random`` a single factor ``f`` is drawn and every
    channel becomes ``channel + channel * f``; the result is not clamped.
    With it, each channel gets its own additive shift via :func:`vary_float`.
    """
    c = as_color(color)

    if not per_channel_random:
        factor = _uniform(rng, -intensity, intensity)
        return Color(
            c.r + (c.r * factor),
            c.g + (c.g * factor),
            c.b + (c.b * factor),
            c.a,
        )

    return Color(
        vary_float(c.r, intensity, rng=rng),
        vary_float(c.g, intensity, rng=rng),
        vary_float(c.b, intensity, rng=rng),
        c.a,
    )


def increment_hue(color: Color, hue_change: float) -> Color:
    """Rotate the hue by ``hue_change`` turns."""
    hsb = rgb_to_hsb(color)
    hue = clamp01(wrap_float(hsb.h + hue_change))
    return hsb_to_rgb(hsb._replace(h=hue))


def darken_color(color: Color, amount: float) -> Color:
    """Lower brightness by ``amount``."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(b=clamp01(hsb.b - amount)))


def brighten_color(color: Color, amount: float) -> Color:
    """Raise brightness by ``amount``."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(b=clamp01(hsb.b + amount)))


def darken_color_normalized(color: Color, amount: float) -> Color:
    """Lower brightness by ``amount`` times the current brightness."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(b=clamp01(hsb.b - amount * hsb.b)))


def brighten_color_normalized(color: Color, amount: float) -> Color:
    """Raise brightness by ``amount`` times the current brightness."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(b=clamp01(hsb.b + amount * hsb.b)))


def saturate_color(color: Color, amount: float) -> Color:
    """Add ``amount`` to saturation. Negative amounts desaturate."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(s=clamp01(hsb.s + amount)))


def saturate_color_normalized(color: Color, amount: float) -> Color:
    """Add ``amount`` times the current saturation to saturation."""
    hsb = rgb_to_hsb(color)
    return hsb_to_rgb(hsb._replace(s=clamp01(hsb.s + amount * hsb.s)))
