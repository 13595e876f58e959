"""Palette generation from a base color and a named strategy.

Multi-color strategies rotate the base hue by whole intervals (1/12 of the
hue circle) taken from a fixed table, optionally desaturating and darkening
each result. The output keeps the table order.
"""

from .config import HUE_STEP
from .hsb import clamp01, hsb_to_rgb, rgb_to_hsb, wrap_float
from .modifiers import flip_color
from .types import Color, ColorStrategy, HSBColor, as_color

__all__ = [
    "STRATEGY_INTERVALS",
    "get_intervals",
    "get_color",
    "get_analogous_colors",
    "get_complementary_colors",
    "get_triad_colors",
    "can_fetch_color_for_strategy",
    "get_colors_for_strategy",
]

STRATEGY_INTERVALS: dict[ColorStrategy, tuple[int, ...]] = {
    ColorStrategy.TRIAD: (0, -4, 4),
    ColorStrategy.COMPLEMENTARY: (6, 5, 7),
    ColorStrategy.ANALOGOUS: (0, -1, 1),
}

# Declared strategies with no color set behind them.
_UNFETCHABLE = frozenset(
    {ColorStrategy.BRIGHTNESS, ColorStrategy.SATURATION, ColorStrategy.HUE}
)


def get_intervals(strategy: ColorStrategy) -> tuple[int, ...]:
    """Hue intervals used by ``strategy``; empty for single-color strategies."""
    return STRATEGY_INTERVALS.get(strategy, ())


def get_color(
    base: HSBColor, interval_offset: int, desaturate: float, darken: float
) -> Color:
    """Derive one color from an HSB base.

    Args:
        base: Base color in HSB.
        interval_offset: Number of 1/12 turns to rotate the hue by.
        desaturate: Amount subtracted from saturation. Negative values
            saturate instead.
        darken: Amount subtracted from brightness. Negative values brighten.

    Returns:
        Color: The derived color, saturation and brightness clamped to [0, 1].
    """
    hue = wrap_float(base.h + interval_offset * HUE_STEP)
    return hsb_to_rgb(
        base._replace(
            h=hue,
            s=clamp01(base.s - desaturate),
            b=clamp01(base.b - darken),
        )
    )


def _colors_for_intervals(
    color: Color, intervals: tuple[int, ...], desaturate: float, darken: float
) -> list[Color]:
    hsb = rgb_to_hsb(color)
    return [get_color(hsb, offset, desaturate, darken) for offset in intervals]


def get_analogous_colors(
    color: Color, desaturate: float = 0.0, darken: float = 0.0
) -> list[Color]:
    """The base hue and its two 30 degree neighbours (0, -1, +1 intervals)."""
    return _colors_for_intervals(
        color, STRATEGY_INTERVALS[ColorStrategy.ANALOGOUS], desaturate, darken
    )


def get_complementary_colors(
    color: Color, desaturate: float = 0.0, darken: float = 0.0
) -> list[Color]:
    """The opposite hue followed by its two neighbours (6, 5, 7 intervals)."""
    return _colors_for_intervals(
        color, STRATEGY_INTERVALS[ColorStrategy.COMPLEMENTARY], desaturate, darken
    )


def get_triad_colors(
    color: Color, desaturate: float = 0.0, darken: float = 0.0
) -> list[Color]:
    """The base hue and the hues 120 degrees either side (0, -4, +4 intervals)."""
    return _colors_for_intervals(
        color, STRATEGY_INTERVALS[ColorStrategy.TRIAD], desaturate, darken
    )


def can_fetch_color_for_strategy(strategy: ColorStrategy) -> bool:
    """False for BRIGHTNESS, SATURATION and HUE; True otherwise, NONE included."""
    return strategy not in _UNFETCHABLE


def get_colors_for_strategy(strategy: ColorStrategy, base_color: Color) -> list[Color]:
    """Colors for ``strategy`` derived from ``base_color``.

    ANALOGOUS, COMPLEMENTARY and TRIAD return three colors with no
    desaturation or darkening. INVERTED returns the flipped base color. Every
    other strategy returns the base color unchanged, including the ones
    :func:`can_fetch_color_for_strategy` rejects; callers should check that
    first.
    """
    base_color = as_color(base_color)

    if strategy is ColorStrategy.ANALOGOUS:
        return get_analogous_colors(base_color)
    if strategy is ColorStrategy.COMPLEMENTARY:
        return get_complementary_colors(base_color)
    if strategy is ColorStrategy.INVERTED:
        return [flip_color(base_color)]
    if strategy is ColorStrategy.TRIAD:
        return get_triad_colors(base_color)

    return [base_color]
