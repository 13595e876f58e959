"""Conversion between RGB colors and hue/saturation/brightness.

Hue, saturation and brightness are all expressed in [0, 1]. Hue is circular:
0 and 1 denote the same angle, and edits that push it out of range are
brought back with :func:`wrap_float`.

The six-sector transforms themselves are delegated to colour-science, which
operates on numpy arrays; the functions here clamp their inputs, handle the
achromatic case explicitly and hand back plain Python floats.
"""

import warnings

import numpy as np

# Silence colour-science import-time notices about optional SciPy features.
with warnings.catch_warnings():
    warnings.simplefilter("ignore")
    import colour

from .config import HUE_STEP
from .types import Color, HSBColor, as_color

__all__ = ["rgb_to_hsb", "hsb_to_rgb", "wrap_float", "clamp01", "HUE_STEP"]


def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]."""
    return min(max(float(value), 0.0), 1.0)


def wrap_float(value: float) -> float:
    """Bring a hue back into range after an additive change.

    Only a single wraparound is corrected: ``-0.1`` becomes ``0.9`` and
    ``1.1`` becomes ``0.1``, but ``2.5`` becomes ``1.5``.
    """
    if value < 0.0:
        value = 1.0 + value

    if value > 1.0:
        value = value - 1.0

    return value


def rgb_to_hsb(color: Color) -> HSBColor:
    """Convert an RGB color to HSB.

    Channels are clamped into [0, 1] first. Brightness is the largest channel
    and saturation is ``(max - min) / max``. For greys (all channels equal)
    saturation is 0 and hue is reported as 0.

    Args:
        color: Color to convert. Alpha is carried over unchanged.

    Returns:
        HSBColor with hue in [0, 1).
    """
    color = as_color(color)
    rgb = np.clip(np.array(color.rgb, dtype=float), 0.0, 1.0)
    alpha = color.a

    maximum = float(np.max(rgb))
    minimum = float(np.min(rgb))
    if maximum == minimum:
        return HSBColor(0.0, 0.0, maximum, alpha)

    hsv = colour.models.rgb.cylindrical.RGB_to_HSV(rgb)
    hue = float(hsv[0]) % 1.0
    return HSBColor(hue, float(hsv[1]), float(hsv[2]), alpha)


def hsb_to_rgb(hsb: HSBColor) -> Color:
    """Convert an HSB color back to RGB.

    The hue sector is ``floor(h * 6) mod 6``; hues outside [0, 1) are reduced
    modulo 1 before the lookup. Saturation and brightness are clamped.
    """
    hue = float(hsb.h) % 1.0
    hsv = np.array([hue, clamp01(hsb.s), clamp01(hsb.b)])
    rgb = colour.models.rgb.cylindrical.HSV_to_RGB(hsv)
    return Color(float(rgb[0]), float(rgb[1]), float(rgb[2]), hsb.a)
