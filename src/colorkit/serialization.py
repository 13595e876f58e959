"""Text encodings of colors, and parsing/formatting for the command line.

Two storage encodings are supported:

- hex: ``RRGGBB``, two uppercase hex digits per channel, alpha dropped.
- decimal triple: ``R,G,B`` with each channel as an integer percentage.

The two parsers deliberately differ on bad input: :func:`hex_to_color`
raises ``ValueError``, while :func:`string_to_color` warns and returns black.
"""

import math
import re
import warnings
from decimal import Decimal

from .hsb import hsb_to_rgb, rgb_to_hsb
from .types import Color, Color32, HSBColor, as_color

__all__ = [
    "color_to_hex",
    "hex_to_color",
    "color_to_string",
    "color_to_raw_string",
    "string_to_color",
    "parse_hex_color",
    "parse_rgb_color",
    "parse_hsb_color",
    "parse_decimal_triple",
    "parse_color",
    "format_color_output",
    "OUTPUT_FORMATS",
]

OUTPUT_FORMATS = ("hex", "rgb", "hsb", "string", "raw")

_HEX_PREFIX = re.compile(r"([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_BLACK = Color(0.0, 0.0, 0.0)


def _as_color32(color: Color32 | Color | tuple[float, ...]) -> Color32:
    if isinstance(color, Color32):
        packed = color
    elif not isinstance(color, Color) and all(isinstance(c, int) for c in color):
        packed = Color32(*color)
    else:
        return as_color(color).to_color32()

    if not all(0 <= v <= 255 for v in packed[:3]):
        raise ValueError(
            f"Color channels must be in 0-255, got {tuple(packed[:3])}"
        )
    return packed


def color_to_hex(color: Color32 | Color) -> str:
    """Encode a color as ``RRGGBB``.

    Accepts a :class:`Color32` (or a tuple of ints), or a float
    :class:`Color`, which is packed to 8 bits first. Alpha is dropped.

    Raises:
        ValueError: If an 8-bit red, green or blue channel is outside 0-255.

    Examples:
        >>> color_to_hex(Color32(255, 0, 128, 255))
        'FF0080'
    """
    c = _as_color32(color)
    return f"{c.r:02X}{c.g:02X}{c.b:02X}"


def hex_to_color(hex_str: str) -> Color:
    """Decode the first six hex digits of ``hex_str`` as red, green, blue.

    Anything after the sixth character is ignored. The returned color is
    fully opaque.

    Raises:
        ValueError: If fewer than six characters are given or any of the
            first six is not a hex digit.
    """
    match = _HEX_PREFIX.match(hex_str)
    if not match:
        raise ValueError(
            f"Invalid hex color: '{hex_str}'. Expected six hex digits (RRGGBB)"
        )
    r, g, b = (int(group, 16) for group in match.groups())
    return Color32(r, g, b, 255).to_color()


def _percent(value: float) -> int:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite channel: {value}")
    # Truncate the shortest decimal form so that 0.29 encodes as 29.
    return int(Decimal(repr(value)) * 100)


def color_to_string(color: Color) -> str:
    """Encode as ``R,G,B`` percentages, rounding channels to 2 places first.

    Raises:
        ValueError: If a channel is NaN or infinite.
    """
    c = as_color(color)
    return ",".join(str(_percent(round(v, 2))) for v in c.rgb)


def color_to_raw_string(color: Color) -> str:
    """Encode as ``R,G,B`` percentages, truncating without rounding.

    Raises:
        ValueError: If a channel is NaN or infinite.
    """
    c = as_color(color)
    return ",".join(str(_percent(v)) for v in c.rgb)


def string_to_color(text: str) -> Color:
    """Decode an ``R,G,B`` percentage string.

    Each field is divided by 100; values outside [0, 100] are kept as they
    are. A string without exactly three ASCII integer fields that fit in
    32 bits decodes to black and a ``UserWarning`` is issued.
    """
    fields = text.split(",")

    if len(fields) != 3:
        warnings.warn(
            f"Expected 3 comma-separated values, got {len(fields)} in '{text}'",
            stacklevel=2,
        )
        return _BLACK

    for field in fields:
        if not _INTEGER.fullmatch(field):
            warnings.warn(f"Not an integer: '{field}' in '{text}'", stacklevel=2)
            return _BLACK

    values = [int(field) for field in fields]
    for field, value in zip(fields, values):
        if not _INT32_MIN <= value <= _INT32_MAX:
            warnings.warn(
                f"Out of 32-bit integer range: '{field}' in '{text}'", stacklevel=2
            )
            return _BLACK

    r, g, b = (value / 100.0 for value in values)
    return Color(r, g, b)


def parse_hex_color(color_str: str) -> Color | None:
    """Parse hexadecimal color format #RRGGBB (the ``#`` is optional)."""
    hex_str = color_str.strip()
    if hex_str.startswith("#"):
        hex_str = hex_str[1:]

    if len(hex_str) != 6:
        return None

    try:
        return hex_to_color(hex_str)
    except ValueError:
        return None


def parse_rgb_color(color_str: str) -> Color | None:
    """Parse RGB color format rgb(R, G, B) with 0-255 channels."""
    pattern = r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)"
    match = re.fullmatch(pattern, color_str.strip(), re.IGNORECASE | re.ASCII)

    if not match:
        return None

    r, g, b = (int(group) for group in match.groups())
    if not all(0 <= val <= 255 for val in (r, g, b)):
        return None

    return Color32(r, g, b).to_color()


def parse_hsb_color(color_str: str) -> Color | None:
    """Parse HSB color format hsb(H, S%, B%); ``hsv`` is accepted as well."""
    pattern = (
        r"hs[bv]\s*\(\s*(\d+(?:\.\d+)?)\s*,\s*"
        r"(\d+(?:\.\d+)?)\s*%\s*,\s*(\d+(?:\.\d+)?)\s*%\s*\)"
    )
    match = re.fullmatch(pattern, color_str.strip(), re.IGNORECASE | re.ASCII)

    if not match:
        return None

    h = float(match.group(1))
    s = float(match.group(2))
    b = float(match.group(3))

    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= b <= 100):
        return None

    return hsb_to_rgb(HSBColor(h / 360, s / 100, b / 100))


def parse_decimal_triple(color_str: str) -> Color | None:
    """Parse the ``R,G,B`` percentage encoding, strictly."""
    color_str = color_str.strip()
    if not re.fullmatch(r"\d+\s*,\s*\d+\s*,\s*\d+", color_str, re.ASCII):
        return None
    return string_to_color(color_str)


def parse_color(color_str: str) -> Color:
    """Parse color string in various formats.

    Raises:
        ValueError: If no supported format matches.
    """
    color_str = color_str.strip()

    parsers = [parse_hex_color, parse_rgb_color, parse_hsb_color, parse_decimal_triple]

    for parser in parsers:
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RRGGBB, rgb(R,G,B), hsb(H,S%,B%), R,G,B (percent)"
    )


def format_color_output(colors: list[Color], format_type: str = "hex") -> list[str]:
    """Format colors for output."""
    formatted: list[str] = []

    for color in colors:
        c = as_color(color)

        if format_type == "hex":
            formatted.append(f"#{color_to_hex(c)}")
        elif format_type == "rgb":
            packed = c.to_color32()
            formatted.append(f"rgb({packed.r}, {packed.g}, {packed.b})")
        elif format_type == "hsb":
            hsb = rgb_to_hsb(c)
            formatted.append(
                f"hsb({round(hsb.h * 360) % 360}, "
                f"{round(hsb.s * 100)}%, {round(hsb.b * 100)}%)"
            )
        elif format_type == "string":
            formatted.append(color_to_string(c))
        else:  # raw
            formatted.append(f"({c.r:.4f}, {c.g:.4f}, {c.b:.4f})")

    return formatted
