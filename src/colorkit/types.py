"""Color value types shared across colorkit."""

import enum
from typing import NamedTuple

__all__ = ["Color", "Color32", "HSBColor", "ColorStrategy", "as_color"]


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class Color(NamedTuple):
    """RGBA color with floating point channels, nominally in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_color32(self) -> "Color32":
        """Pack into 8-bit channels (clamped, rounded to the nearest byte)."""
        return Color32(
            int(round(_clamp01(self.r) * 255)),
            int(round(_clamp01(self.g) * 255)),
            int(round(_clamp01(self.b) * 255)),
            int(round(_clamp01(self.a) * 255)),
        )

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


class Color32(NamedTuple):
    """RGBA color with 8-bit integer channels in [0, 255]."""

    r: int
    g: int
    b: int
    a: int = 255

    def to_color(self) -> Color:
        return Color(self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)


class HSBColor(NamedTuple):
    """Hue, saturation and brightness, each in [0, 1]. Hue is circular."""

    h: float
    s: float
    b: float
    a: float = 1.0


class ColorStrategy(enum.Enum):
    """Named policies for deriving a set of related colors from a base color."""

    NONE = "none"
    COMPLEMENTARY = "complementary"
    TRIAD = "triad"
    ANALOGOUS = "analogous"
    INVERTED = "inverted"
    BRIGHTNESS = "brightness"
    SATURATION = "saturation"
    HUE = "hue"

    @classmethod
    def from_name(cls, name: str) -> "ColorStrategy":
        """Look up a strategy by case-insensitive name.

        Raises:
            ValueError: If no strategy has that name.
        """
        key = name.strip().lower()
        if key == "analagous":
            key = "analogous"
        for strategy in cls:
            if strategy.value == key:
                return strategy
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown color strategy: '{name}'. Choose one of: {choices}")


def as_color(value: Color | tuple[float, ...] | list[float]) -> Color:
    """Coerce a 3- or 4-item sequence of floats into a :class:`Color`.

    Raises:
        ValueError: If the sequence does not have 3 or 4 items.
    """
    if isinstance(value, Color):
        return value
    channels = [float(c) for c in value]
    if len(channels) not in (3, 4):
        raise ValueError(f"A color needs 3 or 4 channels, got {len(channels)}")
    return Color(*channels)
