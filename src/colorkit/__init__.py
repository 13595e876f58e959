"""colorkit - HSB conversion, palette strategies and color serialization"""

__version__ = "0.1.0"

from .hsb import HUE_STEP, clamp01, hsb_to_rgb, rgb_to_hsb, wrap_float
from .modifiers import (
    brighten_color,
    brighten_color_normalized,
    darken_color,
    darken_color_normalized,
    flip_color,
    increment_hue,
    random_color,
    random_greyscale_color,
    saturate_color,
    saturate_color_normalized,
    vary_color,
    vary_float,
)
from .palettes import (
    can_fetch_color_for_strategy,
    get_analogous_colors,
    get_color,
    get_colors_for_strategy,
    get_complementary_colors,
    get_triad_colors,
)
from .queries import (
    BLACK_LOWER_BOUND,
    BLACK_UPPER_BOUND,
    approximately_equal,
    difference_between,
    get_raw_difference_between,
    is_approximately_greyscale,
    is_black,
    is_greyscale,
    is_strong,
)
from .serialization import (
    color_to_hex,
    color_to_raw_string,
    color_to_string,
    format_color_output,
    hex_to_color,
    parse_color,
    string_to_color,
)
from .types import Color, Color32, ColorStrategy, HSBColor

__all__ = [
    "Color",
    "Color32",
    "HSBColor",
    "ColorStrategy",
    "HUE_STEP",
    "BLACK_UPPER_BOUND",
    "BLACK_LOWER_BOUND",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "wrap_float",
    "clamp01",
    "is_black",
    "is_greyscale",
    "is_approximately_greyscale",
    "approximately_equal",
    "difference_between",
    "get_raw_difference_between",
    "is_strong",
    "random_color",
    "random_greyscale_color",
    "flip_color",
    "vary_color",
    "vary_float",
    "increment_hue",
    "darken_color",
    "brighten_color",
    "darken_color_normalized",
    "brighten_color_normalized",
    "saturate_color",
    "saturate_color_normalized",
    "get_color",
    "get_analogous_colors",
    "get_complementary_colors",
    "get_triad_colors",
    "can_fetch_color_for_strategy",
    "get_colors_for_strategy",
    "color_to_hex",
    "hex_to_color",
    "color_to_string",
    "color_to_raw_string",
    "string_to_color",
    "parse_color",
    "format_color_output",
]
