"""Command-line interface for colorkit."""

import json
import sys

import click
import numpy as np

from . import __version__
from .image_generation import create_png_swatch
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
)
from .palettes import (
    can_fetch_color_for_strategy,
    get_analogous_colors,
    get_colors_for_strategy,
    get_complementary_colors,
    get_triad_colors,
)
from .queries import (
    approximately_equal,
    difference_between,
    get_raw_difference_between,
    is_black,
    is_greyscale,
    is_strong,
)
from .serialization import (
    OUTPUT_FORMATS,
    color_to_string,
    format_color_output,
    parse_color,
)
from .types import ColorStrategy

_GENERATORS = {
    ColorStrategy.ANALOGOUS: get_analogous_colors,
    ColorStrategy.COMPLEMENTARY: get_complementary_colors,
    ColorStrategy.TRIAD: get_triad_colors,
}

format_option = click.option(
    "-f",
    "--format",
    "format_type",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default="hex",
    help="Output format for colors (default: hex)",
)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="colorkit")
def main() -> None:
    """Convert colors, derive palettes and vary colors.

    COLOR arguments accept #RRGGBB, rgb(R,G,B), hsb(H,S%,B%) or an R,G,B
    percentage triple such as 50,25,100.
    """


@main.command()
@click.argument("color")
@click.option(
    "-s",
    "--strategy",
    type=click.Choice([s.value for s in ColorStrategy] + ["analagous"], case_sensitive=False),
    default="complementary",
    help="Palette strategy (default: complementary)",
)
@click.option(
    "--desaturate",
    type=float,
    default=0.0,
    help="Amount subtracted from each color's saturation (default: 0)",
)
@click.option(
    "--darken",
    type=float,
    default=0.0,
    help="Amount subtracted from each color's brightness (default: 0)",
)
@format_option
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["list", "json", "png"], case_sensitive=False),
    default="list",
    help="Output format (default: list)",
)
@click.option("-o", "--output", type=str, help="Output file path (required for PNG format)")
@click.option(
    "--tile-size",
    type=click.IntRange(8, 128),
    default=32,
    help="Size of square tiles in pixels for PNG format (default: 32)",
)
@click.option(
    "--tile-margin",
    type=click.IntRange(0, 20),
    default=4,
    help="Margin between tiles in pixels for PNG format (default: 4)",
)
def palette(
    color: str,
    strategy: str,
    desaturate: float,
    darken: float,
    format_type: str,
    output_format: str,
    output: str | None,
    tile_size: int,
    tile_margin: int,
) -> None:
    """Derive a palette from COLOR.

    Examples:

        colorkit palette "#3366CC" -s triad

        colorkit palette "rgb(200, 40, 40)" -s analogous --darken 0.2 -F json

        colorkit palette 80,20,20 -s complementary -F png -o palette.png
    """
    try:
        base = parse_color(color)
        chosen = ColorStrategy.from_name(strategy)
    except ValueError as e:
        _fail(str(e))
        return

    if not can_fetch_color_for_strategy(chosen):
        click.echo(
            f"Strategy '{chosen.value}' has no palette; showing the base color",
            err=True,
        )

    if chosen in _GENERATORS:
        colors = _GENERATORS[chosen](base, desaturate, darken)
    else:
        colors = get_colors_for_strategy(chosen, base)

    formatted = format_color_output(colors, format_type.lower())

    if output_format == "json":
        click.echo(json.dumps(formatted, indent=2))
    elif output_format == "png":
        if not output:
            _fail("PNG output requires -o/--output filename")
            return

        try:
            create_png_swatch(colors, output, tile_size=tile_size, tile_margin=tile_margin)
        except (OSError, ValueError) as e:
            _fail(f"could not create PNG: {e}")
    else:
        for line in formatted:
            click.echo(line)


@main.command()
@click.argument("color")
def inspect(color: str) -> None:
    """Show encodings and classification of COLOR."""
    try:
        c = parse_color(color)
    except ValueError as e:
        _fail(str(e))
        return

    hex_str, hsb_str = (format_color_output([c], fmt)[0] for fmt in ("hex", "hsb"))
    click.echo(f"hex:        {hex_str}")
    click.echo(f"string:     {color_to_string(c)}")
    click.echo(f"hsb:        {hsb_str}")
    click.echo(f"black:      {_yes_no(is_black(c))}")
    click.echo(f"greyscale:  {_yes_no(is_greyscale(c))}")
    click.echo(f"strong:     {_yes_no(is_strong(c))}")


@main.command()
@click.argument("color")
@click.option("--hue", type=float, default=0.0, help="Hue rotation in turns, e.g. 0.5")
@click.option("--brighten", type=float, default=0.0, help="Brightness to add")
@click.option("--darken", type=float, default=0.0, help="Brightness to remove")
@click.option("--saturate", type=float, default=0.0, help="Saturation to add (negative to remove)")
@click.option(
    "--normalized",
    is_flag=True,
    help="Scale brighten/darken/saturate by the current brightness or saturation",
)
@click.option("--invert", is_flag=True, help="Invert the result")
@format_option
def adjust(
    color: str,
    hue: float,
    brighten: float,
    darken: float,
    saturate: float,
    normalized: bool,
    invert: bool,
    format_type: str,
) -> None:
    """Apply modifiers to COLOR: hue, brighten, darken, saturate, invert."""
    try:
        c = parse_color(color)
    except ValueError as e:
        _fail(str(e))
        return

    if hue:
        c = increment_hue(c, hue)
    if brighten:
        c = brighten_color_normalized(c, brighten) if normalized else brighten_color(c, brighten)
    if darken:
        c = darken_color_normalized(c, darken) if normalized else darken_color(c, darken)
    if saturate:
        c = saturate_color_normalized(c, saturate) if normalized else saturate_color(c, saturate)
    if invert:
        c = flip_color(c)

    click.echo(format_color_output([c], format_type.lower())[0])


@main.command()
@click.option(
    "-n",
    "--number",
    type=click.IntRange(1, 256),
    default=1,
    help="Number of colors to generate (default: 1)",
)
@click.option("--greyscale", is_flag=True, help="Generate greys between 0.25 and 0.75")
@click.option(
    "--restrict-decimals",
    is_flag=True,
    help="Round channels to 2 decimal places (also COLORKIT_RESTRICT_DECIMALS=1)",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@format_option
def random(
    number: int,
    greyscale: bool,
    restrict_decimals: bool,
    seed: int | None,
    format_type: str,
) -> None:
    """Generate random colors."""
    rng = np.random.default_rng(seed) if seed is not None else None

    for _ in range(number):
        if greyscale:
            c = random_greyscale_color(rng=rng)
        else:
            c = random_color(restrict_decimals or None, rng=rng)
        click.echo(format_color_output([c], format_type.lower())[0])


@main.command()
@click.argument("color_a")
@click.argument("color_b")
@click.option(
    "-t",
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=0.05,
    help="Per-channel threshold for approximate equality (default: 0.05)",
)
def diff(color_a: str, color_b: str, threshold: float) -> None:
    """Compare COLOR_A and COLOR_B."""
    try:
        a = parse_color(color_a)
        b = parse_color(color_b)
    except ValueError as e:
        _fail(str(e))
        return

    click.echo(f"difference:      {difference_between(a, b):.4f}")
    click.echo(f"raw difference:  {get_raw_difference_between(a, b):.4f}")
    click.echo(f"approx. equal:   {_yes_no(approximately_equal(a, b, threshold))}")


if __name__ == "__main__":
    main()
