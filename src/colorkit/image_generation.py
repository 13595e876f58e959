"""PNG swatch export for colorkit palettes."""

import math

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .types import Color, as_color

__all__ = ["create_png_swatch"]


def create_png_swatch(
    colors: list[Color],
    output_file: str,
    columns: int | None = None,
    tile_size: int = 32,
    tile_margin: int = 4,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
) -> None:
    """Write ``colors`` as a grid of square tiles to a PNG file.

    Args:
        colors: Colors to draw, left to right then top to bottom.
        output_file: Destination path.
        columns: Tiles per row; defaults to all colors on one row.
        tile_size: Tile edge length in pixels.
        tile_margin: Gap around tiles in pixels.
        background_color: RGB fill behind the tiles.

    Raises:
        ValueError: If ``colors`` is empty.
    """
    n_colors = len(colors)
    if n_colors == 0:
        raise ValueError("No colors provided")

    if columns is None:
        columns = n_colors
    rows = math.ceil(n_colors / columns)

    w = (columns * (tile_size + tile_margin)) + tile_margin
    h = (rows * (tile_size + tile_margin)) + tile_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor(background_color)
    ax.set_facecolor(background_color)

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    for i, color in enumerate(colors):
        row = i // columns
        col = i % columns

        # Flip y so the first row is drawn at the top
        x = tile_margin + col * (tile_size + tile_margin)
        y = h - (row + 1) * (tile_size + tile_margin)

        # matplotlib rejects channels outside [0, 1]
        rgb = tuple(min(max(c, 0.0), 1.0) for c in as_color(color).rgb)
        rect = patches.Rectangle(
            (x, y), tile_size, tile_size, linewidth=0, facecolor=rgb
        )
        ax.add_patch(rect)

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG swatch saved to: {output_file}")
