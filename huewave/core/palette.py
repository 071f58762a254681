"""Nearest named swatch lookup against a generated palette.

Works in 8-bit sRGB, the same values the RGBA table emits, so a colour
copied out of the table matches its own entry at distance 0.
"""

import math

from huewave.core import color_model
from huewave.core.types import Palette


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse '#rrggbb', 'rrggbb' or '#rgb' into 0-255 ints."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f'Not a hex colour: {hex_str!r}')
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        raise ValueError(f'Not a hex colour: {hex_str!r}') from None


def rgba8888_to_rgb(packed: int) -> tuple[int, int, int]:
    return (packed >> 24 & 0xFF, packed >> 16 & 0xFF, packed >> 8 & 0xFF)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance between two 0-255 RGB triples."""
    dr, dg, db = int(a[0]) - int(b[0]), int(a[1]) - int(b[1]), int(a[2]) - int(b[2])
    return math.sqrt(dr * dr + dg * dg + db * db)


def nearest_colour(
    palette: Palette,
    rgb: tuple[int, int, int],
    threshold: float | None = None,
) -> tuple[str | None, float]:
    """Closest opaque entry by 8-bit RGB distance.

    Returns (name, distance), or (None, distance) when the best match is
    farther than threshold.
    """
    best_name: str | None = None
    best_dist = math.inf
    for entry in palette:
        packed = color_model.to_rgba8888(entry.color)
        if packed & 0xFF == 0:
            continue
        dist = rgb_distance(rgb, rgba8888_to_rgb(packed))
        if dist < best_dist:
            best_name, best_dist = entry.name, dist
    if threshold is not None and best_dist > threshold:
        return None, best_dist
    return best_name, best_dist
