"""Closest-pair check: how distinguishable is the palette?

Compares every unordered pair of entries from index 1 on (transparent is
skipped) by Euclidean distance between raw sRGB channels in [0, 1]. The
metric is a cheap proxy: no gamma or perceptual weighting is applied, so
two dark swatches can score closer than they look.

Ties go to the first pair in (i, j) index order.
"""

import numpy as np

from huewave.core import color_model
from huewave.core.types import Palette, WorstPair


def worst_pair(palette: Palette, start: int = 1) -> WorstPair:
    """Return the closest pair of entries and their (non-squared) distance."""
    colors = palette.colors[start:]
    if len(colors) < 2:
        raise ValueError(f'Need at least two colours from index {start}, got {len(colors)}')

    rgb = np.array([color_model.rgb(c) for c in colors], dtype=np.float64)
    diffs = rgb[:, None, :] - rgb[None, :, :]
    dist_sq = np.sum(diffs * diffs, axis=-1)

    # only pairs with i < j
    dist_sq[np.tril_indices(len(colors))] = np.inf

    # argmin returns the first minimum in row-major (i, j) order
    flat = int(np.argmin(dist_sq))
    i, j = divmod(flat, len(colors))
    return WorstPair(index_a=i + start, index_b=j + start, distance=float(np.sqrt(dist_sq[i, j])))
