"""Nearest-colour search and reusable matchers.

Distances are squared Euclidean in RGB space; the square root is only taken
for the reported distance. The scan is linear and strict, so when two
entries are equally close the earlier one wins.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from nearest_colour.core.palette import BASH_COLOURS, build_palette
from nearest_colour.core.parser import parse_colour
from nearest_colour.core.types import ColourMatch, EmptyPalette, Palette

CHUNK_ROWS = 4096  # pixels per distance matrix in nearest_indices


def nearest_colour(query: Any, palette: Palette | None = None) -> ColourMatch | str | None:
    """Find the palette entry nearest to `query` (default palette: BASH_COLOURS).

    Returns a ColourMatch when the winning entry has a name, otherwise the
    entry's source string. A None query returns None.
    """
    if query is None:
        return None
    r, g, b = parse_colour(query)

    if palette is None:
        palette = BASH_COLOURS

    best = None
    min_distance_sq = math.inf
    for spec in palette:
        pr, pg, pb = spec.rgb
        distance_sq = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
        if distance_sq < min_distance_sq:
            min_distance_sq = distance_sq
            best = spec

    if best is None:
        raise EmptyPalette()

    if best.name:
        return ColourMatch(
            name=best.name,
            value=best.source,
            rgb=best.rgb,
            distance=math.sqrt(min_distance_sq),
        )
    return best.source


def nearest_indices(pixels: np.ndarray, palette: Palette | None = None) -> np.ndarray:
    """Index of the nearest palette entry for each row of an (N, 3) array.

    Same tie-break as nearest_colour: argmin returns the first minimum.
    """
    if palette is None:
        palette = BASH_COLOURS
    if not palette:
        raise EmptyPalette()

    # int64 so (0 - 200) does not wrap as it would in uint8
    px = np.asarray(pixels, dtype=np.int64).reshape(-1, 3)
    table = np.array([spec.rgb for spec in palette], dtype=np.int64)

    result = np.empty(len(px), dtype=np.intp)
    for start in range(0, len(px), CHUNK_ROWS):
        chunk = px[start : start + CHUNK_ROWS]
        distance_sq = ((chunk[:, np.newaxis, :] - table[np.newaxis, :, :]) ** 2).sum(axis=2)
        result[start : start + CHUNK_ROWS] = distance_sq.argmin(axis=1)
    return result


class Matcher:
    """A nearest-colour function bound to a fixed palette.

    Usage:

        get_colour = from_palette({'maroon': '#800', 'white': 'fff'})
        get_colour('ffe')          # ColourMatch(name='white', value='fff', ...)

        get_bg = get_colour.from_(['#eee', '#444'])
        get_any = get_colour.or_(['#eee', '#444'])
    """

    def __init__(self, palette: Palette):
        self._palette = tuple(palette)

    @property
    def palette(self) -> Palette:
        return self._palette

    def __call__(self, query: Any) -> ColourMatch | str | None:
        return nearest_colour(query, self._palette)

    def __len__(self) -> int:
        return len(self._palette)

    def __repr__(self) -> str:
        return f'Matcher({len(self._palette)} colours)'

    def from_(self, source: Sequence | Mapping) -> 'Matcher':
        """A new, independent matcher over another palette."""
        return from_palette(source)

    def or_(self, source: Sequence | Mapping) -> 'Matcher':
        """A new matcher over this palette followed by another one."""
        return Matcher(self._palette + build_palette(source))

    def indices(self, pixels: np.ndarray) -> np.ndarray:
        return nearest_indices(pixels, self._palette)


def from_palette(source: Sequence | Mapping) -> Matcher:
    """Build a matcher for `source`. Every entry is parsed now, not on first use."""
    return Matcher(build_palette(source))
