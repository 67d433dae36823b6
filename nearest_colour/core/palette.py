"""Palette building and the built-in palettes.

A palette is an ordered tuple of ColourSpec entries. It can be built from:

  ['#eee', '#444', RGB(1, 2, 3)]            -> unnamed entries
  {'maroon': '#800', 'white': 'fff'}        -> named entries, in dict order

Existing ColourSpec entries inside a list are kept as they are, which is how
palettes are concatenated without losing their names.
"""

import re
from collections.abc import Mapping, Sequence
from numbers import Integral
from types import MappingProxyType
from typing import Any

from nearest_colour.core.parser import classify, parse_colour, rgb_to_hex
from nearest_colour.core.tables import BASH_HEX, STANDARD_COLOURS
from nearest_colour.core.types import RGB, ColourSpec, InputKind, InvalidColourFormat, Palette

__all__ = [
    'BASH_COLOURS',
    'BASH_MAP',
    'STANDARD_COLOURS',
    'build_palette',
    'make_spec',
    'parse_palette_arg',
]

# Split on commas that are not inside rgb(...)
_ITEM_SPLIT_RE = re.compile(r',(?![^()]*\))')


def make_spec(colour: Any, name: str | None = None) -> ColourSpec:
    """Create one palette entry from a colour string or structured RGB.

    Structured entries must be integers in 0-255 so that the '#rrggbb'
    source parses back to the same RGB.
    """
    if isinstance(colour, ColourSpec):
        return colour
    parsed = classify(colour)
    if parsed.kind is InputKind.RGB:
        if not all(isinstance(c, Integral) and not isinstance(c, bool) and 0 <= c <= 255 for c in parsed.value):
            raise InvalidColourFormat(colour)
        rgb = RGB(*(int(c) for c in parsed.value))
        return ColourSpec(source=rgb_to_hex(rgb), rgb=rgb, name=name or None)
    return ColourSpec(source=colour, rgb=parse_colour(colour), name=name or None)


def build_palette(source: Sequence | Mapping) -> Palette:
    """Build a palette from a list of colours or a mapping of name -> colour."""
    if isinstance(source, Mapping):
        return tuple(make_spec(colour, name) for name, colour in source.items())
    if isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
        return tuple(make_spec(colour) for colour in source)
    raise TypeError(f'Palette must be a sequence or mapping of colours, not {type(source).__name__}')


def parse_palette_arg(text: str) -> list:
    """Parse the compact palette form 'maroon=#800,white=fff,#eee'.

    Items with '=' become named entries, the rest unnamed. Returns a list
    suitable for build_palette.
    """
    items = [item.strip() for item in _ITEM_SPLIT_RE.split(text) if item.strip()]
    if not items:
        raise ValueError('Palette is empty')
    result: list = []
    for item in items:
        if '=' in item:
            name, _, colour = item.partition('=')
            result.append(make_spec(colour.strip(), name.strip()))
        else:
            result.append(item)
    return result


BASH_COLOURS: Palette = build_palette(BASH_HEX)

# Later duplicates win, e.g. '#000000' -> 16
BASH_MAP = MappingProxyType({spec.source: i for i, spec in enumerate(BASH_COLOURS)})
