"""Find the nearest colour in a palette.

    >>> from nearest_colour import nearest_colour, from_palette
    >>> nearest_colour('#f11')
    '#ff2500'
    >>> get_colour = from_palette({'maroon': '#800', 'white': 'fff'})
    >>> get_colour('ffe').name
    'white'
"""

from nearest_colour.core.matcher import Matcher, from_palette, nearest_colour, nearest_indices
from nearest_colour.core.palette import (
    BASH_COLOURS,
    BASH_MAP,
    STANDARD_COLOURS,
    build_palette,
    make_spec,
    parse_palette_arg,
)
from nearest_colour.core.parser import classify, parse_colour, rgb_to_hex
from nearest_colour.core.types import (
    RGB,
    ColourInput,
    ColourMatch,
    ColourSpec,
    EmptyPalette,
    InputKind,
    InvalidColourFormat,
    Palette,
)

VERSION = '0.4.4'

__all__ = [
    'BASH_COLOURS',
    'BASH_MAP',
    'RGB',
    'STANDARD_COLOURS',
    'VERSION',
    'ColourInput',
    'ColourMatch',
    'ColourSpec',
    'EmptyPalette',
    'InputKind',
    'InvalidColourFormat',
    'Matcher',
    'Palette',
    'build_palette',
    'classify',
    'from_palette',
    'make_spec',
    'nearest_colour',
    'nearest_indices',
    'parse_colour',
    'parse_palette_arg',
    'rgb_to_hex',
]
