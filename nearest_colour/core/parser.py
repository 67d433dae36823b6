"""Colour parser: structured RGB, standard names, hex strings and rgb() strings.

Every input goes through a single classification step (`classify`) which
decides its form, then `parse_colour` converts it to an RGB:

  RGB(3, 22, 111) / {'r': 3, 'g': 22, 'b': 111}  -> RGB(3, 22, 111)
  'aqua'                                          -> RGB(0, 255, 255)
  '#f00', 'FF0000', '04fbc8'                       -> hex, 3 or 6 digits
  'rgb(3, 10, 100)', 'rgb(50%, 0%, 50%)'           -> functional

Structured values are passed through unchanged; nothing is range-checked.
"""

import re
from collections.abc import Mapping
from numbers import Real
from typing import Any

from nearest_colour.core.tables import STANDARD_COLOURS
from nearest_colour.core.types import RGB, ColourInput, InputKind, InvalidColourFormat

_HEX_RE = re.compile(r'#?((?:[0-9a-f]{3}){1,2})', re.IGNORECASE)
_RGB_RE = re.compile(
    r'rgb\(\s*([0-9]{1,3}%?)\s*,\s*([0-9]{1,3}%?)\s*,\s*([0-9]{1,3}%?)\s*\)',
    re.IGNORECASE,
)


def _as_rgb(value: Any) -> RGB | None:
    """Return value as an RGB if it is structured colour data, else None."""
    if isinstance(value, RGB):
        return value
    if isinstance(value, str):
        return None
    if isinstance(value, Mapping):
        if all(isinstance(value.get(k), Real) for k in 'rgb'):
            return RGB(value['r'], value['g'], value['b'])
        return None
    if isinstance(value, (tuple, list)):
        if len(value) == 3 and all(isinstance(c, Real) for c in value):
            return RGB(*value)
        return None
    if all(isinstance(getattr(value, k, None), Real) for k in 'rgb'):
        return RGB(value.r, value.g, value.b)
    return None


def classify(value: Any) -> ColourInput:
    """Decide which colour form `value` is. Raises InvalidColourFormat if none."""
    rgb = _as_rgb(value)
    if rgb is not None:
        return ColourInput(InputKind.RGB, rgb)

    if not isinstance(value, str):
        raise InvalidColourFormat(value)

    # Exact, case-sensitive match against the table
    if value in STANDARD_COLOURS:
        return ColourInput(InputKind.NAMED, value)

    m = _HEX_RE.fullmatch(value)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            parts = tuple(d * 2 for d in digits)
        else:
            parts = (digits[0:2], digits[2:4], digits[4:6])
        return ColourInput(InputKind.HEX, value, parts)

    m = _RGB_RE.fullmatch(value)
    if m:
        return ColourInput(InputKind.FUNCTIONAL, value, m.groups())

    raise InvalidColourFormat(value)


def _component(text: str) -> int:
    """Parse one rgb() component: '100' -> 100, '50%' -> 128."""
    if text.endswith('%'):
        # round(n * 255 / 100), halves rounded up
        return (int(text[:-1]) * 510 + 100) // 200
    return int(text)


def parse_colour(value: Any) -> RGB:
    """Parse a colour value into an RGB."""
    colour = classify(value)
    if colour.kind is InputKind.RGB:
        return colour.value
    if colour.kind is InputKind.NAMED:
        return parse_colour(STANDARD_COLOURS[colour.value])
    if colour.kind is InputKind.HEX:
        return RGB(*(int(p, 16) for p in colour.parts))
    return RGB(*(_component(p) for p in colour.parts))


def rgb_to_hex(rgb: Any) -> str:
    """Format an RGB (or any parseable colour) as '#rrggbb', lowercase, zero-padded."""
    r, g, b = parse_colour(rgb)
    return f'#{int(r):02x}{int(g):02x}{int(b):02x}'
