"""Shared types for nearest-colour: RGB, ColourSpec, ColourMatch, ColourInput, Command, errors."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """An RGB triple. Components are nominally 0-255 but never clamped."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class ColourSpec:
    """One palette entry."""

    source: str  # colour string as given, or '#rrggbb' for structured input
    rgb: RGB
    name: str | None = None


@dataclass(frozen=True)
class ColourMatch:
    """Result of matching against a palette entry that has a name."""

    name: str
    value: str  # the matched entry's source
    rgb: RGB
    distance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'value': self.value,
            'rgb': {'r': self.rgb.r, 'g': self.rgb.g, 'b': self.rgb.b},
            'distance': self.distance,
        }


Palette = tuple[ColourSpec, ...]


class InputKind(enum.Enum):
    RGB = 'rgb'
    NAMED = 'named'
    HEX = 'hex'
    FUNCTIONAL = 'functional'


@dataclass(frozen=True)
class ColourInput:
    """A colour value after classification, before conversion to RGB.

    `value` is an RGB for InputKind.RGB and the original string otherwise.
    `parts` holds the three captured components for HEX and FUNCTIONAL.
    """

    kind: InputKind
    value: Any
    parts: tuple[str, ...] = ()


class InvalidColourFormat(ValueError):
    """Raised when a value is not a recognised colour."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'"{value}" is not a valid colour')


class EmptyPalette(ValueError):
    """Raised when matching against a palette with no entries."""

    def __init__(self) -> None:
        super().__init__('cannot match against an empty palette')


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='match', help='Match colours against a palette')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('colours', nargs='+')

        @command.run
        def run(args):
            return Report(command='match')
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding command-specific arguments."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any) -> Any:
        """Execute the command's run function and return its report."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(args)
