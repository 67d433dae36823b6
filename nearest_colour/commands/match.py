"""Match colour strings to the nearest palette colour.

Each COLOUR may be hex ('#f11', 'ffe'), functional ('rgb(50%, 0%, 50%)')
or a standard name ('aqua'). Named palette entries print with their name
and distance; unnamed entries print just the hex value.

--or appends another palette after the main one. On a tie the earlier
entry wins, so the main palette takes precedence.

Example:
    uv run nearest-colour match '#f11' 'rgb(200, 50, 50)'
    uv run nearest-colour match ffe --palette 'maroon=#800,white=fff'
    uv run nearest-colour match '#888' -p 'maroon=#800' --or '#eee,#444'
"""

from nearest_colour.core.env import resolve_matcher
from nearest_colour.core.report import Report
from nearest_colour.core.types import Command

command = Command(
    name='match',
    help='Match colour strings to the nearest palette colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('colours', nargs='+', metavar='COLOUR', help='Colour(s) to match')
    parser.add_argument(
        '-o',
        '--or',
        dest='alternates',
        action='append',
        default=[],
        metavar='PALETTE',
        help='Append another palette (repeatable)',
    )


@command.run
def run(args) -> Report:
    matcher = resolve_matcher(args.palette, args.alternates)
    report = Report(command='match', palette_size=len(matcher))
    for colour in args.colours:
        report.add_match(colour, matcher(colour))
    return report
