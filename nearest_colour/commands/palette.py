"""List the entries of the active palette with index, hex value and name.

Without --palette this is NEAREST_COLOUR_PALETTE if set, else the built-in
256-colour terminal palette (index = xterm colour number).

Example:
    uv run nearest-colour palette
    uv run nearest-colour palette -p 'maroon=#800,white=fff' --json
"""

from nearest_colour.core.env import resolve_matcher
from nearest_colour.core.report import Report
from nearest_colour.core.types import Command

command = Command(
    name='palette',
    help='List the active palette with index, hex value and name.',
)


@command.run
def run(args) -> Report:
    matcher = resolve_matcher(args.palette)
    report = Report(command='palette', palette_size=len(matcher))
    for i, spec in enumerate(matcher.palette):
        report.add({'index': i, 'value': spec.source, 'name': spec.name})
    return report
