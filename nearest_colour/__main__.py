"""nearest-colour — Snap colours to the nearest entry of a palette.

Usage: uv run nearest-colour <command> [options]

Commands are auto-discovered from nearest_colour/commands/.
Each command module's docstring is its documentation.
Run `nearest-colour help <command>` for full module docs.

Palettes (--palette, --or, NEAREST_COLOUR_PALETTE) are comma-separated
colours, each optionally named: 'maroon=#800,white=fff,#eee'.
Without one, the built-in 256-colour terminal palette is used.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, nearest-colour looks for a .env file starting
  from the current directory and walking up, stopping at the nearest .git
  boundary. Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from nearest_colour import registry
from nearest_colour.core.env import load_env
from nearest_colour.core.report import format_json, format_text


def _short_help(name: str) -> str:
    doc = registry.doc(name)
    return doc.splitlines()[0] if doc else ''


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  nearest-colour match '#f11' 'rgb(50%, 0%, 50%)' aqua\n"
        "  nearest-colour match ffe -p 'maroon=#800,white=fff'\n"
        "  nearest-colour match '#888' -p 'maroon=#800' --or '#eee,#444'\n"
        '  nearest-colour census screenshot.png --json\n'
        "  nearest-colour snap photo.png out.png -p '#000,#fff'\n"
        '  nearest-colour palette\n'
        '  nearest-colour help census\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  NEAREST_COLOUR_PALETTE  default palette when --palette is not given\n'
    )
    parser = argparse.ArgumentParser(
        prog='nearest-colour',
        description='Snap colours to the nearest entry of a palette.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        cmd.add_arguments(p)
        p.add_argument(
            '-p',
            '--palette',
            default=None,
            help='Palette to match against (default: $NEAREST_COLOUR_PALETTE or 256-colour terminal)',
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: nearest-colour help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.doc(topic)
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'nearest-colour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    try:
        report = cmd.execute(args)
    except ValueError as e:
        # InvalidColourFormat, EmptyPalette, malformed --palette
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
