"""Environment variable loading for nearest-colour.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  NEAREST_COLOUR_PALETTE  default palette for CLI commands, e.g.
                          'maroon=#800,white=fff' or '#eee,#444'
"""

import os
from pathlib import Path

from nearest_colour.core.matcher import Matcher, from_palette
from nearest_colour.core.palette import BASH_COLOURS, parse_palette_arg

PALETTE_VAR = 'NEAREST_COLOUR_PALETTE'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def palette_from_env() -> list | None:
    """Palette source from NEAREST_COLOUR_PALETTE, or None when unset or blank."""
    text = os.environ.get(PALETTE_VAR, '').strip()
    if not text:
        return None
    return parse_palette_arg(text)


def resolve_matcher(palette_arg: str | None = None, alternates: list[str] | None = None) -> Matcher:
    """Matcher for CLI commands: --palette, else NEAREST_COLOUR_PALETTE, else BASH_COLOURS.

    Each of `alternates` is appended with Matcher.or_.
    """
    if palette_arg:
        matcher = from_palette(parse_palette_arg(palette_arg))
    else:
        source = palette_from_env()
        matcher = from_palette(source) if source is not None else Matcher(BASH_COLOURS)
    for alt in alternates or []:
        matcher = matcher.or_(parse_palette_arg(alt))
    return matcher
