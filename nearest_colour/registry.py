"""Command registry.

Every public module in nearest_colour/commands/ defines a module-level
`command` (a Command). The first lookup imports them all; the module
docstring doubles as the command's long help.
"""

import importlib
import pkgutil
from types import ModuleType

import nearest_colour.commands as _commands_pkg
from nearest_colour.core.types import Command

_commands: dict[str, Command] = {}
_modules: dict[str, ModuleType] = {}


def _register(module: ModuleType) -> None:
    cmd = getattr(module, 'command', None)
    if not isinstance(cmd, Command):
        return
    if cmd.name in _commands:
        other = _modules[cmd.name].__name__
        raise RuntimeError(f'Command {cmd.name!r} defined in both {other} and {module.__name__}')
    _commands[cmd.name] = cmd
    _modules[cmd.name] = module


def discover() -> dict[str, Command]:
    """Import the command modules once and return name -> Command."""
    if not _commands:
        for info in pkgutil.iter_modules(_commands_pkg.__path__):
            if not info.name.startswith('_'):
                _register(importlib.import_module(f'{_commands_pkg.__name__}.{info.name}'))
    return _commands


def get(name: str) -> Command:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def doc(name: str) -> str:
    """Full docs for a command: its module docstring, or its short help."""
    get(name)
    return (_modules[name].__doc__ or '').strip() or _commands[name].help


def all_commands() -> dict[str, Command]:
    return discover()
