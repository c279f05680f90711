"""Lookup table of colwidth commands.

Each module under colwidth/commands/ exposes one module-level `command`
(a Command). discover() imports those modules once and indexes the
commands by their CLI name; later calls return the cached table.
"""

import importlib
import pkgutil

from colwidth.core.types import Command

_commands: dict[str, Command] = {}

# Used when pkgutil cannot list the package (PyInstaller builds)
_COMMAND_MODULES = [
    'all',
    'apply',
    'explicit',
    'extract',
    'preview',
    'redistribute',
    'total',
    'widths',
]


def _command_module_names() -> list[str]:
    import colwidth.commands as commands_pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(commands_pkg.__path__) if not name.startswith('_')]
    return names or _COMMAND_MODULES


def discover() -> dict[str, Command]:
    """CLI name -> Command for every command module."""
    if not _commands:
        for name in _command_module_names():
            module = importlib.import_module(f'colwidth.commands.{name}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _commands[cmd.name] = cmd
    return _commands


def get(name: str) -> Command:
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
