"""Command registration decorator"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..utils.validators import validate_command_name


@dataclass(frozen=True)
class OptionSpec:
    """Static declaration of a single argument"""
    flags: tuple[str, ...]
    metavar: Optional[str] = None
    help: Optional[str] = None
    action: Optional[str] = None


def arg(*flags: str, metavar: Optional[str] = None, help: Optional[str] = None,
        action: Optional[str] = None) -> OptionSpec:
    """Declare an argument the way argparse's add_argument would"""
    return OptionSpec(tuple(flags), metavar=metavar, help=help, action=action)


@dataclass(frozen=True)
class CommandDefinition:
    """Declared arguments of one command

    `includes` holds shared option groups that are appended after the
    command's own args.
    """
    name: str
    help: str = ""
    args: tuple[OptionSpec, ...] = ()
    includes: tuple[tuple[OptionSpec, ...], ...] = ()
    target: Optional[type] = field(default=None, compare=False)


class CommandRegistry:
    """Command registry for a command-line application"""

    def __init__(self):
        self._commands: dict[str, CommandDefinition] = {}
        self.command_name: Optional[str] = None
        self.description: str = ""
        self.global_definition = CommandDefinition("")

    def main(self, command_name: str, description: str, args: list | None = None,
             includes: list | None = None):
        """Decorator to register the global options of the application"""
        def decorator(options_cls):
            self.command_name = command_name
            self.description = description
            self.global_definition = CommandDefinition(
                command_name, description, tuple(args or ()),
                _groups(includes), options_cls)
            return options_cls
        return decorator

    def register(self, name: str, help: str, args: list | None = None,
                 includes: list | None = None):
        """Decorator to register command"""
        def decorator(options_cls):
            valid, error = validate_command_name(name)
            if not valid:
                raise ValueError(error)
            if name in self._commands:
                raise ValueError(f"Command '{name}' already registered")

            self._commands[name] = CommandDefinition(
                name, help, tuple(args or ()), _groups(includes), options_cls)
            return options_cls
        return decorator

    def get_command(self, cmd: str) -> Optional[CommandDefinition]:
        """Get command definition by name"""
        return self._commands.get(cmd)

    @property
    def commands(self) -> Mapping[str, CommandDefinition]:
        """Registered commands in registration order"""
        return MappingProxyType(self._commands)


def _groups(includes: Iterable | None) -> tuple[tuple[OptionSpec, ...], ...]:
    return tuple(tuple(group) for group in includes or ())


Command = CommandRegistry()
