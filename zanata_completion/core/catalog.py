"""Application-wide view of commands and their options"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .decorators import CommandRegistry
from .logger import Logger
from .options import OptionDescriptor, get_options


@dataclass(frozen=True)
class CommandCatalog:
    command_name: str
    command_description: str
    base_commands: tuple[str, ...]
    generic_options: tuple[OptionDescriptor, ...]
    command_options: Mapping[str, tuple[OptionDescriptor, ...]]
    # unique descriptors, in the order they were first seen
    all_options: tuple[OptionDescriptor, ...]


def build_catalog(registry: CommandRegistry,
                  subtract_generic_options: bool = False) -> CommandCatalog:
    """
    Build the catalog from a command registry in a single pass

    With subtract_generic_options the global options are removed from each
    command's own list; by default they stay in every command's list.
    """
    if not registry.command_name:
        raise ValueError("Registry has no main command registered")

    generic_options = get_options(registry.global_definition)
    seen = dict.fromkeys(generic_options)
    generic = set(generic_options)

    command_options = {}
    for name, definition in registry.commands.items():
        options = get_options(definition)
        if subtract_generic_options:
            options = tuple(o for o in options if o not in generic)
        Logger.debug(f"{name}: {len(options)} options")
        command_options[name] = options
        seen.update(dict.fromkeys(options))

    return CommandCatalog(
        command_name=registry.command_name,
        command_description=registry.description,
        base_commands=tuple(registry.commands),
        generic_options=generic_options,
        command_options=MappingProxyType(command_options),
        all_options=tuple(seen),
    )
