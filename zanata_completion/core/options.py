"""Option descriptors and extraction from command definitions"""
from dataclasses import dataclass
from typing import Iterable

from .logger import Logger
from ..utils.validators import validate_option_name


@dataclass(frozen=True)
class OptionDescriptor:
    """One command-line flag as seen by the completion script"""
    name: str
    metavar: str = ""


def option_name(option: OptionDescriptor) -> str:
    return option.name


def option_names(options: Iterable[OptionDescriptor]) -> list[str]:
    return [option_name(option) for option in options]


def get_options(definition) -> tuple[OptionDescriptor, ...]:
    """
    Collect the options declared on a command definition

    The definition's own args come first, followed by each included shared
    group in the order it was listed. Positional arguments and anything that
    is not an OptionSpec are skipped.

    Examples:
        >>> get_options(CommandDefinition("pull", args=(arg("--dry-run"),)))
        (OptionDescriptor(name='--dry-run', metavar=''),)
    """
    if not hasattr(definition, "args"):
        Logger.warn(f"Cannot read options from {definition!r}, skipping")
        return ()

    specs = list(definition.args)
    for group in getattr(definition, "includes", ()):
        specs.extend(group)

    options = []
    for spec in specs:
        flags = getattr(spec, "flags", None)
        if flags is None:
            Logger.debug(f"Ignoring non-option declaration {spec!r}")
            continue

        for flag in flags:
            valid, error = validate_option_name(flag)
            if not valid:
                Logger.debug(f"{getattr(definition, 'name', definition)}: {error}")
                continue
            options.append(OptionDescriptor(flag, spec.metavar or ""))

    return tuple(options)
