"""Bash completion script formatting"""
from typing import Iterable, List

from ..core.catalog import CommandCatalog
from ..core.options import OptionDescriptor, option_names
from .classifiers import Classification

INDENT = "    "

# compgen arguments used after a flag that takes a path or host
FILE_COMPLETION = "-df ${cur}"
DIR_COMPLETION = "-d ${cur}"
HOST_COMPLETION = "-A hostname ${cur}"


def format_license_header(header_lines: Iterable[str]) -> List[str]:
    """
    Turn license text into shell comments

    Examples:
        >>> format_license_header(["Copyright X", ""])
        ['# Copyright X', '#']
    """
    return ["#" if not line else f"# {line}" for line in header_lines]


def format_generated_by(description: str, generator: str) -> List[str]:
    return [
        "#",
        f"# Completion for {description}",
        f"# Generated by {generator}",
        "#",
    ]


def options_to_string(options: Iterable[OptionDescriptor]) -> str:
    return " ".join(option_names(options))


def command_variable(command: str) -> str:
    """Shell variable holding a command's options; '-' is not valid there"""
    return f"{command.replace('-', '_')}_opts"


def format_value_case(options: Iterable[OptionDescriptor], compgen_args: str) -> List[str]:
    lines = []
    for option in options:
        lines.extend([
            f"{INDENT * 2}{option.name})",
            f"{INDENT * 3}COMPREPLY=( $(compgen {compgen_args}) )",
            f"{INDENT * 3}return 0",
            f"{INDENT * 3};;",
        ])
    return lines


def format_command_case(command: str, options: Iterable[OptionDescriptor]) -> List[str]:
    local_var = command_variable(command)
    return [
        f"{INDENT * 2}{command})",
        f'{INDENT * 3}local {local_var}="{options_to_string(options)}"',
        f'{INDENT * 3}COMPREPLY=( $(compgen -W "${{{local_var}}}" -- ${{cur}}) )',
        f"{INDENT * 3}return 0",
        f"{INDENT * 3};;",
    ]


def format_completion_function(catalog: CommandCatalog, classification: Classification,
                               function_name: str) -> List[str]:
    """Render the completion function body for a catalog"""
    commands = " ".join(catalog.base_commands)

    lines = [
        f"{function_name}()",
        "{",
        f"{INDENT}local cur prev opts base cmds",
        f"{INDENT}COMPREPLY=()",
        f'{INDENT}cur="${{COMP_WORDS[COMP_CWORD]}}"',
        f'{INDENT}prev="${{COMP_WORDS[COMP_CWORD-1]}}"',
        f'{INDENT}base="${{COMP_WORDS[1]}}"',
        f'{INDENT}cmds="{commands}"',
        # subcommand position
        f"{INDENT}if [[ ${{#COMP_WORDS[@]}} == 2 ]] ; then",
        f'{INDENT * 2}COMPREPLY=( $(compgen -W "${{cmds}} --help" -- ${{cur}}) )',
        f"{INDENT * 2}return 0",
        f"{INDENT}fi",
        f"{INDENT}if [[ ${{COMP_WORDS[1]}} == '--help' ]] ; then",
        f'{INDENT * 2}COMPREPLY=( $(compgen -W "${{cmds}}" -- ${{cur}}) )',
        f"{INDENT * 2}return 0",
        f"{INDENT}fi",
        f'{INDENT}case "${{prev}}" in',
    ]
    lines += format_value_case(classification.file_options, FILE_COMPLETION)
    lines += format_value_case(classification.dir_options, DIR_COMPLETION)
    lines += format_value_case(classification.url_options, HOST_COMPLETION)
    lines.append(f"{INDENT}esac")

    # TODO: drop options already present on the command line from the candidates
    lines.append(f'{INDENT}case "${{base}}" in')
    for command in catalog.base_commands:
        lines += format_command_case(command, catalog.command_options[command])
    lines.append(f"{INDENT}esac")
    lines.append("}")
    return lines


def format_registration(function_name: str, command_name: str) -> List[str]:
    return [f"complete -F {function_name} {command_name}"]
