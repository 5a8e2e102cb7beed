from __future__ import annotations

from zanata_completion.core.catalog import build_catalog
from zanata_completion.core.decorators import CommandRegistry, arg
from zanata_completion.utils.classifiers import Classification
from zanata_completion.utils.formatters import (
    command_variable,
    format_completion_function,
    format_license_header,
    format_registration,
)


def test_format_license_header() -> None:
    assert format_license_header(["Copyright X", "", "GPL"]) == [
        "# Copyright X",
        "#",
        "# GPL",
    ]


def test_command_variable_is_a_valid_shell_name() -> None:
    assert command_variable("push") == "push_opts"
    assert command_variable("put-project") == "put_project_opts"


def test_format_registration() -> None:
    assert format_registration("_zanata", "app") == ["complete -F _zanata app"]


def test_completion_function_branches(registry: CommandRegistry) -> None:
    catalog = build_catalog(registry)
    lines = format_completion_function(
        catalog, Classification(catalog.all_options), "_zanata")
    stripped = [line.strip() for line in lines]

    assert lines[0] == "_zanata()"
    assert lines[-1] == "}"
    assert 'cmds="push pull"' in stripped
    assert 'COMPREPLY=( $(compgen -W "${cmds} --help" -- ${cur}) )' in stripped
    assert 'COMPREPLY=( $(compgen -W "${cmds}" -- ${cur}) )' in stripped
    assert stripped[stripped.index("pull)") + 1] == 'local pull_opts=""'


def test_value_branches_per_category() -> None:
    registry = CommandRegistry()
    registry.main("app", description="App")(type("App", (), {}))
    registry.register("sync", help="Sync", args=[
        arg("--src-dir", metavar="DIR"),
        arg("--url", metavar="URL"),
        arg("--both", metavar="filedir"),
    ])(type("Sync", (), {}))
    catalog = build_catalog(registry)
    stripped = [line.strip() for line in format_completion_function(
        catalog, Classification(catalog.all_options), "_zanata")]

    dir_at = stripped.index("--src-dir)")
    assert stripped[dir_at + 1] == "COMPREPLY=( $(compgen -d ${cur}) )"
    url_at = stripped.index("--url)")
    assert stripped[url_at + 1] == "COMPREPLY=( $(compgen -A hostname ${cur}) )"
    both = [i for i, line in enumerate(stripped) if line == "--both)"]
    assert [stripped[i + 1] for i in both] == [
        "COMPREPLY=( $(compgen -df ${cur}) )",
        "COMPREPLY=( $(compgen -d ${cur}) )",
    ]
