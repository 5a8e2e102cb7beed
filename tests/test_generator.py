from __future__ import annotations

import os
from pathlib import Path

import pytest

from zanata_completion.core.catalog import build_catalog
from zanata_completion.core.config import GeneratorConfig
from zanata_completion.core.decorators import CommandRegistry
from zanata_completion.core.generator import BashCompletionGenerator


def test_render_script_for_push_pull_registry(registry: CommandRegistry) -> None:
    generator = BashCompletionGenerator(build_catalog(registry))
    lines = generator.render(["Copyright X", ""])
    stripped = [line.strip() for line in lines]

    assert lines[:2] == ["# Copyright X", "#"]
    assert lines[2:6] == [
        "#",
        "# Completion for App CLI",
        "# Generated by BashCompletionGenerator",
        "#",
    ]
    assert 'cmds="push pull"' in stripped
    file_at = stripped.index("--file)")
    assert stripped[file_at + 1] == "COMPREPLY=( $(compgen -df ${cur}) )"
    push_at = stripped.index("push)")
    assert stripped[push_at + 1] == 'local push_opts="--file"'
    assert lines[-1] == "complete -F _zanata app"


def test_render_uses_configured_function_name(registry: CommandRegistry) -> None:
    config = GeneratorConfig(function_name="_app")
    lines = BashCompletionGenerator(build_catalog(registry), config).render([])

    assert "_app()" in lines
    assert lines[-1] == "complete -F _app app"


def test_generate_file_writes_utf8_with_platform_line_endings(
    registry: CommandRegistry, header_file: Path, tmp_path: Path
) -> None:
    to = tmp_path / "app-completion"
    generator = BashCompletionGenerator(build_catalog(registry))

    assert generator.generate_file(to, header_file) == to

    data = to.read_bytes()
    assert data.startswith(f"# Copyright X{os.linesep}#{os.linesep}".encode("utf-8"))
    assert data.endswith(b"complete -F _zanata app")
    assert data.decode("utf-8").split(os.linesep) == generator.render(["Copyright X", ""])


def test_generate_file_overwrites_existing_output(
    registry: CommandRegistry, header_file: Path, tmp_path: Path
) -> None:
    to = tmp_path / "app-completion"
    to.write_text("stale contents " * 100, encoding="utf-8")

    BashCompletionGenerator(build_catalog(registry)).generate_file(to, header_file)

    assert "stale" not in to.read_text(encoding="utf-8")


def test_generate_file_is_byte_identical_between_runs(
    registry: CommandRegistry, header_file: Path, tmp_path: Path
) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"

    BashCompletionGenerator(build_catalog(registry)).generate_file(first, header_file)
    BashCompletionGenerator(build_catalog(registry)).generate_file(second, header_file)

    assert first.read_bytes() == second.read_bytes()


def test_generate_file_creates_missing_directories(
    registry: CommandRegistry, header_file: Path, tmp_path: Path
) -> None:
    to = tmp_path / "nested" / "dir" / "app-completion"

    BashCompletionGenerator(build_catalog(registry)).generate_file(to, header_file)

    assert to.is_file()


def test_generate_file_fails_for_missing_directory_without_create_policy(
    registry: CommandRegistry, header_file: Path, tmp_path: Path
) -> None:
    to = tmp_path / "missing" / "app-completion"
    config = GeneratorConfig(create_parent_dirs=False)

    with pytest.raises(FileNotFoundError):
        BashCompletionGenerator(build_catalog(registry), config).generate_file(to, header_file)
    assert not to.parent.exists()


def test_generate_file_propagates_unreadable_header_without_writing(
    registry: CommandRegistry, tmp_path: Path
) -> None:
    to = tmp_path / "out" / "app-completion"

    with pytest.raises(FileNotFoundError):
        BashCompletionGenerator(build_catalog(registry)).generate_file(
            to, tmp_path / "no-such-header.txt")
    assert not to.exists()
