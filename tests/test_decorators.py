from __future__ import annotations

import pytest

from zanata_completion.core.decorators import CommandRegistry, arg


def test_register_preserves_order_and_returns_class() -> None:
    registry = CommandRegistry()

    @registry.register("stats", help="Stats")
    class StatsOptions:
        pass

    @registry.register("init", help="Init", args=[arg("--src-dir", metavar="DIR")])
    class InitOptions:
        pass

    assert list(registry.commands) == ["stats", "init"]
    assert registry.get_command("init").target is InitOptions
    assert registry.get_command("init").args[0].metavar == "DIR"
    assert registry.get_command("missing") is None
    assert StatsOptions.__name__ == "StatsOptions"


def test_register_rejects_duplicates() -> None:
    registry = CommandRegistry()
    registry.register("push", help="Push")(type("A", (), {}))

    with pytest.raises(ValueError, match="already registered"):
        registry.register("push", help="Push again")(type("B", (), {}))


def test_register_rejects_invalid_names() -> None:
    registry = CommandRegistry()

    with pytest.raises(ValueError, match="invalid characters"):
        registry.register("push pull", help="Bad")(type("A", (), {}))


def test_main_records_command_name_and_description() -> None:
    registry = CommandRegistry()

    @registry.main("app", description="App CLI", args=[arg("--help")])
    class AppOptions:
        pass

    assert registry.command_name == "app"
    assert registry.description == "App CLI"
    assert registry.global_definition.target is AppOptions


def test_commands_view_is_read_only(registry: CommandRegistry) -> None:
    with pytest.raises(TypeError):
        registry.commands["new"] = None  # type: ignore[index]
