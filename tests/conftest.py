from __future__ import annotations

import pytest

from zanata_completion.core.decorators import CommandRegistry, arg


@pytest.fixture
def registry() -> CommandRegistry:
    registry = CommandRegistry()

    @registry.main("app", description="App CLI", args=[arg("--help")])
    class AppOptions:
        pass

    @registry.register("push", help="Push documents", args=[arg("--file", metavar="FILE")])
    class PushOptions:
        pass

    @registry.register("pull", help="Pull documents")
    class PullOptions:
        pass

    return registry


@pytest.fixture
def header_file(tmp_path):
    path = tmp_path / "COPYING-header.txt"
    path.write_text("Copyright X\n\n", encoding="utf-8")
    return path
