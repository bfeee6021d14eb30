"""Shared test fixtures for hkdocs.

Provides reusable fixtures for loading command spec fixtures, building small
command trees, isolating config and environment state, and running CLI
commands. These fixtures are automatically discovered by pytest.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from hkdocs.models import CommandNode, CommandSpec
from hkdocs.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, which go stale once CliRunner restores the real streams.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Command spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hk_commands_path() -> Path:
    return FIXTURES_DIR / "hk_commands.json"


@pytest.fixture
def hk_commands_raw(hk_commands_path: Path) -> dict[str, Any]:
    """Load the raw hk usage JSON as a dict."""
    with open(hk_commands_path) as f:
        return json.load(f)


@pytest.fixture
def hk_spec(hk_commands_raw: dict[str, Any]) -> CommandSpec:
    """Validated hk command spec."""
    from hkdocs.parser import build_command_spec

    return build_command_spec(hk_commands_raw)


def node(*path: str, hidden: bool = False, children: list[CommandNode] | None = None) -> CommandNode:
    """Build a CommandNode whose children are keyed by their last path segment."""
    return CommandNode(
        name=path[-1] if path else "",
        full_path=list(path),
        hidden=hidden,
        subcommands={child.full_path[-1]: child for child in children or []},
    )


@pytest.fixture
def make_node():
    """Factory fixture wrapping :func:`node` for tests that build trees inline."""
    return node


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate config and data directories to a temporary directory.

    Points XDG_DATA_HOME into tmp_path, clears all HKDOCS_* environment
    variables, and changes the working directory to tmp_path so that no
    stray ``hkdocs.json`` is picked up.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in [
        "HKDOCS_BASE_LINK",
        "HKDOCS_LABEL_PREFIX",
        "HKDOCS_INCLUDE_HIDDEN",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def json_output() -> OutputManager:
    """Install a JSON-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.JSON)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
