"""End-to-end tests for the hkdocs CLI via Typer's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from hkdocs import __version__
from hkdocs.app import app, main
from hkdocs.exit_codes import EXIT_SPEC_PARSE_ERROR


class TestVersion:
    def test_version_flag(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"hkdocs {__version__}" in result.output


class TestSidebarCommand:
    def test_prints_json(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        result = cli_runner.invoke(app, ["sidebar", str(hk_commands_path)])
        assert result.exit_code == 0, result.output
        entries = json.loads(result.stdout)
        assert entries[0] == {"text": "cache clear", "link": "/cli/cache/clear"}
        assert {"text": "run pre-commit", "link": "/cli/run/pre-commit"} in entries
        assert all(e["text"] != "usage" for e in entries)
        assert len(entries) == 15

    def test_flags_override_config(
        self, cli_runner, isolated_env: Path, hk_commands_path: Path
    ) -> None:
        (isolated_env / "hkdocs.json").write_text(
            json.dumps({"base_link": "/file", "label_prefix": "hk "}), encoding="utf-8"
        )
        result = cli_runner.invoke(
            app, ["sidebar", str(hk_commands_path), "--base-link", "/reference"]
        )
        assert result.exit_code == 0, result.output
        entries = json.loads(result.stdout)
        assert entries[1] == {"text": "hk check", "link": "/reference/check"}

    def test_global_config_option(
        self, cli_runner, isolated_env: Path, hk_commands_path: Path
    ) -> None:
        config = isolated_env / "site.json"
        config.write_text(json.dumps({"base_link": "/docs/cli"}), encoding="utf-8")
        result = cli_runner.invoke(
            app, ["--config", str(config), "sidebar", str(hk_commands_path)]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[1]["link"] == "/docs/cli/check"

    def test_include_hidden(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        result = cli_runner.invoke(
            app, ["sidebar", str(hk_commands_path), "--include-hidden"]
        )
        assert result.exit_code == 0, result.output
        texts = [e["text"] for e in json.loads(result.stdout)]
        assert texts[:2] == ["cache", "cache clear"]
        assert "usage" in texts

    def test_write_file(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        target = isolated_env / "out" / "cli_commands.json"
        result = cli_runner.invoke(
            app, ["sidebar", str(hk_commands_path), "--write", str(target)]
        )
        assert result.exit_code == 0, result.output
        entries = json.loads(target.read_text(encoding="utf-8"))
        assert len(entries) == 15
        assert "Wrote 15 sidebar entries" in result.output

    def test_invalid_spec_exit_code(self, cli_runner, isolated_env: Path) -> None:
        bad = isolated_env / "bad.json"
        bad.write_text(
            json.dumps({"cmd": {"subcommands": {"cache": {"full_cmd": ["cash"]}}}}),
            encoding="utf-8",
        )
        result = cli_runner.invoke(app, ["--no-color", "sidebar", str(bad)])
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
        assert "Error:" in result.output

    def test_bad_config_exit_code(
        self, cli_runner, isolated_env: Path, hk_commands_path: Path
    ) -> None:
        (isolated_env / "hkdocs.json").write_text("{oops", encoding="utf-8")
        result = cli_runner.invoke(app, ["sidebar", str(hk_commands_path)])
        assert result.exit_code == 1


class TestPathsCommand:
    def test_plain_listing(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        result = cli_runner.invoke(app, ["--quiet", "paths", str(hk_commands_path)])
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "cache clear\t"
        assert "run prepare-commit-msg\t" in lines
        assert len(lines) == 15

    def test_json_listing_with_hidden(
        self, cli_runner, isolated_env: Path, hk_commands_path: Path
    ) -> None:
        result = cli_runner.invoke(
            app, ["--json", "--quiet", "paths", str(hk_commands_path), "--include-hidden"]
        )
        assert result.exit_code == 0, result.output
        records = json.loads(result.stdout)
        assert records[0] == {"command": "cache", "hidden": "yes"}
        assert len(records) == 17

    def test_include_hidden_from_env_matches_sidebar(
        self,
        cli_runner,
        isolated_env: Path,
        hk_commands_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("HKDOCS_INCLUDE_HIDDEN", "1")
        sidebar = cli_runner.invoke(app, ["sidebar", str(hk_commands_path)])
        paths = cli_runner.invoke(
            app, ["--plain", "--quiet", "paths", str(hk_commands_path)]
        )
        assert sidebar.exit_code == 0, sidebar.output
        assert paths.exit_code == 0, paths.output
        texts = [e["text"] for e in json.loads(sidebar.stdout)]
        lines = [line.split("\t")[0] for line in paths.stdout.splitlines()]
        assert lines == texts
        assert len(lines) == 17

    def test_include_hidden_from_project_file(
        self, cli_runner, isolated_env: Path, hk_commands_path: Path
    ) -> None:
        (isolated_env / "hkdocs.json").write_text(
            json.dumps({"include_hidden": True}), encoding="utf-8"
        )
        result = cli_runner.invoke(
            app, ["--plain", "--quiet", "paths", str(hk_commands_path)]
        )
        assert result.exit_code == 0, result.output
        assert "usage\tyes" in result.stdout.splitlines()

    def test_summary_on_stderr(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        result = cli_runner.invoke(app, ["--no-color", "paths", str(hk_commands_path)])
        assert result.exit_code == 0
        assert "15 commands listed (15 visible, 2 hidden)" in result.output


class TestValidateCommand:
    def test_valid(self, cli_runner, isolated_env: Path, hk_commands_path: Path) -> None:
        result = cli_runner.invoke(app, ["--no-color", "validate", str(hk_commands_path)])
        assert result.exit_code == 0
        assert "15 visible, 2 hidden" in result.output

    def test_missing_file(self, cli_runner, isolated_env: Path) -> None:
        result = cli_runner.invoke(app, ["validate", str(isolated_env / "nope.json")])
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR


class TestMain:
    def test_crash_log_on_unexpected_error(
        self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _boom() -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr("hkdocs.app.app", _boom)
        monkeypatch.setattr("hkdocs.app._setup_signal_handlers", lambda: None)
        monkeypatch.setattr("hkdocs.config._is_xdg_platform", lambda: True)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        logs = list((isolated_env / "data" / "hkdocs" / "logs").glob("crash-*.log"))
        assert len(logs) == 1
        assert "RuntimeError: boom" in logs[0].read_text()
