"""Tests for the root command group: error handling, help and context creation."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from mygit.cli.cli import cli
from mygit.gateway.runner.fake import FakeCommandRunner
from tests.test_utils.context_builders import build_context, build_runner


def test_spawn_failure_is_reported_without_traceback() -> None:
    ctx = build_context(FakeCommandRunner(spawn_fails=True))

    result = CliRunner().invoke(cli, ["branch"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "Traceback" not in result.output


def test_unexpected_git_failure_reports_stderr() -> None:
    runner = build_runner(with_remote=False, failures={("status", "--porcelain"): 128})
    ctx = build_context(runner)

    result = CliRunner().invoke(cli, ["switch", "main"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "exit code 128" in result.output


def test_help_lists_commands_with_aliases() -> None:
    result = CliRunner().invoke(cli, ["-h"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "switch (sw)" in result.output
    assert "delete (del)" in result.output
    assert "repo" in result.output


def test_invalid_config_exits_one(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text('remote = ""\n')
    monkeypatch.setenv("MYGIT_CONFIG", str(config))

    result = CliRunner().invoke(cli, ["tree"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "'remote' must be a non-empty string" in result.output
