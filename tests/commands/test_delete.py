"""Tests for mygit delete."""

from click.testing import CliRunner

from mygit.cli.cli import cli
from mygit.gateway.console.fake import FakeConsole
from tests.test_utils.context_builders import build_context, build_runner

STALE = "c" * 40


def test_delete_remote_only_branch_declined_is_benign() -> None:
    runner = build_runner(remote_branches={"origin/stale-branch": STALE})
    console = FakeConsole(select_responses=["origin/stale-branch"], confirm_responses=[False])
    ctx = build_context(runner, console)

    result = CliRunner().invoke(cli, ["delete"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert console.confirmations == ["Delete remote branch 'origin/stale-branch'?"]
    assert "No deletion performed" in result.output
    assert not any(args[0] == "push" for args in runner.commands)


def test_delete_refreshes_remote_refs_first() -> None:
    runner = build_runner(remote_branches={"origin/stale-branch": STALE})
    ctx = build_context(runner, FakeConsole(confirm_responses=[True]))

    result = CliRunner().invoke(
        cli, ["delete", "origin/stale-branch"], obj=ctx, catch_exceptions=False
    )

    assert result.exit_code == 0
    assert runner.commands.index(("fetch", "origin", "--prune")) < runner.commands.index(
        ("push", "origin", "--delete", "stale-branch")
    )
    assert runner.remote_branches == {}


def test_delete_local_and_remote_with_separate_confirmations() -> None:
    runner = build_runner(
        local_branches={"topic": STALE}, remote_branches={"origin/topic": STALE}
    )
    console = FakeConsole(confirm_responses=[True, True])
    ctx = build_context(runner, console)

    result = CliRunner().invoke(cli, ["del", "topic"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert console.confirmations == [
        "Delete local branch 'topic'?",
        "Delete remote branch 'origin/topic'?",
    ]
    assert "topic" not in runner.local_branches
    assert runner.remote_branches == {}


def test_delete_force_uses_capital_d() -> None:
    runner = build_runner(local_branches={"topic": STALE}, with_remote=False)
    ctx = build_context(runner, FakeConsole(confirm_responses=[True]))

    result = CliRunner().invoke(cli, ["delete", "-f", "topic"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert runner.ran("branch", "-D", "topic")


def test_delete_current_branch_is_refused_before_deleting() -> None:
    runner = build_runner(remote_branches={"origin/main": "a" * 40})
    console = FakeConsole(select_responses=["main"])
    ctx = build_context(runner, console)

    result = CliRunner().invoke(cli, ["delete"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "currently checked out" in result.output
    assert console.confirmations == []
    assert not any(args[0] == "branch" and args[1] in ("-d", "-D") for args in runner.commands)
    assert not any(args[0] == "push" for args in runner.commands)


def test_delete_unknown_branch_fails() -> None:
    runner = build_runner(with_remote=False)
    ctx = build_context(runner)

    result = CliRunner().invoke(cli, ["delete", "ghost"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "was not found" in result.output
