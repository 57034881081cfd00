"""Tests for FakeCommandRunner's simulated git state."""

import pytest

from mygit.errors import NonZeroExit, SpawnFailed
from mygit.gateway.runner.fake import FakeCommandRunner
from mygit.gateway.runner.types import RunMode


def test_records_every_call_with_its_mode() -> None:
    runner = FakeCommandRunner(local_branches={"main": "c1"}, current_branch="main")

    runner.run_exit_code_only(["rev-parse", "--verify", "--quiet", "main"], description="x")
    runner.run_captured(["status", "--porcelain"], description="x")

    assert runner.calls == [
        (RunMode.EXIT_CODE_ONLY, ("rev-parse", "--verify", "--quiet", "main")),
        (RunMode.CAPTURED, ("status", "--porcelain")),
    ]
    assert runner.ran("status", "--porcelain")
    assert not runner.ran("status")


def test_scripted_failure_raises_or_returns_false_by_mode() -> None:
    args = ("merge", "feature")
    runner = FakeCommandRunner(failures={args: 1})

    assert runner.run_exit_code_only(list(args), description="git merge") is False
    with pytest.raises(NonZeroExit) as exc_info:
        runner.run_interactive(list(args), description="git merge")
    assert exc_info.value.code == 1


def test_spawn_fails_mode_raises_for_every_call() -> None:
    runner = FakeCommandRunner(spawn_fails=True)

    with pytest.raises(SpawnFailed):
        runner.run_exit_code_only(["status"], description="git status")

    assert runner.commands == [("status",)]


def test_outputs_override_simulation() -> None:
    args = ("log", "--graph")
    runner = FakeCommandRunner(outputs={args: "* abc first\n"})

    assert runner.run_captured(list(args), description="git log") == "* abc first"


def test_branch_mutations_are_visible_to_later_queries() -> None:
    runner = FakeCommandRunner(
        local_branches={"main": "c1"}, current_branch="main", remotes={"origin": "url"}
    )

    runner.run_interactive(["checkout", "-b", "topic"], description="x")
    runner.run_interactive(["push", "-u", "origin", "topic"], description="x")

    assert runner.current_branch == "topic"
    assert runner.local_branches == {"main": "c1", "topic": "c1"}
    assert runner.remote_branches == {"origin/topic": "c1"}


def test_commit_on_clean_tree_fails() -> None:
    runner = FakeCommandRunner(local_branches={"main": "c1"}, current_branch="main")

    with pytest.raises(NonZeroExit):
        runner.run_interactive(["commit", "-m", "msg"], description="git commit")


def test_commit_moves_current_branch_and_cleans_tree() -> None:
    runner = FakeCommandRunner(
        local_branches={"main": "c1"}, current_branch="main", status=" M file.txt"
    )

    runner.run_interactive(["commit", "-m", "msg"], description="git commit")

    assert runner.status == ""
    assert runner.local_branches["main"] != "c1"


def test_merge_base_is_looked_up_in_both_orders() -> None:
    runner = FakeCommandRunner(merge_bases={("c1", "c2"): "c0"})

    assert runner.run_captured(["merge-base", "c2", "c1"], description="x") == "c0"
    with pytest.raises(NonZeroExit):
        runner.run_captured(["merge-base", "c1", "c3"], description="x")


def test_reset_to_parent_uses_extra_refs() -> None:
    runner = FakeCommandRunner(
        local_branches={"main": "c2"}, current_branch="main", extra_refs={"HEAD~": "c1"}
    )

    runner.run_interactive(["reset", "--hard", "HEAD~"], description="x")

    assert runner.local_branches == {"main": "c1"}
