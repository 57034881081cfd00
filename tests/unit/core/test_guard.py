"""Tests for the uncommitted-changes guard."""

import pytest

from mygit.core.outcome import WorkflowOutcome
from mygit.core.workflows.guard import GuardChoice, guard_uncommitted_changes
from mygit.errors import ValidationFailure
from mygit.gateway.console.fake import FakeConsole
from tests.test_utils.context_builders import build_context, build_runner

DIRTY = " M src/app.py\n?? notes.txt"


def test_clean_tree_continues_without_prompting() -> None:
    console = FakeConsole()
    ctx = build_context(build_runner(), console)

    for _ in range(2):
        assert guard_uncommitted_changes(ctx, action="switch") is WorkflowOutcome.CONTINUE

    assert console.interaction_count == 0


def test_default_choice_is_cancel_listed_last() -> None:
    console = FakeConsole(select_responses=[GuardChoice.CANCEL])
    ctx = build_context(build_runner(status=DIRTY), console)

    assert guard_uncommitted_changes(ctx, action="switch") is WorkflowOutcome.ABORT
    _message, labels = console.selections[0]
    assert labels[-1] == "Cancel"


def test_no_selection_aborts() -> None:
    console = FakeConsole(select_responses=[None])
    ctx = build_context(build_runner(status=DIRTY), console)

    assert guard_uncommitted_changes(ctx, action="merge") is WorkflowOutcome.ABORT


def test_commit_choice_commits_and_continues() -> None:
    runner = build_runner(status=DIRTY)
    console = FakeConsole(select_responses=[GuardChoice.COMMIT], prompt_responses=["wip"])
    ctx = build_context(runner, console)

    assert guard_uncommitted_changes(ctx, action="switch") is WorkflowOutcome.CONTINUE
    assert runner.ran("add", ".")
    assert runner.ran("commit", "-m", "wip")
    assert runner.status == ""


def test_commit_choice_requires_message() -> None:
    runner = build_runner(status=DIRTY)
    console = FakeConsole(select_responses=[GuardChoice.COMMIT], prompt_responses=[""])
    ctx = build_context(runner, console)

    with pytest.raises(ValidationFailure):
        guard_uncommitted_changes(ctx, action="switch")
    assert not runner.ran("add", ".")


def test_new_branch_choice_moves_changes_and_aborts() -> None:
    runner = build_runner(status=DIRTY)
    console = FakeConsole(select_responses=[GuardChoice.NEW_BRANCH], prompt_responses=["wip"])
    ctx = build_context(runner, console)

    assert guard_uncommitted_changes(ctx, action="switch") is WorkflowOutcome.ABORT
    assert runner.ran("checkout", "-b", "wip")
    assert runner.current_branch == "wip"


def test_discard_requires_second_confirmation() -> None:
    runner = build_runner(status=DIRTY)
    console = FakeConsole(select_responses=[GuardChoice.DISCARD], confirm_responses=[False])
    ctx = build_context(runner, console)

    assert guard_uncommitted_changes(ctx, action="merge") is WorkflowOutcome.ABORT
    assert not runner.ran("reset", "--hard", "HEAD")


def test_discard_confirmed_resets_and_continues() -> None:
    runner = build_runner(status=DIRTY)
    console = FakeConsole(select_responses=[GuardChoice.DISCARD], confirm_responses=[True])
    ctx = build_context(runner, console)

    assert guard_uncommitted_changes(ctx, action="merge") is WorkflowOutcome.CONTINUE
    assert runner.ran("reset", "--hard", "HEAD")
    assert runner.status == ""
