"""Tests for sync-status classification."""

import pytest

from mygit.core.sync_status import (
    SyncClassification,
    SyncStatus,
    SyncStatusClassifier,
    classify_commits,
)
from mygit.gateway.git import Git
from mygit.gateway.runner.fake import FakeCommandRunner


@pytest.mark.parametrize(
    ("local", "remote", "ancestor", "expected"),
    [
        ("c1", "c1", "c1", SyncStatus.SYNCED),
        ("c1", "c1", "c0", SyncStatus.SYNCED),
        ("c2", "c1", "c1", SyncStatus.AHEAD),
        ("c1", "c2", "c1", SyncStatus.BEHIND),
        ("c2", "c3", "c1", SyncStatus.DIVERGED),
        ("c1", "", "", SyncStatus.LOCAL_ONLY),
        ("", "", "", SyncStatus.LOCAL_ONLY),
    ],
)
def test_classify_commits(local: str, remote: str, ancestor: str, expected: SyncStatus) -> None:
    assert classify_commits(local, remote, ancestor) is expected


def test_notes_for_statuses() -> None:
    assert SyncClassification.of(SyncStatus.AHEAD).note == "needs push"
    assert SyncClassification.of(SyncStatus.BEHIND).note == "needs pull"
    assert SyncClassification.of(SyncStatus.DIVERGED).note == "diverged"
    assert SyncClassification.of(SyncStatus.SYNCED).note == ""


def _classifier(runner: FakeCommandRunner) -> SyncStatusClassifier:
    return SyncStatusClassifier(Git(runner), remote="origin")


@pytest.mark.parametrize("local_commit", ["c1", "c9", ""])
def test_missing_remote_branch_is_local_only(local_commit: str) -> None:
    runner = FakeCommandRunner(local_branches={"topic": "c1"})

    result = _classifier(runner).classify("topic", local_commit)

    assert result.status is SyncStatus.LOCAL_ONLY
    assert not any(args[0] == "merge-base" for args in runner.commands)


def test_equal_commits_skip_ancestor_query() -> None:
    runner = FakeCommandRunner(
        local_branches={"topic": "c1"}, remote_branches={"origin/topic": "c1"}
    )

    assert _classifier(runner).classify("topic", "c1").status is SyncStatus.SYNCED
    assert not any(args[0] == "merge-base" for args in runner.commands)


def test_ahead_behind_diverged_from_ancestor() -> None:
    runner = FakeCommandRunner(
        local_branches={"a": "c2", "b": "c1", "d": "c4"},
        remote_branches={"origin/a": "c1", "origin/b": "c2", "origin/d": "c5"},
        merge_bases={("c2", "c1"): "c1", ("c4", "c5"): "c3"},
    )
    classifier = _classifier(runner)

    assert classifier.classify("a", "c2").status is SyncStatus.AHEAD
    assert classifier.classify("b", "c1").status is SyncStatus.BEHIND
    assert classifier.classify("d", "c4").status is SyncStatus.DIVERGED


def test_failed_ancestor_query_degrades_to_local_only() -> None:
    runner = FakeCommandRunner(
        local_branches={"topic": "c1"}, remote_branches={"origin/topic": "c2"}
    )

    assert _classifier(runner).classify("topic", "c1").status is SyncStatus.LOCAL_ONLY
