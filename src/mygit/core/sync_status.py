"""Classification of a local branch against its remote-tracking counterpart."""

import logging
from dataclasses import dataclass
from enum import Enum

from mygit.errors import NonZeroExit
from mygit.gateway.git import Git

logger = logging.getLogger(__name__)


class SyncStatus(Enum):
    SYNCED = "synced"
    LOCAL_ONLY = "local-only"
    AHEAD = "ahead"
    BEHIND = "behind"
    DIVERGED = "diverged"


NOTES = {
    SyncStatus.SYNCED: "",
    SyncStatus.LOCAL_ONLY: "",
    SyncStatus.AHEAD: "needs push",
    SyncStatus.BEHIND: "needs pull",
    SyncStatus.DIVERGED: "diverged",
}


@dataclass(frozen=True)
class SyncClassification:
    status: SyncStatus
    note: str

    @staticmethod
    def of(status: SyncStatus) -> "SyncClassification":
        return SyncClassification(status=status, note=NOTES[status])


def classify_commits(local_commit: str, remote_commit: str, ancestor: str) -> SyncStatus:
    """Classify a (local, remote, common ancestor) triple.

    Total over its inputs: an empty remote commit means there is nothing to compare
    against, equal commits are in sync, and otherwise the ancestor tells which side
    holds commits the other lacks.
    """
    if not remote_commit:
        return SyncStatus.LOCAL_ONLY
    if local_commit == remote_commit:
        return SyncStatus.SYNCED
    if ancestor == remote_commit:
        return SyncStatus.AHEAD
    if ancestor == local_commit:
        return SyncStatus.BEHIND
    return SyncStatus.DIVERGED


class SyncStatusClassifier:
    """Computes the display status of local branches, fresh on every call."""

    def __init__(self, git: Git, *, remote: str) -> None:
        self._git = git
        self._remote = remote

    def classify(self, local_branch: str, local_commit: str) -> SyncClassification:
        """Classify ``local_branch`` (at ``local_commit``) against '<remote>/<branch>'.

        Classification is advisory display information: a failed common-ancestor
        query (for example unrelated histories) degrades to LOCAL_ONLY instead of
        raising.
        """
        remote_branch = f"{self._remote}/{local_branch}"
        if not self._git.ref_exists(remote_branch):
            return SyncClassification.of(SyncStatus.LOCAL_ONLY)

        remote_commit = self._git.commit_id(remote_branch)
        if not remote_commit:
            return SyncClassification.of(SyncStatus.LOCAL_ONLY)
        if local_commit == remote_commit:
            return SyncClassification.of(SyncStatus.SYNCED)

        try:
            ancestor = self._git.merge_base(local_commit, remote_commit)
        except NonZeroExit as e:
            logger.debug("No common ancestor for %s and %s: %s", local_branch, remote_branch, e)
            return SyncClassification.of(SyncStatus.LOCAL_ONLY)

        return SyncClassification.of(classify_commits(local_commit, remote_commit, ancestor))
