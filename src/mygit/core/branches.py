"""Branch name resolution and validation.

A user may name a branch either by its local name ("feature-x") or by its
remote-tracking name ("origin/feature-x"). BranchResolver turns that input into
a concrete local/remote-tracking pair and probes which of the two exist.
"""

from dataclasses import dataclass

from mygit.errors import ValidationFailure
from mygit.gateway.console.types import SelectOption
from mygit.gateway.git import NO_BRANCH_MARKERS, Git

@dataclass(frozen=True)
class BranchCandidates:
    """Local and remote-tracking names derived from one user input."""

    local: str
    remote_tracking: str
    remote_prefixed: bool


@dataclass(frozen=True)
class ResolvedBranch:
    """A user-supplied branch name interpreted against the repository.

    Exactly one of the two candidates is the raw input verbatim; the other is
    synthesized by adding or stripping the remote prefix.

    When the input carried the remote prefix, ``local_exists`` is not probed and
    is always False: the input names the remote-tracking branch, and callers that
    also care about a same-named local branch must check it explicitly.
    """

    local_candidate: str
    local_exists: bool
    remote_candidate: str
    remote_exists: bool
    remote_prefixed: bool

    @property
    def existing_ref(self) -> str | None:
        """The ref to operate on: the local branch if it exists, else the remote one."""
        if self.local_exists:
            return self.local_candidate
        if self.remote_exists:
            return self.remote_candidate
        return None


def split_remote_prefix(name: str, *, remote: str) -> BranchCandidates:
    """Derive both candidate names from ``name`` without touching the repository."""
    prefix = f"{remote}/"
    if name.startswith(prefix):
        return BranchCandidates(
            local=name[len(prefix) :], remote_tracking=name, remote_prefixed=True
        )
    return BranchCandidates(local=name, remote_tracking=prefix + name, remote_prefixed=False)


class BranchResolver:
    """Interprets user branch input using quiet ref-verification queries."""

    def __init__(self, git: Git, *, remote: str) -> None:
        self._git = git
        self._remote = remote

    def resolve(self, user_input: str) -> ResolvedBranch:
        """Resolve ``user_input`` to its local and remote-tracking identities.

        A ref that does not exist is a normal answer (False), not an error. Only an
        environmental failure of the external tool propagates.

        Raises:
            ValidationFailure: If the input is empty
            SpawnFailed: If the external tool cannot be launched
        """
        name = user_input.strip()
        if not name:
            raise ValidationFailure("A branch name is required.")

        candidates = split_remote_prefix(name, remote=self._remote)
        local_exists = False
        if not candidates.remote_prefixed:
            local_exists = self._git.ref_exists(candidates.local)
        remote_exists = self._git.ref_exists(candidates.remote_tracking)

        return ResolvedBranch(
            local_candidate=candidates.local,
            local_exists=local_exists,
            remote_candidate=candidates.remote_tracking,
            remote_exists=remote_exists,
            remote_prefixed=candidates.remote_prefixed,
        )


def validate_new_branch_name(git: Git, name: str) -> str:
    """Check that ``name`` can be used for a brand-new local branch.

    Returns:
        The name with surrounding whitespace removed

    Raises:
        ValidationFailure: If the name is empty, malformed, or already taken
    """
    candidate = name.strip()
    if not candidate:
        raise ValidationFailure("A branch name is required.")
    if candidate == "HEAD" or any(marker in candidate for marker in NO_BRANCH_MARKERS):
        raise ValidationFailure(f"'{candidate}' cannot be used as a branch name.")
    if not git.is_valid_branch_name(candidate):
        raise ValidationFailure(f"'{candidate}' is not a valid branch name.")
    if git.ref_exists(f"refs/heads/{candidate}"):
        raise ValidationFailure(f"Branch '{candidate}' already exists.")
    return candidate


def branch_select_options(
    git: Git, *, remote: str, exclude: frozenset[str]
) -> list[SelectOption[str]]:
    """Build the merged, de-duplicated list of local and remote-tracking branches.

    Local branches are offered by name ("x (local)"), remote-tracking branches of
    ``remote`` by their prefixed name ("x (origin)"). Values listed in ``exclude``
    are left out. Options are sorted by label.

    Args:
        git: Git operations
        remote: Remote whose tracking branches are offered
        exclude: Branch values (local or prefixed) to leave out

    Returns:
        Options whose values can be passed straight to BranchResolver.resolve
    """
    seen: set[str] = set()
    options: list[SelectOption[str]] = []

    for branch in git.list_local_branches():
        if branch in exclude or branch in seen:
            continue
        seen.add(branch)
        options.append(SelectOption(label=f"{branch} (local)", value=branch))

    prefix = f"{remote}/"
    for tracking in git.list_remote_branches():
        if not tracking.startswith(prefix) or tracking in exclude or tracking in seen:
            continue
        seen.add(tracking)
        options.append(SelectOption(label=f"{tracking[len(prefix):]} ({remote})", value=tracking))

    return sorted(options, key=lambda option: option.label)
