"""Fake CommandRunner that simulates the subset of git used by mygit."""

from __future__ import annotations

from collections.abc import Sequence

from mygit.errors import NonZeroExit, SpawnFailed
from mygit.gateway.runner.abc import CommandRunner
from mygit.gateway.runner.types import RunMode


class FakeCommandRunner(CommandRunner):
    """In-memory fake that interprets git argument vectors against configured state.

    State Management:
    -----------------
    Refs live in two maps: local branches (name -> commit id) and remote-tracking
    branches ('origin/name' -> commit id). Commands such as `branch`, `checkout -b`,
    `push -u` and `branch -d` mutate that state, so later queries within the same
    test observe the change. Argument vectors the fake does not understand succeed
    with empty output.

    Scripted Failures:
    ------------------
    ``failures`` maps an exact argument vector to an exit status. In CAPTURED and
    INTERACTIVE mode that vector raises NonZeroExit; in EXIT_CODE_ONLY mode it
    returns False. ``spawn_fails=True`` makes every call raise SpawnFailed.

    Mutation Tracking:
    ------------------
    Every call is recorded as (mode, args) and exposed via ``calls``/``commands``.
    """

    def __init__(
        self,
        *,
        local_branches: dict[str, str] | None = None,
        remote_branches: dict[str, str] | None = None,
        current_branch: str | None = None,
        remotes: dict[str, str] | None = None,
        status: str = "",
        merge_bases: dict[tuple[str, str], str] | None = None,
        failures: dict[tuple[str, ...], int] | None = None,
        outputs: dict[tuple[str, ...], str] | None = None,
        spawn_fails: bool = False,
        extra_refs: dict[str, str] | None = None,
    ) -> None:
        """Create FakeCommandRunner with pre-configured repository state.

        Args:
            local_branches: Mapping of local branch name -> commit id
            remote_branches: Mapping of remote-tracking name ('origin/x') -> commit id
            current_branch: Checked-out branch, or None for a detached HEAD
            remotes: Mapping of remote name -> URL
            status: Output of `git status --porcelain` (empty means clean)
            merge_bases: Mapping of (commit, commit) -> common ancestor; looked up
                in both orders. A missing pair makes `merge-base` exit 1.
            failures: Mapping of exact argument vector -> non-zero exit status
            outputs: Mapping of exact argument vector -> captured stdout, taking
                precedence over simulated behavior
            spawn_fails: If True, every call fails as if the executable were missing
            extra_refs: Mapping of other resolvable refs (e.g. 'HEAD~') -> commit id
        """
        self._local_branches = dict(local_branches) if local_branches is not None else {}
        self._remote_branches = dict(remote_branches) if remote_branches is not None else {}
        self._current_branch = current_branch
        self._remotes = dict(remotes) if remotes is not None else {}
        self._status = status
        self._merge_bases = dict(merge_bases) if merge_bases is not None else {}
        self._failures = dict(failures) if failures is not None else {}
        self._outputs = dict(outputs) if outputs is not None else {}
        self._spawn_fails = spawn_fails
        self._extra_refs = dict(extra_refs) if extra_refs is not None else {}

        self._calls: list[tuple[RunMode, tuple[str, ...]]] = []
        self._commit_counter = 0

    # ============================================================================
    # Read-only views for test assertions
    # ============================================================================

    @property
    def calls(self) -> list[tuple[RunMode, tuple[str, ...]]]:
        return list(self._calls)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        """Argument vectors of every call, in order."""
        return [args for _mode, args in self._calls]

    @property
    def local_branches(self) -> dict[str, str]:
        return dict(self._local_branches)

    @property
    def remote_branches(self) -> dict[str, str]:
        return dict(self._remote_branches)

    @property
    def current_branch(self) -> str | None:
        return self._current_branch

    @property
    def remotes(self) -> dict[str, str]:
        return dict(self._remotes)

    @property
    def status(self) -> str:
        return self._status

    def ran(self, *args: str) -> bool:
        """Return True if the exact argument vector was executed."""
        return tuple(args) in self.commands

    # ============================================================================
    # CommandRunner interface
    # ============================================================================

    def run_captured(self, args: Sequence[str], *, description: str) -> str:
        key = self._record(RunMode.CAPTURED, args, description)
        if key in self._failures:
            raise NonZeroExit(description, code=self._failures[key], stderr="", stdout="")
        if key in self._outputs:
            return self._outputs[key].strip()
        return self._simulate(key, description).strip()

    def run_interactive(self, args: Sequence[str], *, description: str) -> None:
        key = self._record(RunMode.INTERACTIVE, args, description)
        if key in self._failures:
            raise NonZeroExit(description, code=self._failures[key], stderr="", stdout="")
        self._simulate(key, description)

    def run_exit_code_only(self, args: Sequence[str], *, description: str) -> bool:
        key = self._record(RunMode.EXIT_CODE_ONLY, args, description)
        if key in self._failures:
            return False
        try:
            self._simulate(key, description)
        except NonZeroExit:
            return False
        return True

    # ============================================================================
    # Simulation
    # ============================================================================

    def _record(self, mode: RunMode, args: Sequence[str], description: str) -> tuple[str, ...]:
        key = tuple(args)
        self._calls.append((mode, key))
        if self._spawn_fails:
            raise SpawnFailed(description, "git", "No such file or directory")
        return key

    def _fail(self, description: str, code: int, stderr: str) -> NonZeroExit:
        return NonZeroExit(description, code=code, stderr=stderr, stdout="")

    def _resolve(self, ref: str) -> str | None:
        if ref == "HEAD":
            if self._current_branch is None:
                return None
            return self._local_branches.get(self._current_branch)
        if ref.startswith("refs/heads/"):
            return self._local_branches.get(ref.removeprefix("refs/heads/"))
        if ref in self._local_branches:
            return self._local_branches[ref]
        if ref in self._remote_branches:
            return self._remote_branches[ref]
        if ref in self._extra_refs:
            return self._extra_refs[ref]
        known = set(self._local_branches.values()) | set(self._remote_branches.values())
        if ref in known:
            return ref
        return None

    def _new_commit_id(self) -> str:
        self._commit_counter += 1
        return f"fake{self._commit_counter:036d}"

    def _simulate(self, args: tuple[str, ...], description: str) -> str:
        match args:
            case ("rev-parse", "--verify", "--quiet", ref):
                if self._resolve(ref) is None:
                    raise self._fail(description, 1, "")
                return ""
            case ("rev-parse", ref):
                commit = self._resolve(ref)
                if commit is None:
                    raise self._fail(description, 128, f"fatal: ambiguous argument '{ref}'")
                return commit
            case ("merge-base", first, second):
                base = self._merge_bases.get((first, second))
                if base is None:
                    base = self._merge_bases.get((second, first))
                if base is None:
                    raise self._fail(description, 1, "")
                return base
            case ("symbolic-ref", "-q", "HEAD"):
                if self._current_branch is None:
                    raise self._fail(description, 1, "")
                return ""
            case ("symbolic-ref", "--short", "HEAD"):
                if self._current_branch is None:
                    raise self._fail(description, 128, "fatal: ref HEAD is not a symbolic ref")
                return self._current_branch
            case ("status", "--porcelain"):
                return self._status
            case ("remote",):
                return "\n".join(self._remotes)
            case ("remote", "get-url", remote):
                if remote not in self._remotes:
                    raise self._fail(description, 2, f"error: No such remote '{remote}'")
                return self._remotes[remote]
            case ("remote", "add", remote, url):
                if remote in self._remotes:
                    raise self._fail(description, 3, f"error: remote {remote} already exists.")
                self._remotes[remote] = url
            case ("remote", "set-url", remote, url):
                if remote not in self._remotes:
                    raise self._fail(description, 2, f"error: No such remote '{remote}'")
                self._remotes[remote] = url
            case ("remote", "remove", remote):
                if remote not in self._remotes:
                    raise self._fail(description, 2, f"error: No such remote: '{remote}'")
                del self._remotes[remote]
                prefix = f"{remote}/"
                for name in [n for n in self._remote_branches if n.startswith(prefix)]:
                    del self._remote_branches[name]
            case ("branch", "--format=%(refname:short)"):
                names = sorted(self._local_branches)
                if self._current_branch is None:
                    names.insert(0, "(HEAD detached at 0000000)")
                return "\n".join(names)
            case ("branch", "-r", "--format=%(refname:short)"):
                return "\n".join(sorted(self._remote_branches))
            case ("branch", "--track", name, remote_ref):
                self._create_branch(name, remote_ref, description)
            case ("branch", "-d" | "-D", name):
                if name not in self._local_branches:
                    raise self._fail(description, 1, f"error: branch '{name}' not found")
                if name == self._current_branch:
                    raise self._fail(description, 1, f"error: cannot delete branch '{name}'")
                del self._local_branches[name]
            case ("branch", name):
                self._create_branch(name, "HEAD", description)
            case ("branch", name, start_point):
                self._create_branch(name, start_point, description)
            case ("checkout", "-b", name):
                self._create_branch(name, "HEAD", description)
                self._current_branch = name
            case ("checkout", name):
                if name not in self._local_branches:
                    raise self._fail(description, 1, f"error: pathspec '{name}' did not match")
                self._current_branch = name
            case ("add", "."):
                pass
            case ("commit", "-m", _message):
                if not self._status:
                    raise self._fail(description, 1, "nothing to commit, working tree clean")
                self._status = ""
                if self._current_branch is not None:
                    self._local_branches[self._current_branch] = self._new_commit_id()
            case ("reset", "--hard", "HEAD"):
                self._status = ""
            case ("reset", mode, "HEAD~"):
                parent = self._resolve("HEAD~")
                if parent is None:
                    raise self._fail(description, 128, "fatal: ambiguous argument 'HEAD~'")
                if self._current_branch is not None:
                    self._local_branches[self._current_branch] = parent
                if mode == "--hard":
                    self._status = ""
                elif mode in ("--soft", "--mixed"):
                    self._status = self._status or " M undone.txt"
            case ("push", "-u", remote, branch) | ("push", remote, branch):
                self._push(remote, branch, description)
            case ("push", remote, "--delete", branch):
                tracking = f"{remote}/{branch}"
                if tracking not in self._remote_branches:
                    raise self._fail(description, 1, "error: unable to delete: remote ref")
                del self._remote_branches[tracking]
            case _:
                pass
        return ""

    def _create_branch(self, name: str, start_point: str, description: str) -> None:
        if name in self._local_branches:
            raise self._fail(description, 128, f"fatal: a branch named '{name}' already exists")
        commit = self._resolve(start_point)
        if commit is None:
            raise self._fail(description, 128, f"fatal: not a valid object name: '{start_point}'")
        self._local_branches[name] = commit

    def _push(self, remote: str, branch: str, description: str) -> None:
        if remote not in self._remotes:
            raise self._fail(description, 128, f"fatal: '{remote}' is not a git repository")
        if branch not in self._local_branches:
            raise self._fail(description, 1, f"error: src refspec {branch} does not match any")
        self._remote_branches[f"{remote}/{branch}"] = self._local_branches[branch]
