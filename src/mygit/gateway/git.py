"""Typed git operations layered on a CommandRunner.

Each method maps to exactly one external invocation with a fixed argument
vector, picking the run mode that matches how its result is consumed.
"""

from mygit.gateway.runner.abc import CommandRunner

# Labels git prints in place of a branch name when HEAD is detached
NO_BRANCH_MARKERS = ("(no branch)", "HEAD detached")


class Git:
    """Thin, stateless facade over the git command line."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    # ============================================================================
    # Repository and remotes
    # ============================================================================

    def init(self) -> None:
        self._runner.run_interactive(["init"], description="git init")

    def init_at(self, directory: str) -> None:
        self._runner.run_interactive(["init", directory], description="git init <directory>")

    def remote_names(self) -> list[str]:
        output = self._runner.run_captured(["remote"], description="git remote")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def remote_url(self, remote: str) -> str | None:
        """Return the URL of ``remote``, or None if no such remote is configured."""
        if remote not in self.remote_names():
            return None
        url = self._runner.run_captured(
            ["remote", "get-url", remote], description="git remote get-url"
        )
        return url or None

    def remote_add(self, remote: str, url: str) -> None:
        self._runner.run_interactive(["remote", "add", remote, url], description="git remote add")

    def remote_set_url(self, remote: str, url: str) -> None:
        self._runner.run_interactive(
            ["remote", "set-url", remote, url], description="git remote set-url"
        )

    def remote_remove(self, remote: str) -> None:
        self._runner.run_interactive(["remote", "remove", remote], description="git remote remove")

    def fetch_prune(self, remote: str) -> None:
        self._runner.run_interactive(
            ["fetch", remote, "--prune"], description="git fetch --prune"
        )

    # ============================================================================
    # Working tree and commits
    # ============================================================================

    def stage_all(self) -> None:
        self._runner.run_interactive(["add", "."], description="git add .")

    def commit(self, message: str) -> None:
        self._runner.run_interactive(["commit", "-m", message], description="git commit")

    def status_porcelain(self) -> str:
        """Return machine-parsable working-tree status; empty means clean."""
        return self._runner.run_captured(
            ["status", "--porcelain"], description="git status --porcelain"
        )

    def has_uncommitted_changes(self) -> bool:
        return self.status_porcelain() != ""

    def reset_hard(self) -> None:
        """Discard every uncommitted change in the working tree and index."""
        self._runner.run_interactive(
            ["reset", "--hard", "HEAD"], description="git reset --hard HEAD"
        )

    def undo_last_commit(self, mode: str) -> None:
        """Move the current branch back one commit (mode: soft, mixed or hard)."""
        self._runner.run_interactive(["reset", f"--{mode}", "HEAD~"], description="git reset HEAD~")

    def commit_graph(self, *, max_count: int | None) -> str:
        args = ["log", "--graph", "--oneline", "--decorate", "--all", "--topo-order"]
        if max_count is not None:
            args.append(f"--max-count={max_count}")
        return self._runner.run_captured(args, description="git log --graph")

    # ============================================================================
    # Branches
    # ============================================================================

    def current_branch(self) -> str | None:
        """Return the checked-out branch name, or None when HEAD is detached."""
        if not self._runner.run_exit_code_only(
            ["symbolic-ref", "-q", "HEAD"], description="git symbolic-ref -q HEAD"
        ):
            return None
        name = self._runner.run_captured(
            ["symbolic-ref", "--short", "HEAD"], description="git symbolic-ref --short HEAD"
        )
        return name or None

    def list_local_branches(self) -> list[str]:
        """List local branch names, skipping the "(HEAD detached at ...)" pseudo-entry."""
        output = self._runner.run_captured(
            ["branch", "--format=%(refname:short)"], description="git branch"
        )
        branches = []
        for line in output.splitlines():
            name = line.strip()
            if not name or (
                name.startswith("(") and any(marker in name for marker in NO_BRANCH_MARKERS)
            ):
                continue
            branches.append(name)
        return branches

    def list_remote_branches(self) -> list[str]:
        """List remote-tracking branches as '<remote>/<name>', skipping '<remote>/HEAD'."""
        output = self._runner.run_captured(
            ["branch", "-r", "--format=%(refname:short)"], description="git branch -r"
        )
        branches = []
        for line in output.splitlines():
            name = line.strip()
            # "origin/HEAD" shortens to plain "origin" on recent git versions
            if "/" not in name or name.endswith("/HEAD") or "->" in name:
                continue
            branches.append(name)
        return branches

    def create_branch(self, name: str, start_point: str | None) -> None:
        args = ["branch", name]
        if start_point is not None:
            args.append(start_point)
        self._runner.run_interactive(args, description="git branch <name>")

    def create_tracking_branch(self, name: str, remote_ref: str) -> None:
        self._runner.run_interactive(
            ["branch", "--track", name, remote_ref], description="git branch --track"
        )

    def delete_branch(self, name: str, *, force: bool) -> None:
        flag = "-D" if force else "-d"
        self._runner.run_interactive(["branch", flag, name], description=f"git branch {flag}")

    def checkout(self, branch: str) -> None:
        self._runner.run_interactive(["checkout", branch], description="git checkout")

    def checkout_new(self, branch: str) -> None:
        self._runner.run_interactive(["checkout", "-b", branch], description="git checkout -b")

    def is_valid_branch_name(self, name: str) -> bool:
        return self._runner.run_exit_code_only(
            ["check-ref-format", "--branch", name], description="git check-ref-format"
        )

    # ============================================================================
    # Refs and history
    # ============================================================================

    def ref_exists(self, ref: str) -> bool:
        """Quietly check whether ``ref`` resolves; a missing ref is simply False."""
        return self._runner.run_exit_code_only(
            ["rev-parse", "--verify", "--quiet", ref], description="git rev-parse --verify"
        )

    def commit_id(self, ref: str) -> str:
        return self._runner.run_captured(["rev-parse", ref], description="git rev-parse")

    def merge_base(self, first: str, second: str) -> str:
        return self._runner.run_captured(
            ["merge-base", first, second], description="git merge-base"
        )

    # ============================================================================
    # Integration (result is the exit status)
    # ============================================================================

    def push(self, remote: str, branch: str, *, set_upstream: bool) -> None:
        args = ["push", "-u", remote, branch] if set_upstream else ["push", remote, branch]
        self._runner.run_interactive(args, description="git push")

    def push_delete(self, remote: str, branch: str) -> None:
        self._runner.run_interactive(
            ["push", remote, "--delete", branch], description="git push --delete"
        )

    def merge(self, ref: str) -> bool:
        """Merge ``ref`` into the current branch; False means it stopped (e.g. conflicts)."""
        return self._runner.run_exit_code_only(["merge", ref], description="git merge")

    def pull(self, remote: str, branch: str) -> bool:
        """Pull ``branch`` from ``remote``; False means it stopped (e.g. conflicts)."""
        return self._runner.run_exit_code_only(["pull", remote, branch], description="git pull")
