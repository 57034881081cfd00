"""Shared context builders for test scenarios.

Most command tests start from the same small repository: a checked-out
``main`` branch, optionally a configured ``origin`` remote. These builders keep
that setup in one place while leaving every piece overridable.
"""

from pathlib import Path

from mygit.core.context import MygitContext
from mygit.gateway.console.fake import FakeConsole
from mygit.gateway.runner.fake import FakeCommandRunner

MAIN_COMMIT = "a" * 40
ORIGIN_URL = "git@example.com:me/project.git"


def build_runner(
    *,
    with_remote: bool = True,
    local_branches: dict[str, str] | None = None,
    remote_branches: dict[str, str] | None = None,
    current_branch: str | None = "main",
    **kwargs,
) -> FakeCommandRunner:
    """Build a FakeCommandRunner around a repository with a ``main`` branch.

    Args:
        with_remote: Whether the ``origin`` remote is configured
        local_branches: Extra local branches, merged over ``{"main": MAIN_COMMIT}``
        remote_branches: Remote-tracking branches (default: none)
        current_branch: Checked-out branch (default: "main")
        **kwargs: Passed through to FakeCommandRunner
    """
    branches = {"main": MAIN_COMMIT}
    if local_branches is not None:
        branches.update(local_branches)
    return FakeCommandRunner(
        local_branches=branches,
        remote_branches=remote_branches,
        current_branch=current_branch,
        remotes={"origin": ORIGIN_URL} if with_remote else {},
        **kwargs,
    )


def build_context(
    runner: FakeCommandRunner,
    console: FakeConsole | None = None,
    *,
    cwd: Path | None = None,
) -> MygitContext:
    return MygitContext.for_test(runner=runner, console=console, cwd=cwd)
