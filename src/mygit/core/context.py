"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from mygit.cli.config import MygitConfig
from mygit.core.branches import BranchResolver
from mygit.core.sync_status import SyncStatusClassifier
from mygit.gateway.console.abc import Console
from mygit.gateway.console.fake import FakeConsole
from mygit.gateway.console.real import RealConsole
from mygit.gateway.git import Git
from mygit.gateway.runner.abc import CommandRunner
from mygit.gateway.runner.fake import FakeCommandRunner
from mygit.gateway.runner.real import RealCommandRunner


@dataclass(frozen=True)
class MygitContext:
    """Immutable context holding all dependencies for mygit workflows.

    Created at the CLI entry point and threaded through every workflow.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    console: Console
    config: MygitConfig
    cwd: Path  # Working directory at CLI invocation

    @property
    def remote(self) -> str:
        return self.config.remote

    @property
    def resolver(self) -> BranchResolver:
        return BranchResolver(self.git, remote=self.config.remote)

    @property
    def classifier(self) -> SyncStatusClassifier:
        return SyncStatusClassifier(self.git, remote=self.config.remote)

    @staticmethod
    def for_test(
        *,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        config: MygitConfig | None = None,
        cwd: Path | None = None,
    ) -> "MygitContext":
        """Create a context around fakes.

        Args:
            runner: Defaults to an empty FakeCommandRunner
            console: Defaults to a FakeConsole with no scripted answers, which fails
                on any prompt
            config: Defaults to MygitConfig.defaults()
            cwd: Defaults to Path("/test/default/cwd") to prevent accidental use of
                the real working directory
        """
        return MygitContext(
            git=Git(runner if runner is not None else FakeCommandRunner()),
            console=console if console is not None else FakeConsole(),
            config=config if config is not None else MygitConfig.defaults(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context(config: MygitConfig, *, cwd: Path) -> MygitContext:
    """Build the production context: real subprocess runner and click console."""
    runner = RealCommandRunner(executable=config.git_executable, cwd=cwd)
    return MygitContext(git=Git(runner), console=RealConsole(), config=config, cwd=cwd)
