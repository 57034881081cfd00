"""Abstract interface for invoking the external version-control tool.

The runner is the sole gateway to the external process. Everything above it
(typed git operations, branch resolution, sync classification, workflows)
receives a runner instance instead of spawning processes itself, which lets
tests substitute FakeCommandRunner.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from mygit.gateway.runner.types import RunMode


class CommandRunner(ABC):
    """Runs one external-tool invocation per call. No retries, no shared state."""

    @abstractmethod
    def run_captured(self, args: Sequence[str], *, description: str) -> str:
        """Run the tool and return its stdout trimmed of surrounding whitespace.

        Args:
            args: Argument vector passed to the tool (without the executable)
            description: Short human description used in error messages

        Returns:
            Captured stdout, stripped

        Raises:
            SpawnFailed: If the executable could not be launched
            NonZeroExit: If the process exited with a non-zero status
        """
        ...

    @abstractmethod
    def run_interactive(self, args: Sequence[str], *, description: str) -> None:
        """Run the tool attached to the parent's standard streams.

        Raises:
            SpawnFailed: If the executable could not be launched
            NonZeroExit: If the process exited with a non-zero status
        """
        ...

    @abstractmethod
    def run_exit_code_only(self, args: Sequence[str], *, description: str) -> bool:
        """Run the tool with both streams discarded.

        A non-zero exit is an ordinary answer here (a ref that does not exist,
        a merge that stopped on conflicts), never an error.

        Returns:
            True if the process exited with status zero

        Raises:
            SpawnFailed: If the executable could not be launched
        """
        ...

    def run(self, args: Sequence[str], *, mode: RunMode, description: str) -> str | bool | None:
        """Dispatch to the method matching ``mode``."""
        if mode is RunMode.CAPTURED:
            return self.run_captured(args, description=description)
        if mode is RunMode.INTERACTIVE:
            return self.run_interactive(args, description=description)
        return self.run_exit_code_only(args, description=description)
