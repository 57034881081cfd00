"""Production CommandRunner using subprocess."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from mygit.errors import NonZeroExit, SpawnFailed
from mygit.gateway.runner.abc import CommandRunner

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Spawns a fresh child process for every call."""

    def __init__(self, *, executable: str, cwd: Path | None) -> None:
        """Create a runner for one executable.

        Args:
            executable: Program to launch (e.g. "git")
            cwd: Working directory for child processes, or None to inherit
        """
        self._executable = executable
        self._cwd = cwd

    def _spawn(
        self, args: Sequence[str], *, description: str, capture: bool, discard: bool
    ) -> subprocess.CompletedProcess[str]:
        cmd = [self._executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        if discard:
            stdout = subprocess.DEVNULL
            stderr = subprocess.DEVNULL
        elif capture:
            stdout = subprocess.PIPE
            stderr = subprocess.PIPE
        else:
            stdout = None
            stderr = None
        try:
            result = subprocess.run(
                cmd,
                cwd=self._cwd,
                stdout=stdout,
                stderr=stderr,
                text=True,
                check=False,
            )
        except OSError as e:
            raise SpawnFailed(description, self._executable, e.strerror or str(e)) from e
        logger.debug("Exit status %d: %s", result.returncode, " ".join(cmd))
        return result

    def run_captured(self, args: Sequence[str], *, description: str) -> str:
        result = self._spawn(args, description=description, capture=True, discard=False)
        stdout = (result.stdout or "").strip()
        if result.returncode != 0:
            raise NonZeroExit(
                description,
                code=result.returncode,
                stderr=(result.stderr or "").strip(),
                stdout=stdout,
            )
        return stdout

    def run_interactive(self, args: Sequence[str], *, description: str) -> None:
        result = self._spawn(args, description=description, capture=False, discard=False)
        if result.returncode != 0:
            raise NonZeroExit(description, code=result.returncode, stderr="", stdout="")

    def run_exit_code_only(self, args: Sequence[str], *, description: str) -> bool:
        result = self._spawn(args, description=description, capture=False, discard=True)
        return result.returncode == 0
