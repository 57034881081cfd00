"""Error taxonomy shared by every layer of mygit.

Every error raised on purpose derives from MygitError. The root CLI group is
the only place that turns one into a process exit status.
"""


class MygitError(Exception):
    """Base class for errors that are reported to the user and end the command."""

    @property
    def message(self) -> str:
        return str(self)


class ConfigError(MygitError):
    """The configuration file could not be read or holds invalid values."""


class ValidationFailure(MygitError):
    """User input failed a local precondition before any side effect ran.

    Examples: an empty branch name, a name that is already taken, a branch that
    does not exist, or an attempt to delete the checked-out branch.
    """


class CommandError(MygitError):
    """The external tool could not be run or reported an unexpected failure."""

    def __init__(self, description: str, message: str) -> None:
        super().__init__(message)
        self.description = description


class SpawnFailed(CommandError):
    """The executable could not be launched (missing binary, permissions)."""

    def __init__(self, description: str, executable: str, reason: str) -> None:
        super().__init__(
            description,
            f'Failed to run "{description}": could not start {executable!r} ({reason})',
        )
        self.executable = executable
        self.reason = reason


class NonZeroExit(CommandError):
    """A command that is expected to always succeed exited with a non-zero status."""

    def __init__(self, description: str, *, code: int, stderr: str, stdout: str) -> None:
        parts = [f'Command "{description}" failed (exit code {code})']
        if stderr:
            parts.append(f"stderr:\n{stderr}")
        if stdout:
            parts.append(f"stdout:\n{stdout}")
        super().__init__(description, "\n".join(parts))
        self.code = code
        self.stderr = stderr
        self.stdout = stdout
