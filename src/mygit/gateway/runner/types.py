"""Types shared by CommandRunner implementations."""

from enum import Enum


class RunMode(Enum):
    """How a child process is connected to the terminal.

    CAPTURED: stdout is captured and returned trimmed, stderr kept for errors.
    INTERACTIVE: the child inherits stdin/stdout/stderr (pagers, editors, progress).
    EXIT_CODE_ONLY: both streams are discarded; the answer is "exited zero?".
    """

    CAPTURED = "captured"
    INTERACTIVE = "interactive"
    EXIT_CODE_ONLY = "exit-code-only"
