from dataclasses import dataclass
from enum import Enum


class WorkflowOutcome(Enum):
    """Result of one interactive workflow step.

    CONTINUE: proceed with the remaining steps.
    ABORT: the user declined or the action is unsafe; stop without error.
    FAIL: the action could not be completed and the user must finish it manually.
    """

    CONTINUE = "continue"
    ABORT = "abort"
    FAIL = "fail"


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a whole workflow plus the message explaining a FAIL."""

    outcome: WorkflowOutcome
    message: str

    @staticmethod
    def done() -> "WorkflowResult":
        return WorkflowResult(outcome=WorkflowOutcome.CONTINUE, message="")

    @staticmethod
    def aborted(message: str) -> "WorkflowResult":
        return WorkflowResult(outcome=WorkflowOutcome.ABORT, message=message)

    @staticmethod
    def failed(message: str) -> "WorkflowResult":
        return WorkflowResult(outcome=WorkflowOutcome.FAIL, message=message)

    @property
    def exit_code(self) -> int:
        return 1 if self.outcome is WorkflowOutcome.FAIL else 0
