"""Abstract interface for interactive terminal input.

Workflows never read from the terminal directly; they ask the Console. Tests
substitute FakeConsole with scripted answers.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

from mygit.gateway.console.types import SelectOption

T = TypeVar("T")


class Console(ABC):
    """Text input, confirmation, and single-choice selection."""

    @abstractmethod
    def prompt(self, message: str) -> str:
        """Ask for a line of text.

        Returns:
            The answer with surrounding whitespace removed (may be empty)
        """
        ...

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def choose(
        self, message: str, options: Sequence[SelectOption[T]], *, default_index: int
    ) -> T | None:
        """Present a short numbered list and return the chosen value.

        Returns:
            The selected option's value, or None if the user cancelled
        """
        ...

    @abstractmethod
    def fuzzy_select(self, message: str, options: Sequence[SelectOption[T]]) -> T | None:
        """Present a filterable list and return the chosen value.

        Returns:
            The selected option's value, or None if the user cancelled
        """
        ...
