"""Fake Console implementation for testing."""

from collections.abc import Sequence
from typing import Any, TypeVar

from mygit.gateway.console.abc import Console
from mygit.gateway.console.types import SelectOption

T = TypeVar("T")


class FakeConsole(Console):
    """Console that replays scripted answers in order.

    This class has NO public setup methods. All answers are provided via constructor.
    Any prompt without a remaining scripted answer fails the test with AssertionError,
    so an empty FakeConsole asserts that a code path never prompts.

    ``select_responses`` feeds both ``choose`` and ``fuzzy_select``; each entry is the
    value to return (not the label), or None to simulate cancelling.
    """

    def __init__(
        self,
        *,
        prompt_responses: list[str] | None = None,
        confirm_responses: list[bool] | None = None,
        select_responses: list[Any] | None = None,
    ) -> None:
        self._prompt_responses = list(prompt_responses) if prompt_responses else []
        self._confirm_responses = list(confirm_responses) if confirm_responses else []
        self._select_responses = list(select_responses) if select_responses else []

        self._prompts: list[str] = []
        self._confirmations: list[str] = []
        self._selections: list[tuple[str, list[str]]] = []

    @property
    def prompts(self) -> list[str]:
        return list(self._prompts)

    @property
    def confirmations(self) -> list[str]:
        return list(self._confirmations)

    @property
    def selections(self) -> list[tuple[str, list[str]]]:
        """(message, option labels) of every selection presented."""
        return list(self._selections)

    @property
    def interaction_count(self) -> int:
        return len(self._prompts) + len(self._confirmations) + len(self._selections)

    def prompt(self, message: str) -> str:
        self._prompts.append(message)
        if not self._prompt_responses:
            raise AssertionError(f"Unexpected text prompt: {message!r}")
        return self._prompt_responses.pop(0).strip()

    def confirm(self, message: str, *, default: bool) -> bool:
        self._confirmations.append(message)
        if not self._confirm_responses:
            raise AssertionError(f"Unexpected confirmation: {message!r}")
        return self._confirm_responses.pop(0)

    def choose(
        self, message: str, options: Sequence[SelectOption[T]], *, default_index: int
    ) -> T | None:
        return self._select(message, options)

    def fuzzy_select(self, message: str, options: Sequence[SelectOption[T]]) -> T | None:
        return self._select(message, options)

    def _select(self, message: str, options: Sequence[SelectOption[T]]) -> T | None:
        self._selections.append((message, [option.label for option in options]))
        if not self._select_responses:
            raise AssertionError(f"Unexpected selection: {message!r}")
        value = self._select_responses.pop(0)
        if value is not None and value not in [option.value for option in options]:
            raise AssertionError(f"Scripted selection {value!r} is not offered by {message!r}")
        return value
