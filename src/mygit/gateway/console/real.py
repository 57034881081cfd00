"""Production Console built on click prompts."""

from collections.abc import Sequence
from typing import TypeVar

import click
from textual.fuzzy import Matcher

from mygit.gateway.console.abc import Console
from mygit.gateway.console.types import SelectOption

T = TypeVar("T")


def fuzzy_filter(query: str, options: Sequence[SelectOption[T]]) -> list[SelectOption[T]]:
    """Narrow ``options`` to those whose label fuzzily matches ``query``.

    Labels are scored with textual's fuzzy matcher and returned best first.
    Options with equal scores keep their original order.
    """
    needle = query.strip()
    if not needle:
        return list(options)
    matcher = Matcher(needle)
    scored: list[tuple[float, SelectOption[T]]] = []
    for option in options:
        score = matcher.match(option.label)
        if score > 0:
            scored.append((score, option))
    scored.sort(key=lambda item: item[0], reverse=True)
    return [option for _score, option in scored]


class RealConsole(Console):
    """Interactive console writing to stderr, so stdout stays clean for output."""

    def prompt(self, message: str) -> str:
        answer = click.prompt(message, default="", show_default=False, err=True)
        return str(answer).strip()

    def confirm(self, message: str, *, default: bool) -> bool:
        return click.confirm(message, default=default, err=True)

    def choose(
        self, message: str, options: Sequence[SelectOption[T]], *, default_index: int
    ) -> T | None:
        click.echo(message, err=True)
        for number, option in enumerate(options, start=1):
            click.echo(f"  {number}) {option.label}", err=True)
        answer = click.prompt(
            "Choice",
            type=click.IntRange(0, len(options)),
            default=default_index + 1,
            err=True,
        )
        if answer == 0:
            return None
        return options[answer - 1].value

    def fuzzy_select(self, message: str, options: Sequence[SelectOption[T]]) -> T | None:
        if not options:
            click.echo(click.style("Nothing to choose from.", dim=True), err=True)
            return None
        candidates = list(options)
        while True:
            if not candidates:
                click.echo(click.style("No match. Showing every option again.", dim=True), err=True)
                candidates = list(options)
            click.echo(message, err=True)
            for number, option in enumerate(candidates, start=1):
                click.echo(f"  {number:>3}) {option.label}", err=True)
            answer = self.prompt("Number or filter text (empty to cancel)")
            if not answer:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(candidates):
                return candidates[int(answer) - 1].value
            candidates = fuzzy_filter(answer, candidates)
            if len(candidates) == 1:
                click.echo(f"Selected: {candidates[0].label}", err=True)
                return candidates[0].value
