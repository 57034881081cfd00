"""Tests for the console adapters."""

import click
import pytest
from click.testing import CliRunner

from mygit.gateway.console.fake import FakeConsole
from mygit.gateway.console.real import RealConsole, fuzzy_filter
from mygit.gateway.console.types import SelectOption

OPTIONS = [
    SelectOption(label="feature-x (local)", value="feature-x"),
    SelectOption(label="fix-typo (origin)", value="origin/fix-typo"),
    SelectOption(label="main (local)", value="main"),
]


def test_fuzzy_filter_matches_scattered_letters_case_insensitively() -> None:
    matches = fuzzy_filter("FtX", OPTIONS)

    assert [option.value for option in matches] == ["feature-x"]


def test_fuzzy_filter_ranks_the_closest_label_first() -> None:
    matches = fuzzy_filter("typo", OPTIONS)

    assert matches[0].value == "origin/fix-typo"


def test_fuzzy_filter_drops_labels_without_a_match() -> None:
    assert fuzzy_filter("zzz", OPTIONS) == []


def test_fuzzy_filter_with_blank_query_keeps_everything() -> None:
    assert fuzzy_filter("  ", OPTIONS) == OPTIONS


def _run_console(action, answers: str):
    """Run ``action`` inside a click command so prompts read ``answers``."""
    captured = {}

    @click.command()
    def command() -> None:
        captured["value"] = action(RealConsole())

    result = CliRunner().invoke(command, input=answers, catch_exceptions=False)
    assert result.exit_code == 0
    return captured["value"], result.output


def test_real_fuzzy_select_auto_picks_unique_match() -> None:
    value, output = _run_console(lambda c: c.fuzzy_select("Pick", OPTIONS), "typo\n")

    assert value == "origin/fix-typo"
    assert "Selected: fix-typo (origin)" in output


def test_real_fuzzy_select_accepts_number() -> None:
    value, _ = _run_console(lambda c: c.fuzzy_select("Pick", OPTIONS), "3\n")

    assert value == "main"


def test_real_fuzzy_select_with_no_options_returns_without_prompting() -> None:
    value, output = _run_console(lambda c: c.fuzzy_select("Pick", []), "")

    assert value is None
    assert "Nothing to choose from." in output
    assert "Number or filter text" not in output


def test_real_fuzzy_select_empty_answer_cancels() -> None:
    value, _ = _run_console(lambda c: c.fuzzy_select("Pick", OPTIONS), "\n")

    assert value is None


def test_real_choose_uses_default_and_zero_cancels() -> None:
    default_value, _ = _run_console(lambda c: c.choose("Pick", OPTIONS, default_index=2), "\n")
    cancelled, _ = _run_console(lambda c: c.choose("Pick", OPTIONS, default_index=2), "0\n")

    assert default_value == "main"
    assert cancelled is None


def test_real_prompt_strips_answer() -> None:
    value, _ = _run_console(lambda c: c.prompt("Name"), "  topic  \n")

    assert value == "topic"


def test_fake_console_replays_answers_and_records_prompts() -> None:
    console = FakeConsole(
        prompt_responses=["hello"], confirm_responses=[True], select_responses=["main"]
    )

    assert console.prompt("Message") == "hello"
    assert console.confirm("Sure?", default=False) is True
    assert console.fuzzy_select("Branch", OPTIONS) == "main"

    assert console.prompts == ["Message"]
    assert console.confirmations == ["Sure?"]
    assert console.selections == [("Branch", [option.label for option in OPTIONS])]
    assert console.interaction_count == 3


def test_fake_console_fails_on_unscripted_prompt() -> None:
    console = FakeConsole()

    with pytest.raises(AssertionError, match="Unexpected confirmation"):
        console.confirm("Delete?", default=False)


def test_fake_console_rejects_value_that_is_not_offered() -> None:
    console = FakeConsole(select_responses=["develop"])

    with pytest.raises(AssertionError, match="not offered"):
        console.fuzzy_select("Branch", OPTIONS)
