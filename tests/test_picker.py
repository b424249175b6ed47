"""Tests for the numbered picker."""

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from tree_me.core.choices import Choice
from tree_me.core.errors import SelectionCancelledError
from tree_me.ui.picker import make_selector, select_choice


@pytest.fixture
def console():
    return Console(file=StringIO(), force_terminal=False, width=100)


@pytest.fixture
def choices():
    return [
        Choice(value="123", label="#123: Fix auth"),
        Choice(value="456", label="#456: Add mode"),
    ]


class TestSelectChoice:
    def test_returns_whole_choice(self, console, choices):
        with patch("tree_me.ui.picker.Prompt.ask", return_value="2"):
            picked = select_choice(console, "Select Pull Request", choices)
        assert picked == Choice(value="456", label="#456: Add mode")

    def test_renders_numbered_labels(self, console, choices):
        with patch("tree_me.ui.picker.Prompt.ask", return_value="1"):
            select_choice(console, "Select Pull Request", choices)

        output = console.file.getvalue()
        assert "Select Pull Request" in output
        assert "[1]" in output
        assert "#456: Add mode" in output

    def test_only_listed_numbers_are_accepted(self, console, choices):
        with patch("tree_me.ui.picker.Prompt.ask", return_value="1") as ask:
            select_choice(console, "Pick", choices)
        assert ask.call_args.kwargs["choices"] == ["1", "2"]

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_interrupt_cancels(self, console, choices, interrupt):
        with patch("tree_me.ui.picker.Prompt.ask", side_effect=interrupt):
            with pytest.raises(SelectionCancelledError):
                select_choice(console, "Pick", choices)


def test_make_selector_binds_console(console, choices):
    select = make_selector(console)
    with patch("tree_me.ui.picker.Prompt.ask", return_value="1"):
        assert select("Pick", choices).value == "123"
