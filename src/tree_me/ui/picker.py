"""
Numbered single-select picker.

Shows a table of choices and asks for the number of one of them. The
chosen Choice record is returned whole, so callers never map a label back
to its value by position.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from tree_me.core.choices import Choice, Selector
from tree_me.core.errors import SelectionCancelledError


def select_choice(console: Console, title: str, choices: Sequence[Choice[Any]]) -> Choice[Any]:
    """Ask the user to pick one of ``choices``.

    Raises:
        SelectionCancelledError: The prompt was interrupted (Ctrl-C / EOF).
    """
    table = Table(
        title=f"[bold cyan]{title}[/bold cyan]",
        box=box.SIMPLE,
        show_header=False,
        padding=(0, 2),
        expand=False,
    )
    table.add_column("Option", style="yellow", justify="right")
    table.add_column("Item", style="white")

    for idx, choice in enumerate(choices, 1):
        table.add_row(f"[{idx}]", escape(choice.label))

    console.print(table)

    valid = [str(i) for i in range(1, len(choices) + 1)]
    try:
        answer = Prompt.ask(
            "[cyan]Select number[/cyan]",
            console=console,
            choices=valid,
            show_choices=False,
            default="1",
        )
    except (KeyboardInterrupt, EOFError):
        console.print()
        raise SelectionCancelledError()

    return choices[int(answer) - 1]


def make_selector(console: Console) -> Selector:
    """Bind :func:`select_choice` to ``console``."""

    def select(title: str, choices: Sequence[Choice[Any]]) -> Choice[Any]:
        return select_choice(console, title, choices)

    return select
