"""Render TreeMeError instances for the terminal."""

from __future__ import annotations

from rich.console import Console

from tree_me.core.errors import SelectionCancelledError, TreeMeError

from .panels import create_error_panel

_TITLES = {
    "UsageError": "Invalid Input",
    "PrerequisiteError": "Missing Tool",
    "ToolError": "Command Failed",
    "NothingToSelectError": "Nothing Found",
    "BranchNotFoundError": "Branch Not Found",
    "WorktreeNotFoundError": "Worktree Not Found",
}


def _title_for(error: TreeMeError) -> str:
    for cls in type(error).__mro__:
        if cls.__name__ in _TITLES:
            return _TITLES[cls.__name__]
    return "Error"


def render_error(console: Console, error: TreeMeError, debug: bool = False) -> None:
    """Print ``error`` as a red panel; debug mode adds the captured context."""
    if isinstance(error, SelectionCancelledError):
        console.print(f"[dim]{error.user_message.capitalize()}.[/dim]")
        return

    details = (error.debug_context or "") if debug else ""
    console.print(
        create_error_panel(
            _title_for(error),
            error.user_message,
            error.suggested_action,
            details,
        )
    )
