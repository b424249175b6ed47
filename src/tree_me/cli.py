#!/usr/bin/env python3
"""
wt - Git worktree helper

Git-like worktree management with an organized directory structure:
worktrees live at $WORKTREE_ROOT/<repo>/<branch> (default ~/dev/worktrees).

This module serves as the thin orchestrator that composes commands from:
- cli_worktree.py: checkout, create, list, remove, prune
- cli_review.py: pr, mr
- cli_shell.py: shellenv, version
"""

import typer
from rich.panel import Panel

from .cli_common import configure_logging, console, state
from .cli_review import mr_cmd, pr_cmd
from .cli_shell import shellenv_cmd, version_cmd
from .cli_worktree import (
    checkout_cmd,
    create_cmd,
    list_cmd,
    prune_cmd,
    remove_cmd,
)
from .config import load_settings

# ─────────────────────────────────────────────────────────────────────────────
# App Configuration
# ─────────────────────────────────────────────────────────────────────────────

app = typer.Typer(
    name="wt",
    help="Git worktree helper with organized directory structure.",
    no_args_is_help=False,
    rich_markup_mode="rich",
)


# ─────────────────────────────────────────────────────────────────────────────
# Global Callback (--debug flag)
# ─────────────────────────────────────────────────────────────────────────────


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show git commands and full tracebacks for troubleshooting.",
        is_eager=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        is_eager=True,
    ),
) -> None:
    """
    [bold cyan]wt[/bold cyan] - Git worktree helper

    Worktrees are organized at [cyan]$WORKTREE_ROOT/<repo>/<branch>[/cyan]
    (default ~/dev/worktrees). Set WORKTREE_ROOT to customize the location.
    """
    state.debug = debug
    configure_logging(debug)
    ctx.obj = load_settings()

    if version:
        console.print(
            Panel(
                f"[cyan]wt[/cyan] [dim]v{ctx.obj.version}[/dim]\n"
                "[dim]Git worktree helper with organized directory structure[/dim]",
                border_style="cyan",
            )
        )
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# ─────────────────────────────────────────────────────────────────────────────
# Register Commands from Domain Modules
# ─────────────────────────────────────────────────────────────────────────────

# Worktree commands
app.command(name="checkout")(checkout_cmd)
app.command(name="co", hidden=True)(checkout_cmd)
app.command(name="create")(create_cmd)
app.command(name="list")(list_cmd)
app.command(name="ls", hidden=True)(list_cmd)
app.command(name="remove")(remove_cmd)
app.command(name="rm", hidden=True)(remove_cmd)
app.command(name="prune")(prune_cmd)

# Pull/merge request commands
app.command(name="pr")(pr_cmd)
app.command(name="mr")(mr_cmd)

# Shell integration
app.command(name="shellenv")(shellenv_cmd)
app.command(name="version")(version_cmd)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
