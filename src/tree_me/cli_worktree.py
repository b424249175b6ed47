"""
CLI Worktree Commands.

Commands for checking out, creating, listing, removing and pruning
worktrees under ``$WORKTREE_ROOT/<repo>/<branch>``.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer
from rich import box
from rich.table import Table
from rich.text import Text

from .application import worktrees as flows
from .bootstrap import get_default_adapters
from .cli_common import (
    console,
    emit_cd_marker,
    get_settings,
    handle_errors,
    print_done,
)
from .core.worktrees import WorktreeInfo, is_inside
from .ui import make_selector
from .ui.panels import create_warning_panel

# Terminal width threshold for wide mode tables
WIDE_MODE_THRESHOLD = 110


# ─────────────────────────────────────────────────────────────────────────────
# Pure Functions
# ─────────────────────────────────────────────────────────────────────────────


def build_worktree_list_data(
    worktrees: list[WorktreeInfo],
    worktree_root: str,
) -> dict[str, Any]:
    """Build worktree list data for JSON output.

    Args:
        worktrees: Parsed worktree listing, main worktree first
        worktree_root: Configured root directory for new worktrees

    Returns:
        Dictionary with worktrees, count, and worktree_root
    """
    return {
        "worktrees": [asdict(wt) for wt in worktrees],
        "count": len(worktrees),
        "worktree_root": worktree_root,
    }


def render_worktrees(worktrees: list[WorktreeInfo], cwd: Path) -> None:
    """Render worktrees in a responsive table, marking the current one."""
    wide_mode = console.width >= WIDE_MODE_THRESHOLD

    table = Table(
        title="[bold cyan]Git Worktrees[/bold cyan]",
        box=box.ROUNDED,
        header_style="bold cyan",
        show_lines=False,
        expand=True,
        padding=(0, 1),
    )

    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Branch", style="cyan", no_wrap=True)

    if wide_mode:
        table.add_column("Path", style="dim", overflow="ellipsis", ratio=2)
        table.add_column("Status", style="dim", no_wrap=True, width=12)
    else:
        table.add_column("Path", style="dim", overflow="ellipsis", max_width=40)

    for idx, wt in enumerate(worktrees, 1):
        branch_display = Text()
        if is_inside(wt.path, cwd):
            branch_display.append("● ", style="green")
        if wt.branch:
            branch_display.append(wt.branch, style="cyan")
        else:
            branch_display.append("detached", style="yellow")

        status = wt.status or ("main" if idx == 1 else "active")
        status_style = {
            "main": "bold",
            "active": "green",
            "detached": "yellow",
            "bare": "dim",
        }.get(status, "dim")

        if wide_mode:
            table.add_row(
                str(idx), branch_display, Text(wt.path), Text(status, style=status_style)
            )
        else:
            table.add_row(str(idx), branch_display, Text(wt.path))

    console.print()
    console.print(table)
    console.print()


# ─────────────────────────────────────────────────────────────────────────────
# Worktree Commands
# ─────────────────────────────────────────────────────────────────────────────


@handle_errors
def checkout_cmd(
    ctx: typer.Context,
    branch: str = typer.Argument(None, help="Branch to check out (omit to pick interactively)"),
) -> None:
    """Checkout existing branch in new worktree."""
    settings = get_settings(ctx)
    adapters = get_default_adapters()

    result = flows.checkout_branch(
        adapters.git_client, settings, branch, make_selector(console)
    )

    if result.created:
        print_done("Worktree created at", result.path)
    else:
        print_done("Worktree already exists", result.path)
    emit_cd_marker(result.path)


@handle_errors
def create_cmd(
    ctx: typer.Context,
    branch: str = typer.Argument(..., help="Name of the new branch"),
    base: str = typer.Argument(None, help="Base branch (default: origin's default branch)"),
) -> None:
    """Create new branch in worktree (default base: main/master)."""
    settings = get_settings(ctx)
    adapters = get_default_adapters()

    result = flows.create_branch(adapters.git_client, settings, branch, base)

    if result.created:
        print_done(f"Worktree created from {result.base} at", result.path)
    else:
        print_done("Worktree already exists", result.path)
    emit_cd_marker(result.path)


@handle_errors
def list_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List all worktrees."""
    settings = get_settings(ctx)
    worktree_list = get_default_adapters().git_client.list_worktrees()

    if json_output:
        data = build_worktree_list_data(worktree_list, str(settings.worktree_root))
        typer.echo(json.dumps(data, indent=2))
        return

    if not worktree_list:
        console.print(
            create_warning_panel(
                "No Worktrees",
                "No git worktrees found for this repository.",
                "Create one with: wt create <branch>",
            )
        )
        return

    render_worktrees(worktree_list, Path.cwd())


@handle_errors
def remove_cmd(
    branch: str = typer.Argument(None, help="Branch whose worktree to remove (omit to pick)"),
) -> None:
    """Remove a worktree."""
    adapters = get_default_adapters()

    result = flows.remove_worktree(
        adapters.git_client, branch, make_selector(console), Path.cwd()
    )

    print_done("Removed worktree", result.path)

    # The shell is sitting in a directory that no longer exists
    if result.cd_path:
        emit_cd_marker(result.cd_path)


@handle_errors
def prune_cmd() -> None:
    """Remove worktree administrative files."""
    flows.prune_worktrees(get_default_adapters().git_client)
    console.print("[green]✓[/green] Pruned stale worktree administrative files")
