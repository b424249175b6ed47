"""Panel builders for consistent output styling."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text


def create_warning_panel(title: str, message: str, hint: str = "") -> Panel:
    """Create a warning panel with yellow styling."""
    body = Text()
    body.append(message, style="bold")
    if hint:
        body.append("\n\n")
        body.append("→ ", style="dim")
        body.append(hint, style="yellow")
    return Panel(
        body,
        title=f"[bold yellow]⚠ {title}[/bold yellow]",
        border_style="yellow",
        padding=(0, 1),
    )


def create_error_panel(title: str, message: str, hint: str = "", details: str = "") -> Panel:
    """Create an error panel with red styling."""
    body = Text()
    body.append(message, style="bold")
    if hint:
        body.append("\n\n")
        body.append("→ Fix: ", style="green")
        body.append(hint)
    if details:
        body.append("\n\n")
        body.append(details, style="dim")
    return Panel(
        body,
        title=f"[bold red]✖ {title}[/bold red]",
        border_style="red",
        padding=(0, 1),
    )
