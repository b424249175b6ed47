"""
CLI Common Utilities.

Shared consoles, the error boundary decorator, logging setup and output
helpers used across all CLI modules. Extracted to prevent circular imports.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import ui
from .config import Settings, load_settings
from .core.errors import TreeMeError
from .core.exit_codes import EXIT_CANCELLED, EXIT_PREREQ
from .shell import cd_marker
from .ui.panels import create_warning_panel

F = TypeVar("F", bound=Callable[..., Any])

# ─────────────────────────────────────────────────────────────────────────────
# Shared Consoles and State
# ─────────────────────────────────────────────────────────────────────────────

# stdout carries results and the cd marker; stderr carries errors and logs
console = Console()
err_console = Console(stderr=True)


class AppState:
    """Global application state for CLI flags."""

    debug: bool = False


state = AppState()


def configure_logging(debug: bool) -> None:
    """Route tree_me logs to stderr through rich; DEBUG with --debug."""
    logger = logging.getLogger("tree_me")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=err_console, show_path=False, show_time=debug, markup=False)
    )
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


def get_settings(ctx: typer.Context) -> Settings:
    """Return the Settings built by the root callback."""
    root = ctx.find_root()
    if not isinstance(root.obj, Settings):
        root.obj = load_settings()
    return cast(Settings, root.obj)


# ─────────────────────────────────────────────────────────────────────────────
# Error Boundary Decorator
# ─────────────────────────────────────────────────────────────────────────────


def handle_errors(func: F) -> F:
    """Decorator to catch TreeMeError and render beautifully."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except TreeMeError as e:
            ui.render_error(err_console, e, debug=state.debug)
            raise typer.Exit(e.exit_code)
        except KeyboardInterrupt:
            err_console.print("\n[dim]Operation cancelled.[/dim]")
            raise typer.Exit(EXIT_CANCELLED)
        except (typer.Exit, SystemExit):
            # Let typer exits pass through
            raise
        except Exception as e:
            # Unexpected errors
            if state.debug:
                err_console.print_exception()
            else:
                err_console.print(
                    create_warning_panel(
                        "Unexpected Error",
                        str(e),
                        "Run with --debug for full traceback",
                    )
                )
            raise typer.Exit(EXIT_PREREQ)

    return cast(F, wrapper)


# ─────────────────────────────────────────────────────────────────────────────
# Output Helpers
# ─────────────────────────────────────────────────────────────────────────────


def print_done(message: str, path: str) -> None:
    """Print a one-line success message ending in a path."""
    console.print(f"[green]✓[/green] {escape(message)}: {escape(path)}", soft_wrap=True)


def emit_cd_marker(path: str) -> None:
    """Tell the shell function to cd into ``path``.

    Written with plain echo so rich never wraps or styles the line.
    """
    typer.echo(cd_marker(path))
