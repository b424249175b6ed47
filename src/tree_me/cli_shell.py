"""CLI Shell Integration and Version Commands."""

import typer

from .cli_common import get_settings, handle_errors
from .shell import Shell, detect_shell, render_shellenv


@handle_errors
def shellenv_cmd(
    shell: Shell = typer.Option(
        None,
        "--shell",
        "-s",
        help="Shell to emit code for (default: detected from $SHELL)",
        case_sensitive=False,
    ),
) -> None:
    """Output shell function for auto-cd (source this).

    Add this to the END of your ~/.bashrc or ~/.zshrc:

        source <(wt shellenv)

    For fish: wt shellenv | source

    Note: For zsh, place this AFTER compinit to enable tab completion.
    """
    typer.echo(render_shellenv(shell or detect_shell()), nl=False)


def version_cmd(ctx: typer.Context) -> None:
    """Show version information."""
    typer.echo(f"wt version {get_settings(ctx).version}")
