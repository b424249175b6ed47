"""
CLI Pull/Merge Request Commands.

``wt pr`` uses the gh CLI and ``wt mr`` the glab CLI to check out a review
into a ``pr-<n>`` / ``mr-<n>`` worktree.
"""

import typer

from .application.worktrees import WorktreeResult, checkout_review
from .bootstrap import get_default_adapters
from .cli_common import console, emit_cd_marker, get_settings, handle_errors, print_done
from .core.remote import RemoteType
from .ui import make_selector

# Command that serves each hosting provider
REVIEW_COMMANDS = {
    RemoteType.GITHUB: ("wt pr", "pull requests"),
    RemoteType.GITLAB: ("wt mr", "merge requests"),
}


def _remote_hint(requested: RemoteType, detected: RemoteType | None) -> str | None:
    """Suggest the other command when origin is hosted on the other provider."""
    if detected is None or detected is RemoteType.UNKNOWN or detected is requested:
        return None
    command, noun = REVIEW_COMMANDS[detected]
    return f"origin looks like a {detected.value} remote; use '{command}' for {noun}"


def _run_review(ctx: typer.Context, reference: str | None, remote_type: RemoteType) -> None:
    settings = get_settings(ctx)
    adapters = get_default_adapters()
    review = adapters.review_client(remote_type)

    result: WorktreeResult = checkout_review(
        adapters.git_client, review, settings, reference, make_selector(console)
    )

    hint = _remote_hint(remote_type, result.remote_type)
    if hint:
        console.print(f"[yellow]→ {hint}[/yellow]")

    if result.created:
        label = review.branch_prefix.upper()
        print_done(f"{label} #{result.review_number} checked out at", result.path)
    else:
        print_done("Worktree already exists", result.path)
    emit_cd_marker(result.path)


@handle_errors
def pr_cmd(
    ctx: typer.Context,
    reference: str = typer.Argument(None, help="PR number or URL (omit to pick interactively)"),
) -> None:
    """Checkout GitHub PR in worktree (uses gh CLI).

    Examples:
        wt pr                                        # Interactive PR selection
        wt pr 123                                    # GitHub PR number
        wt pr https://github.com/org/repo/pull/123   # GitHub PR URL
    """
    _run_review(ctx, reference, RemoteType.GITHUB)


@handle_errors
def mr_cmd(
    ctx: typer.Context,
    reference: str = typer.Argument(None, help="MR number or URL (omit to pick interactively)"),
) -> None:
    """Checkout GitLab MR in worktree (uses glab CLI).

    Examples:
        wt mr                                                   # Interactive MR selection
        wt mr 123                                               # GitLab MR number
        wt mr https://gitlab.com/org/repo/-/merge_requests/123  # GitLab MR URL
    """
    _run_review(ctx, reference, RemoteType.GITLAB)
