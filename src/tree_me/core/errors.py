"""
Error hierarchy for the wt CLI.

Every error carries a user-facing message, an optional suggested action and
the exit code the CLI boundary should terminate with. Raise these from
application and adapter code; the ``handle_errors`` decorator renders them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import (
    EXIT_CANCELLED,
    EXIT_NOT_FOUND,
    EXIT_PREREQ,
    EXIT_TOOL,
    EXIT_USAGE,
)


@dataclass(eq=False)
class TreeMeError(Exception):
    """Base error for all wt failures."""

    user_message: str = ""
    suggested_action: str = ""
    debug_context: str | None = None
    exit_code: int = EXIT_NOT_FOUND

    def __str__(self) -> str:
        return self.user_message


# ─────────────────────────────────────────────────────────────────────────────
# Usage
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class UsageError(TreeMeError):
    """Invalid user input."""

    exit_code: int = EXIT_USAGE


@dataclass(eq=False)
class InvalidReferenceError(UsageError):
    """Input is neither a PR/MR number nor a recognised PR/MR URL."""

    reference: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"invalid PR/MR number or URL: {self.reference}"
        if not self.suggested_action:
            self.suggested_action = (
                "Pass a number (123), a GitHub pull URL or a GitLab merge request URL"
            )


# ─────────────────────────────────────────────────────────────────────────────
# Prerequisites
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class PrerequisiteError(TreeMeError):
    """A required external program is missing."""

    exit_code: int = EXIT_PREREQ


@dataclass(eq=False)
class GitNotFoundError(PrerequisiteError):
    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = "'git' not found"
        if not self.suggested_action:
            self.suggested_action = "Install git and make sure it is on your PATH"


@dataclass(eq=False)
class ReviewToolNotFoundError(PrerequisiteError):
    """The gh or glab CLI is not installed."""

    tool: str = ""
    install_url: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"'{self.tool}' CLI not found"
        if not self.suggested_action and self.install_url:
            self.suggested_action = f"Install it from {self.install_url}"


# ─────────────────────────────────────────────────────────────────────────────
# External tool failures
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class ToolError(TreeMeError):
    """An external command ran but failed."""

    command: str | None = None
    stderr: str | None = None
    exit_code: int = EXIT_TOOL

    def __post_init__(self) -> None:
        if self.debug_context is None and (self.command or self.stderr):
            parts = []
            if self.command:
                parts.append(f"Command: {self.command}")
            if self.stderr:
                parts.append(self.stderr.strip())
            self.debug_context = "\n".join(parts)


@dataclass(eq=False)
class GitCommandError(ToolError):
    """A git invocation exited non-zero."""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = "git command failed"
            if self.stderr and self.stderr.strip():
                self.user_message = f"git command failed: {self.stderr.strip()}"
        super().__post_init__()


@dataclass(eq=False)
class NotAGitRepoError(ToolError):
    path: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = "not in a git repository"
            if self.path:
                self.user_message = f"not in a git repository: {self.path}"
        if not self.suggested_action:
            self.suggested_action = "Run wt from inside a git repository"
        super().__post_init__()


@dataclass(eq=False)
class WorktreeCommandError(ToolError):
    """git worktree add/remove/prune failed."""

    action: str = "create"
    path: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"failed to {self.action} worktree"
            if self.path:
                self.user_message += f": {self.path}"
            if self.stderr and self.stderr.strip():
                self.user_message += f"\n{self.stderr.strip()}"
        super().__post_init__()


@dataclass(eq=False)
class ReviewListingError(ToolError):
    """gh/glab failed to list open pull or merge requests."""

    tool: str = ""
    kind: str = "PRs"

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"failed to get {self.kind} (is '{self.tool}' CLI installed?)"
        if not self.suggested_action and self.tool:
            self.suggested_action = f"Check that '{self.tool}' is authenticated for this repository"
        super().__post_init__()


# ─────────────────────────────────────────────────────────────────────────────
# Not found
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class NothingToSelectError(TreeMeError):
    """A listing succeeded but produced nothing to pick from."""


@dataclass(eq=False)
class BranchNotFoundError(TreeMeError):
    branch: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"branch '{self.branch}' does not exist"
        if not self.suggested_action:
            self.suggested_action = f"Use 'wt create {self.branch}' to create a new branch"


@dataclass(eq=False)
class WorktreeNotFoundError(TreeMeError):
    branch: str = ""

    def __post_init__(self) -> None:
        if not self.user_message:
            self.user_message = f"no worktree found for branch: {self.branch}"
        if not self.suggested_action:
            self.suggested_action = "Run 'wt list' to see existing worktrees"


# ─────────────────────────────────────────────────────────────────────────────
# Cancellation
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(eq=False)
class SelectionCancelledError(TreeMeError):
    """The user aborted an interactive menu."""

    user_message: str = "selection cancelled"
    exit_code: int = EXIT_CANCELLED
