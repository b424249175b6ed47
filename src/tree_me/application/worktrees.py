"""
Worktree workflows behind the wt commands.

Each workflow talks to git (and gh/glab) only through the ports, and
returns a small result record that the CLI layer renders. A worktree that
already exists for the requested branch is reused, not treated as an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tree_me.config import Settings
from tree_me.core.choices import Selector
from tree_me.core.errors import BranchNotFoundError, TreeMeError, WorktreeNotFoundError
from tree_me.core.references import extract_review_number
from tree_me.core.remote import RemoteType, detect_remote_type
from tree_me.core.worktrees import (
    find_worktree,
    is_inside,
    resolve_worktree_path,
    worktree_branches,
)
from tree_me.ports.git_client import GitClient
from tree_me.ports.review_client import ReviewClient

from .selection import branch_choices, require_name, resolve_or_select, review_choices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorktreeResult:
    """Outcome of checkout, create, pr and mr."""

    path: str
    branch: str
    created: bool
    base: str | None = None
    review_number: str | None = None
    remote_type: RemoteType | None = None


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of remove. ``cd_path`` is set when the shell must leave."""

    path: str
    branch: str
    cd_path: str | None = None


def find_existing_worktree(git: GitClient, branch: str) -> tuple[str, bool]:
    """Return ``(path, True)`` if ``branch`` already has a worktree.

    A failing listing is reported as "not found" so callers go on to
    create the worktree.
    """
    try:
        worktrees = git.list_worktrees()
    except TreeMeError as e:
        logger.debug("Could not list worktrees: %s", e)
        return "", False

    match = find_worktree(worktrees, branch)
    if match is None:
        return "", False
    return match.path, True


def checkout_branch(
    git: GitClient,
    settings: Settings,
    branch: str | None,
    select: Selector,
) -> WorktreeResult:
    """Check out an existing branch into its own worktree."""
    branch = resolve_or_select(
        branch,
        lambda: branch_choices(git.list_branches()),
        select,
        "Select branch to checkout",
        "no available branches to checkout",
    )

    repo = git.repo_name()
    path = resolve_worktree_path(settings.worktree_root, repo, branch)

    existing, found = find_existing_worktree(git, branch)
    if found:
        return WorktreeResult(path=existing, branch=branch, created=False)

    if not git.branch_exists(branch):
        raise BranchNotFoundError(branch=branch)

    git.add_worktree(path, branch)
    return WorktreeResult(path=str(path), branch=branch, created=True)


def create_branch(
    git: GitClient,
    settings: Settings,
    branch: str,
    base: str | None = None,
) -> WorktreeResult:
    """Create a new branch from ``base`` (default branch if omitted) in a worktree."""
    branch = require_name(branch)
    base = base or git.default_base()

    repo = git.repo_name()
    path = resolve_worktree_path(settings.worktree_root, repo, branch)

    existing, found = find_existing_worktree(git, branch)
    if found:
        return WorktreeResult(path=existing, branch=branch, created=False)

    git.add_worktree(path, branch, new_branch=True, base=base)
    return WorktreeResult(path=str(path), branch=branch, created=True, base=base)


def checkout_review(
    git: GitClient,
    review: ReviewClient,
    settings: Settings,
    reference: str | None,
    select: Selector,
) -> WorktreeResult:
    """Check out a pull/merge request into a ``pr-<n>``/``mr-<n>`` worktree.

    ``reference`` may be a number or a PR/MR URL; when it is omitted the
    open requests are listed for selection. The review CLI must be
    installed in both cases.
    """
    if reference is not None:
        number = extract_review_number(reference)
        review.check_available()
    else:
        review.check_available()
        number = resolve_or_select(
            None,
            lambda: review_choices(review.list_open()),
            select,
            review.menu_title,
            f"no open {review.kind} found",
        )

    remote_url = git.remote_url()
    remote_type = detect_remote_type(remote_url) if remote_url else RemoteType.UNKNOWN

    repo = git.repo_name()
    branch = f"{review.branch_prefix}-{number}"
    path = resolve_worktree_path(settings.worktree_root, repo, branch)

    existing, found = find_existing_worktree(git, branch)
    if found:
        return WorktreeResult(
            path=existing,
            branch=branch,
            created=False,
            review_number=number,
            remote_type=remote_type,
        )

    # The local branch may already exist from an earlier fetch
    if not git.fetch(f"{review.refspec(number)}:{branch}"):
        logger.warning("Could not fetch %s; trying existing branch %s", review.refspec(number), branch)

    git.add_worktree(path, branch)
    return WorktreeResult(
        path=str(path),
        branch=branch,
        created=True,
        review_number=number,
        remote_type=remote_type,
    )


def remove_worktree(
    git: GitClient,
    branch: str | None,
    select: Selector,
    cwd: Path,
) -> RemoveResult:
    """Remove the worktree of ``branch``.

    When ``cwd`` lies inside the removed worktree the result points at the
    main worktree so the shell can move there.
    """
    branch = resolve_or_select(
        branch,
        lambda: branch_choices(worktree_branches(git.list_worktrees())),
        select,
        "Select worktree to remove",
        "no worktrees to remove",
    )

    existing, found = find_existing_worktree(git, branch)
    if not found:
        raise WorktreeNotFoundError(branch=branch)

    cd_path = None
    if is_inside(Path(existing).resolve(), cwd.resolve()):
        worktrees = git.list_worktrees()
        if worktrees:
            cd_path = worktrees[0].path

    git.remove_worktree(existing)
    return RemoveResult(path=existing, branch=branch, cd_path=cd_path)


def prune_worktrees(git: GitClient) -> None:
    git.prune_worktrees()
