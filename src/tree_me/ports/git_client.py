"""Git client port definition."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from tree_me.core.worktrees import WorktreeInfo


class GitClient(Protocol):
    """Abstract git operations used by application logic."""

    def remote_url(self, remote: str = "origin") -> str | None:
        """Return the URL of ``remote``, or None if it is not configured."""

    def toplevel(self) -> Path | None:
        """Return the top-level directory of the current repository."""

    def repo_name(self) -> str:
        """Return the repository name used in the worktree layout."""

    def default_base(self) -> str:
        """Return the branch new worktrees are based on by default."""

    def list_branches(self) -> list[str]:
        """Return unique local and remote-tracking branch names."""

    def branch_exists(self, branch: str) -> bool:
        """Return True if ``branch`` exists locally or on origin."""

    def list_worktrees(self) -> list[WorktreeInfo]:
        """Return all worktrees, main worktree first."""

    def add_worktree(
        self,
        path: Path,
        branch: str,
        new_branch: bool = False,
        base: str | None = None,
    ) -> None:
        """Create a worktree at ``path`` for ``branch``."""

    def remove_worktree(self, path: str) -> None:
        """Remove the worktree at ``path``."""

    def prune_worktrees(self) -> None:
        """Prune stale worktree administrative files."""

    def fetch(self, refspec: str, remote: str = "origin") -> bool:
        """Fetch ``refspec`` from ``remote``; return False on failure."""
