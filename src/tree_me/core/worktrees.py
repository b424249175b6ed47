"""
Worktree layout and ``git worktree list --porcelain`` parsing.

Worktrees live at ``<root>/<repo>/<branch>``. The first entry of a worktree
listing is always the main worktree.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorktreeInfo:
    """Information about a git worktree."""

    path: str
    branch: str = ""
    head: str = ""
    status: str = ""


def resolve_worktree_path(root: Path, repo: str, branch: str) -> Path:
    """Return the on-disk location for ``branch`` of ``repo``. No I/O."""
    return root / repo / branch


def parse_worktree_porcelain(text: str) -> list[WorktreeInfo]:
    """Parse porcelain worktree output into WorktreeInfo records."""
    worktrees: list[WorktreeInfo] = []
    current: dict[str, str] = {}

    for line in text.splitlines():
        if line.startswith("worktree "):
            if current:
                worktrees.append(WorktreeInfo(**current))
            current = {"path": line[len("worktree ") :]}
        elif not current:
            continue
        elif line.startswith("HEAD "):
            current["head"] = line[len("HEAD ") :]
        elif line.startswith("branch "):
            current["branch"] = line[len("branch ") :].replace("refs/heads/", "", 1)
        elif line in ("bare", "detached"):
            current["status"] = line

    if current:
        worktrees.append(WorktreeInfo(**current))

    return worktrees


def find_worktree(worktrees: list[WorktreeInfo], branch: str) -> WorktreeInfo | None:
    """Return the first worktree with ``branch`` checked out (exact match)."""
    if not branch:
        return None
    for worktree in worktrees:
        if worktree.branch == branch:
            return worktree
    return None


def worktree_branches(worktrees: list[WorktreeInfo]) -> list[str]:
    """Branches checked out in linked worktrees (main and detached skipped)."""
    return [wt.branch for wt in worktrees[1:] if wt.branch]


def is_inside(path: Path | str, cwd: Path | str) -> bool:
    """True if ``cwd`` is ``path`` or somewhere below it."""
    base = Path(path)
    here = Path(cwd)
    return here == base or base in here.parents
