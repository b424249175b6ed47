"""Local git adapter for GitClient port."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from tree_me.core.branches import parse_branch_listing
from tree_me.core.errors import (
    GitCommandError,
    GitNotFoundError,
    NotAGitRepoError,
    WorktreeCommandError,
)
from tree_me.core.remote import repo_name_from_url
from tree_me.core.worktrees import WorktreeInfo, parse_worktree_porcelain
from tree_me.ports.git_client import GitClient

logger = logging.getLogger(__name__)

DEFAULT_BASE = "main"
ORIGIN_HEAD_REF = "refs/remotes/origin/HEAD"


class LocalGitClient(GitClient):
    """Git client adapter backed by the local git CLI.

    Commands run in ``cwd`` when given, otherwise in the process working
    directory, which is how the shell wrapper invokes wt.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        cmd = ["git"]
        if self.cwd is not None:
            cmd += ["-C", str(self.cwd)]
        cmd += list(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            raise GitNotFoundError()

    def _check(self, *args: str) -> str:
        result = self._run(*args)
        if result.returncode != 0:
            raise GitCommandError(command="git " + " ".join(args), stderr=result.stderr)
        return result.stdout

    def remote_url(self, remote: str = "origin") -> str | None:
        result = self._run("remote", "get-url", remote)
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def toplevel(self) -> Path | None:
        result = self._run("rev-parse", "--show-toplevel")
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def repo_name(self) -> str:
        url = self.remote_url()
        if url:
            name = repo_name_from_url(url)
            if name:
                return name

        top = self.toplevel()
        if top is None:
            raise NotAGitRepoError(path=str(self.cwd or Path.cwd()))
        return top.name

    def default_base(self) -> str:
        result = self._run("symbolic-ref", ORIGIN_HEAD_REF)
        if result.returncode != 0:
            return DEFAULT_BASE
        ref = result.stdout.strip()
        return ref.removeprefix("refs/remotes/origin/") or DEFAULT_BASE

    def list_branches(self) -> list[str]:
        output = self._check("branch", "-a", "--format=%(refname:short)")
        return parse_branch_listing(output)

    def branch_exists(self, branch: str) -> bool:
        for ref in (f"refs/heads/{branch}", f"refs/remotes/origin/{branch}"):
            if self._run("show-ref", "--verify", "--quiet", ref).returncode == 0:
                return True
        return False

    def list_worktrees(self) -> list[WorktreeInfo]:
        return parse_worktree_porcelain(self._check("worktree", "list", "--porcelain"))

    def add_worktree(
        self,
        path: Path,
        branch: str,
        new_branch: bool = False,
        base: str | None = None,
    ) -> None:
        args = ["worktree", "add", str(path)]
        if new_branch:
            args += ["-b", branch]
            if base:
                args.append(base)
        else:
            args.append(branch)

        result = self._run(*args)
        if result.returncode != 0:
            raise WorktreeCommandError(
                action="create",
                path=str(path),
                command="git " + " ".join(args),
                stderr=result.stderr,
            )

    def remove_worktree(self, path: str) -> None:
        result = self._run("worktree", "remove", path)
        if result.returncode != 0:
            raise WorktreeCommandError(
                action="remove",
                path=path,
                command=f"git worktree remove {path}",
                stderr=result.stderr,
            )

    def prune_worktrees(self) -> None:
        result = self._run("worktree", "prune")
        if result.returncode != 0:
            raise WorktreeCommandError(
                action="prune",
                command="git worktree prune",
                stderr=result.stderr,
            )

    def fetch(self, refspec: str, remote: str = "origin") -> bool:
        result = self._run("fetch", remote, refspec)
        if result.returncode != 0:
            logger.debug("git fetch %s %s failed: %s", remote, refspec, result.stderr.strip())
            return False
        return True
