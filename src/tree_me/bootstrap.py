"""Composition root wiring wt adapters."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from tree_me.adapters.local_git_client import LocalGitClient
from tree_me.adapters.review_cli import GitHubCli, GitLabCli
from tree_me.core.remote import RemoteType
from tree_me.ports.git_client import GitClient
from tree_me.ports.review_client import ReviewClient


@dataclass(frozen=True)
class DefaultAdapters:
    """Container for default adapter instances."""

    git_client: GitClient
    github: ReviewClient
    gitlab: ReviewClient

    def review_client(self, remote_type: RemoteType) -> ReviewClient:
        """Return the review client serving ``remote_type``."""
        if remote_type is RemoteType.GITHUB:
            return self.github
        if remote_type is RemoteType.GITLAB:
            return self.gitlab
        raise ValueError(f"No review tool for remote type: {remote_type.value}")


@lru_cache(maxsize=1)
def get_default_adapters() -> DefaultAdapters:
    """Return the default adapter wiring for wt."""

    return DefaultAdapters(
        git_client=LocalGitClient(),
        github=GitHubCli(),
        gitlab=GitLabCli(),
    )
