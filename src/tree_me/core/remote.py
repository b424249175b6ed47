"""Classify git remotes by hosting provider."""

from __future__ import annotations

import re
from enum import Enum

GITHUB_HOST = "github.com"
GITLAB_HOST = "gitlab.com"


class RemoteType(Enum):
    """Hosting provider behind a remote URL."""

    GITHUB = "github"
    GITLAB = "gitlab"
    UNKNOWN = "unknown"


def detect_remote_type(url: str) -> RemoteType:
    """Classify a remote URL. GitHub is checked first; no URL validation."""
    if GITHUB_HOST in url:
        return RemoteType.GITHUB
    if GITLAB_HOST in url:
        return RemoteType.GITLAB
    return RemoteType.UNKNOWN


def repo_name_from_url(url: str) -> str:
    """Derive the repository name from a remote URL.

    Handles both ``https://host/org/repo.git`` and ``git@host:org/repo.git``.
    """
    last = re.split(r"[/:]", url.strip().rstrip("/"))[-1]
    if last.endswith(".git"):
        last = last[: -len(".git")]
    return last
