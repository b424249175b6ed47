"""Review tool (gh / glab) port definition."""

from __future__ import annotations

from typing import Protocol

from tree_me.core.listings import ReviewItem
from tree_me.core.remote import RemoteType


class ReviewClient(Protocol):
    """Abstract pull/merge request operations backed by a review CLI."""

    remote_type: RemoteType
    tool: str
    branch_prefix: str
    kind: str
    menu_title: str

    def check_available(self) -> None:
        """Raise ReviewToolNotFoundError if the CLI is not installed."""

    def list_open(self) -> list[ReviewItem]:
        """Return open pull/merge requests for the current repository."""

    def refspec(self, number: str) -> str:
        """Return the remote ref holding the head of review ``number``."""
