"""In-memory ReviewClient for application and CLI tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from tree_me.core.errors import ReviewToolNotFoundError
from tree_me.core.listings import ReviewItem
from tree_me.core.remote import RemoteType


@dataclass
class FakeReviewClient:
    remote_type: RemoteType = RemoteType.GITHUB
    tool: str = "gh"
    branch_prefix: str = "pr"
    kind: str = "PRs"
    menu_title: str = "Select Pull Request"
    installed: bool = True
    items: list[ReviewItem] = field(default_factory=list)
    list_calls: int = 0

    def check_available(self) -> None:
        if not self.installed:
            raise ReviewToolNotFoundError(tool=self.tool, install_url="https://example.invalid")

    def list_open(self) -> list[ReviewItem]:
        self.list_calls += 1
        return list(self.items)

    def refspec(self, number: str) -> str:
        if self.remote_type is RemoteType.GITLAB:
            return f"merge-requests/{number}/head"
        return f"pull/{number}/head"


def fake_gitlab_client(**kwargs) -> FakeReviewClient:
    defaults = {
        "remote_type": RemoteType.GITLAB,
        "tool": "glab",
        "branch_prefix": "mr",
        "kind": "MRs",
        "menu_title": "Select Merge Request",
    }
    defaults.update(kwargs)
    return FakeReviewClient(**defaults)
