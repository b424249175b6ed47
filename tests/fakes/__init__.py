"""Test fakes for wt ports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tree_me.bootstrap import DefaultAdapters
from tree_me.core.choices import Choice
from tree_me.core.errors import SelectionCancelledError
from tests.fakes.fake_git_client import FakeGitClient
from tests.fakes.fake_review_client import FakeReviewClient, fake_gitlab_client


def build_fake_adapters(
    git_client: FakeGitClient | None = None,
    github: FakeReviewClient | None = None,
    gitlab: FakeReviewClient | None = None,
) -> DefaultAdapters:
    """Return default adapters wired with fakes."""
    return DefaultAdapters(
        git_client=git_client or FakeGitClient(),
        github=github or FakeReviewClient(),
        gitlab=gitlab or fake_gitlab_client(),
    )


class FakeSelector:
    """Selector that picks a fixed position and records what it was shown."""

    def __init__(self, index: int = 0, cancel: bool = False) -> None:
        self.index = index
        self.cancel = cancel
        self.calls: list[tuple[str, list[Choice[Any]]]] = []

    def __call__(self, title: str, choices: Sequence[Choice[Any]]) -> Choice[Any]:
        self.calls.append((title, list(choices)))
        if self.cancel:
            raise SelectionCancelledError()
        return choices[self.index]


__all__ = [
    "FakeGitClient",
    "FakeReviewClient",
    "FakeSelector",
    "build_fake_adapters",
    "fake_gitlab_client",
]
