"""
Interactive dispatch: turn an optional argument into a concrete target.

An explicit argument resolves immediately. Without one, the relevant
listing is fetched and offered to the user; an empty listing fails before
any menu is shown, and an aborted menu raises SelectionCancelledError.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from tree_me.core.choices import Choice, Selector
from tree_me.core.errors import NothingToSelectError, UsageError
from tree_me.core.listings import ReviewItem

T = TypeVar("T")


def choose(
    select: Selector,
    title: str,
    choices: Sequence[Choice[T]],
    empty_message: str,
) -> T:
    """Present ``choices`` and return the chosen value."""
    if not choices:
        raise NothingToSelectError(user_message=empty_message)
    return select(title, choices).value


def resolve_or_select(
    explicit: str | None,
    list_values: Callable[[], Sequence[Choice[str]]],
    select: Selector,
    title: str,
    empty_message: str,
) -> str:
    """Return ``explicit`` if given, otherwise let the user pick from a listing.

    Only a missing argument (``None``) starts the listing; an empty string
    is rejected as a usage error.
    """
    if explicit is not None:
        return require_name(explicit)
    return choose(select, title, list_values(), empty_message)


def require_name(name: str) -> str:
    """Reject an explicitly passed empty branch name."""
    if not name.strip():
        raise UsageError(
            user_message="branch name must not be empty",
            suggested_action="Omit the argument to pick interactively",
        )
    return name


def branch_choices(branches: Sequence[str]) -> list[Choice[str]]:
    return [Choice(value=branch, label=branch) for branch in branches]


def review_choices(items: Sequence[ReviewItem]) -> list[Choice[str]]:
    return [Choice(value=item.number, label=item.label) for item in items]
