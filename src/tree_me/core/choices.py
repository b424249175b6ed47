"""Menu entries shared by the interactive selection flow and the picker."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A menu entry: the value to return and the text to show."""

    value: T
    label: str


# (title, choices) -> chosen entry; raises SelectionCancelledError on abort
Selector = Callable[[str, Sequence[Choice[Any]]], Choice[Any]]
