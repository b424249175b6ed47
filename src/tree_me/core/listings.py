"""
Parsers for review-tool listing output.

Both parsers turn the text printed by ``gh pr list`` / ``glab mr list`` into
ReviewItem records. Number and label travel together in one record so a
menu selection always maps back to the right number.

Malformed lines are skipped, never fatal: the output comes from tools we
do not control and a single odd line must not hide the rest of the list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# !123  OPEN  Fix bug  (feature) ← (main)
GITLAB_MR_LINE = re.compile(r"^!(\d+)\s+\S+\s+([^(]+?)\s*\(")


@dataclass(frozen=True)
class ReviewItem:
    """An open pull or merge request as shown in a menu."""

    number: str
    label: str


def parse_github_pr_list(text: str) -> list[ReviewItem]:
    """Parse ``<number>\\t<title>`` lines from gh.

    Lines are trimmed, then split on the first tab only so tabs inside a
    title survive. Lines without a tab are skipped.
    """
    items = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        number, sep, title = line.partition("\t")
        if not sep:
            continue
        items.append(ReviewItem(number=number, label=f"#{number}: {title}"))
    return items


def parse_gitlab_mr_list(text: str) -> list[ReviewItem]:
    """Parse glab's ``!<number>  <STATUS>  <title>  (<branch>) ← (<base>)`` lines.

    The status token is dropped and the title's whitespace is normalized.
    Lines that do not start with ``!<digits>`` or lack a ``(`` group are
    skipped.
    """
    items = []
    for line in text.splitlines():
        match = GITLAB_MR_LINE.match(line.strip())
        if not match:
            continue
        number = match.group(1)
        title = " ".join(match.group(2).split())
        items.append(ReviewItem(number=number, label=f"!{number}: {title}"))
    return items
