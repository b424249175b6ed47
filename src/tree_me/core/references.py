"""Extract pull/merge request numbers from user input."""

from __future__ import annotations

import re

from .errors import InvalidReferenceError

GITHUB_PR_URL = re.compile(r"^https://github\.com/.*/pull/([0-9]+)")
GITLAB_MR_URL = re.compile(r"^https://gitlab\.com/.*/-/merge_requests/([0-9]+)")
PLAIN_NUMBER = re.compile(r"[0-9]+")


def extract_review_number(text: str) -> str:
    """Return the PR/MR number named by ``text``.

    Accepts a bare number, a GitHub pull request URL or a GitLab merge
    request URL. URL shapes are tried before the bare-number form.

    Raises:
        InvalidReferenceError: Input matches none of the accepted forms.
    """
    for pattern in (GITHUB_PR_URL, GITLAB_MR_URL):
        match = pattern.match(text)
        if match:
            return match.group(1)

    if PLAIN_NUMBER.fullmatch(text):
        return text

    raise InvalidReferenceError(reference=text)
