"""gh and glab adapters for the ReviewClient port."""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod

from tree_me.core.errors import ReviewListingError, ReviewToolNotFoundError
from tree_me.core.listings import ReviewItem, parse_github_pr_list, parse_gitlab_mr_list
from tree_me.core.remote import RemoteType
from tree_me.ports.review_client import ReviewClient

logger = logging.getLogger(__name__)


class _CliReviewClient(ReviewClient, ABC):
    """Shared plumbing for review CLIs: availability check and listing."""

    remote_type = RemoteType.UNKNOWN
    tool = ""
    install_url = ""
    branch_prefix = ""
    kind = ""
    menu_title = ""
    list_command: list[str] = []

    def check_available(self) -> None:
        if shutil.which(self.tool) is None:
            raise ReviewToolNotFoundError(tool=self.tool, install_url=self.install_url)

    def _list_output(self) -> str:
        logger.debug("Running %s", " ".join(self.list_command))
        try:
            result = subprocess.run(self.list_command, capture_output=True, text=True)
        except FileNotFoundError:
            raise ReviewToolNotFoundError(tool=self.tool, install_url=self.install_url)
        if result.returncode != 0:
            raise ReviewListingError(
                tool=self.tool,
                kind=self.kind,
                command=" ".join(self.list_command),
                stderr=result.stderr,
            )
        return result.stdout

    @abstractmethod
    def parse(self, output: str) -> list[ReviewItem]:
        """Turn the listing output into review items."""

    def list_open(self) -> list[ReviewItem]:
        return self.parse(self._list_output())

    @abstractmethod
    def refspec(self, number: str) -> str:
        """Return the remote ref holding the head of review ``number``."""


class GitHubCli(_CliReviewClient):
    """GitHub pull requests via ``gh``."""

    remote_type = RemoteType.GITHUB
    tool = "gh"
    install_url = "https://cli.github.com"
    branch_prefix = "pr"
    kind = "PRs"
    menu_title = "Select Pull Request"
    list_command = [
        "gh",
        "pr",
        "list",
        "--json",
        "number,title",
        "--jq",
        '.[] | "\\(.number)\\t\\(.title)"',
    ]

    def parse(self, output: str) -> list[ReviewItem]:
        return parse_github_pr_list(output)

    def refspec(self, number: str) -> str:
        return f"pull/{number}/head"


class GitLabCli(_CliReviewClient):
    """GitLab merge requests via ``glab``."""

    remote_type = RemoteType.GITLAB
    tool = "glab"
    install_url = "https://gitlab.com/gitlab-org/cli"
    branch_prefix = "mr"
    kind = "MRs"
    menu_title = "Select Merge Request"
    list_command = ["glab", "mr", "list"]

    def parse(self, output: str) -> list[ReviewItem]:
        return parse_gitlab_mr_list(output)

    def refspec(self, number: str) -> str:
        return f"merge-requests/{number}/head"
