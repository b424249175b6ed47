"""Tests for remote classification and repo name derivation."""

import pytest

from tree_me.core.remote import RemoteType, detect_remote_type, repo_name_from_url


class TestDetectRemoteType:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://github.com/org/repo.git", RemoteType.GITHUB),
            ("git@github.com:org/repo.git", RemoteType.GITHUB),
            ("https://gitlab.com/group/repo.git", RemoteType.GITLAB),
            ("git@gitlab.com:group/repo.git", RemoteType.GITLAB),
            ("https://bitbucket.org/org/repo.git", RemoteType.UNKNOWN),
            ("", RemoteType.UNKNOWN),
        ],
    )
    def test_classifies_by_host(self, url, expected):
        assert detect_remote_type(url) == expected

    def test_github_checked_first(self):
        """A URL mentioning both hosts is GitHub."""
        assert detect_remote_type("https://gitlab.com/mirror/github.com-repo") == RemoteType.GITHUB

    def test_no_validation(self):
        assert detect_remote_type("not a url but github.com") == RemoteType.GITHUB


class TestRepoNameFromUrl:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://github.com/org/tree-me.git", "tree-me"),
            ("https://github.com/org/tree-me", "tree-me"),
            ("https://github.com/org/tree-me/", "tree-me"),
            ("git@github.com:org/tree-me.git", "tree-me"),
            ("git@host:tree-me.git", "tree-me"),
            ("/srv/git/tree-me.git\n", "tree-me"),
        ],
    )
    def test_last_segment_without_git_suffix(self, url, expected):
        assert repo_name_from_url(url) == expected
