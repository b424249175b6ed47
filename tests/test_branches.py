"""Tests for branch listing enumeration."""

import pytest

from tree_me.core.branches import parse_branch_listing


class TestParseBranchListing:
    def test_local_and_remote_dedupe(self):
        text = "main\nfeature-x\norigin/main\norigin/HEAD -> origin/main\n"
        assert set(parse_branch_listing(text)) == {"main", "feature-x"}
        assert len(parse_branch_listing(text)) == 2

    def test_order_independent(self):
        a = parse_branch_listing("main\norigin/main\nfeature-x")
        b = parse_branch_listing("origin/main\nfeature-x\nmain")
        assert a == b

    def test_bare_remote_name_skipped(self):
        """refs/remotes/origin/HEAD abbreviates to plain 'origin'."""
        assert parse_branch_listing("main\norigin\nupstream\n") == ["main"]

    def test_remote_head_pointer_skipped(self):
        assert parse_branch_listing("origin/HEAD\norigin/dev") == ["dev"]

    def test_upstream_prefix_stripped(self):
        assert parse_branch_listing("upstream/release\nrelease") == ["release"]

    def test_unknown_remote_prefix_kept(self):
        assert parse_branch_listing("fork/topic") == ["fork/topic"]

    def test_nested_branch_names_survive(self):
        assert parse_branch_listing("origin/feature/login\nfeature/login") == ["feature/login"]

    def test_whitespace_and_blank_lines(self):
        assert parse_branch_listing("  main  \n\n   \n\tdev\n") == ["dev", "main"]

    @pytest.mark.parametrize("text", ["", "\n", "   \n  "])
    def test_empty(self, text):
        assert parse_branch_listing(text) == []

    def test_results_are_clean(self):
        text = "main\norigin/main\norigin/HEAD -> origin/main\norigin\nupstream/x\nfeat"
        for branch in parse_branch_listing(text):
            assert not branch.startswith("origin/")
            assert "HEAD" not in branch
            assert "->" not in branch
            assert branch not in ("origin", "upstream")
            assert branch.strip()
