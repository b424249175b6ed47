"""tree-me: git worktree helper with an organized directory layout."""
