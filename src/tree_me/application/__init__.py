"""Use-case layer: worktree workflows and interactive dispatch."""
