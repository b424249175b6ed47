"""
Exit codes for the wt CLI.

Standardized exit codes following Unix conventions with semantic meaning.
All commands MUST use these constants for consistency.

Exit Code Semantics:
  0: Success - command completed successfully
  1: Not Found - nothing to select, branch or worktree missing
  2: Usage Error - bad flags, invalid PR/MR number or URL
  4: Tool Error - external tool failed (git error, not a git repo)
  5: Prerequisite Error - missing tools (git, gh, glab not installed),
     also used for unexpected internal errors
  130: Cancelled - user cancelled operation (SIGINT)

Note: Click/Typer argument parsing errors (EXIT_USAGE) occur before
commands run, so they are reported by Click itself.
"""

# Success
EXIT_SUCCESS = 0  # Command completed successfully

EXIT_NOT_FOUND = 1  # Nothing found (branch, worktree, open PRs)
EXIT_USAGE = 2  # Invalid usage/arguments (Click default)
EXIT_TOOL = 4  # External tool failed (git error, not a git repo)
EXIT_PREREQ = 5  # Prerequisites not met (git, gh, glab not installed)

# Cancellation (SIGINT convention)
EXIT_CANCELLED = 130  # User cancelled operation (SIGINT)
