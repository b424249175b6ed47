"""
Process-wide settings.

Settings are read once when the CLI starts and passed down explicitly;
nothing below the CLI layer reads the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_installed_version
from pathlib import Path

DIST_NAME = "tree-me"
ROOT_ENV_VAR = "WORKTREE_ROOT"
DEV_VERSION = "dev"


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for one wt invocation."""

    worktree_root: Path
    version: str = DEV_VERSION


def default_worktree_root() -> Path:
    return Path.home() / "dev" / "worktrees"


def get_version() -> str:
    """Return the installed package version, or ``dev`` from a source tree."""
    try:
        return get_installed_version(DIST_NAME)
    except PackageNotFoundError:
        return DEV_VERSION


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment.

    ``WORKTREE_ROOT`` overrides the default root of ``~/dev/worktrees``;
    an empty value counts as unset.
    """
    env = os.environ if environ is None else environ
    root = env.get(ROOT_ENV_VAR, "")
    return Settings(
        worktree_root=Path(root).expanduser() if root else default_worktree_root(),
        version=get_version(),
    )
