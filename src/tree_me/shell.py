"""
Shell integration snippets.

``wt`` itself cannot change the caller's directory, so successful commands
print a ``TREE_ME_CD:<path>`` line and the shell function installed by
``wt shellenv`` performs the ``cd``.
"""

from __future__ import annotations

import importlib.resources
import os
from collections.abc import Mapping
from enum import Enum

CD_MARKER = "TREE_ME_CD:"


class Shell(str, Enum):
    """Shells with an integration snippet."""

    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    PWSH = "pwsh"


_TEMPLATES = {
    Shell.POSIX: "wt.sh",
    Shell.BASH: "wt.sh",
    Shell.ZSH: "wt.sh",
    Shell.FISH: "wt.fish",
    Shell.PWSH: "wt.ps1",
}


def cd_marker(path: str) -> str:
    """Return the line the shell function looks for to change directory."""
    return f"{CD_MARKER}{path}"


def detect_shell(environ: Mapping[str, str] | None = None, os_name: str | None = None) -> Shell:
    """Guess the user's shell: fish from ``$SHELL``, pwsh on Windows, else posix."""
    env = os.environ if environ is None else environ
    shell_path = env.get("SHELL", "")
    if shell_path.rstrip("/").endswith("fish"):
        return Shell.FISH
    if (os_name or os.name) == "nt":
        return Shell.PWSH
    return Shell.POSIX


def render_shellenv(shell: Shell) -> str:
    """Return the integration snippet for ``shell``."""
    template_files = importlib.resources.files("tree_me.templates")
    return (template_files / _TEMPLATES[shell]).read_text(encoding="utf-8")
