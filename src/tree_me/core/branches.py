"""Turn ``git branch -a`` output into checkout-able branch names."""

from __future__ import annotations

# Only these remotes are recognised; a branch listed under any other remote
# keeps its "<remote>/" prefix.
KNOWN_REMOTES = ("origin", "upstream")


def _is_head_pointer(name: str) -> bool:
    if "->" in name or name == "HEAD":
        return True
    return any(name.startswith(f"{remote}/HEAD") for remote in KNOWN_REMOTES)


def _strip_remote_prefix(name: str) -> str:
    for remote in KNOWN_REMOTES:
        prefix = f"{remote}/"
        if name.startswith(prefix):
            return name[len(prefix) :]
    return name


def parse_branch_listing(text: str) -> list[str]:
    """Return the unique local and remote-tracking branch names in ``text``.

    Expects ``git branch -a --format=%(refname:short)`` output. Remote
    prefixes are stripped, HEAD pointers and bare remote names (what
    ``refs/remotes/origin/HEAD`` abbreviates to) are dropped, and the
    result is deduplicated and sorted.
    """
    branches: set[str] = set()
    for line in text.splitlines():
        name = line.strip()
        if not name:
            continue
        if _is_head_pointer(name):
            continue
        name = _strip_remote_prefix(name)
        if not name or name in KNOWN_REMOTES:
            continue
        branches.add(name)
    return sorted(branches)
