"""Path classification: one module path to one group name.

Rules are checked in order and the first match wins:

1. A ``node_modules/`` segment anywhere in the path names a dependency.
   Only the text after the *last* such segment counts, which covers nested
   installs, hoisting and pnpm-style virtual stores.
2. Paths that climb out of the working directory (``../``) are sibling
   workspace packages when they land in a known monorepo directory,
   otherwise they are grouped by their first real segment.
3. Anything else is local source, grouped by top-level directory.
"""

from typing import AbstractSet

from ..models import DEPENDENCY_SEGMENT, Category

LOCAL_GROUP = "(local)"
LOCAL_MARKER = " (local)"
WORKSPACE_MARKER = " (workspace)"

DEFAULT_MONOREPO_DIRS: frozenset = frozenset(
    {"packages", "apps", "libs", "services", "workers", "modules"}
)


def classify(path: str, monorepo_dirs: AbstractSet[str] = DEFAULT_MONOREPO_DIRS) -> str:
    """Return the group name for *path*. Never raises."""
    if DEPENDENCY_SEGMENT in path:
        parts = path.rsplit(DEPENDENCY_SEGMENT, 1)[1].split("/")
        if not parts[0]:
            return LOCAL_GROUP
        if parts[0].startswith("@") and len(parts) > 1 and parts[1]:
            return f"{parts[0]}/{parts[1]}"
        return parts[0]

    if path.startswith("./"):
        path = path[2:]

    if path.startswith("../"):
        parts = path.split("/")
        i = 0
        while i < len(parts) and parts[i] == "..":
            i += 1
        real = [p for p in parts[i:] if p]
        if not real:
            return LOCAL_GROUP
        if real[0] in monorepo_dirs and len(real) >= 2:
            return f"{real[1]}{WORKSPACE_MARKER}"
        return f"{real[0]}{LOCAL_MARKER}"

    if "/" not in path:
        return LOCAL_GROUP
    first = path.split("/", 1)[0]
    return f"{first}{LOCAL_MARKER}" if first else LOCAL_GROUP


def category_of(group_name: str) -> Category:
    """Map a group name produced by :func:`classify` back to its category."""
    if group_name.endswith(WORKSPACE_MARKER):
        return "workspace"
    if group_name == LOCAL_GROUP or group_name.endswith(LOCAL_MARKER):
        return "local"
    return "npm"
