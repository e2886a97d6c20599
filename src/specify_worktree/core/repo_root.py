"""Repository root resolution for worktree layouts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging

from .constants import GIT_MARKER, SPECIFY_DIR
from .exceptions import RootNotFoundError
from .git import GitRepository

logger = logging.getLogger(__name__)

__all__ = ["RepoRoot", "find_marker_root", "resolve_repo_root"]


@dataclass(frozen=True)
class RepoRoot:
    """Resolved repository root and whether git vouched for it."""

    path: Path
    has_vcs: bool


def find_marker_root(start: Path) -> Path | None:
    """Walk up from ``start`` to the first directory holding a project marker.

    ``.git`` counts as a marker whether it is a directory (primary checkout)
    or a file (linked worktree pointing at the shared git dir). A
    ``.specify`` directory also counts. The filesystem root itself is never
    accepted.
    """
    current = start.resolve()
    while current != current.parent:
        git_marker = current / GIT_MARKER
        if git_marker.is_dir() or git_marker.is_file() or (current / SPECIFY_DIR).is_dir():
            return current
        current = current.parent
    return None


def resolve_repo_root(git: GitRepository, start: Path | None = None) -> RepoRoot:
    """Locate the repository root for ``start`` (default: current directory).

    git's own answer wins when available. Otherwise the marker walk is used
    and the result is flagged as not git-backed.

    Raises:
        RootNotFoundError: If neither git nor the marker walk finds a root.
    """
    start = (start or Path.cwd()).resolve()

    top_level = git.top_level_path(start)
    if top_level is not None:
        logger.debug("Repository root from git: %s", top_level)
        return RepoRoot(path=top_level, has_vcs=True)

    marker_root = find_marker_root(start)
    if marker_root is None:
        raise RootNotFoundError(start)

    logger.debug("Repository root from marker walk: %s", marker_root)
    return RepoRoot(path=marker_root, has_vcs=False)
