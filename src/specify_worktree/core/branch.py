"""Feature branch detection and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet
import logging

from .constants import (
    DEFAULT_SPECIFY_COMMAND,
    DETACHED_HEAD_SENTINEL,
    FEATURE_BRANCH_PATTERN,
    FEATURE_NUM_LENGTH,
    PROTECTED_BRANCHES,
)
from .exceptions import (
    DetachedHeadError,
    InvalidBranchPatternError,
    NotAGitRepositoryError,
    ProtectedBranchError,
)
from .git import GitRepository
from .repo_root import RepoRoot

logger = logging.getLogger(__name__)

__all__ = [
    "ValidatedBranch",
    "is_feature_branch",
    "resolve_feature_branch",
    "validate_branch_name",
]


@dataclass(frozen=True)
class ValidatedBranch:
    name: str
    feature_num: str


def is_feature_branch(name: str) -> bool:
    """Return True when ``name`` has the ``###-name`` shape."""
    return FEATURE_BRANCH_PATTERN.match(name) is not None


def validate_branch_name(
    name: str | None,
    *,
    protected: AbstractSet[str] = PROTECTED_BRANCHES,
    specify_command: str = DEFAULT_SPECIFY_COMMAND,
) -> ValidatedBranch:
    """Validate a checked-out branch name for feature initialization.

    Protected names are checked before the pattern so trunk branches are
    always reported as protected, even if configured with a numeric prefix.

    Raises:
        DetachedHeadError: ``name`` is empty or the ``HEAD`` sentinel.
        ProtectedBranchError: ``name`` is main, master or configured as protected.
        InvalidBranchPatternError: ``name`` lacks the three-digit prefix.
    """
    if not name or name == DETACHED_HEAD_SENTINEL:
        raise DetachedHeadError()

    if name in PROTECTED_BRANCHES or name in protected:
        raise ProtectedBranchError(name)

    if not is_feature_branch(name):
        raise InvalidBranchPatternError(name, specify_command=specify_command)

    return ValidatedBranch(name=name, feature_num=name[:FEATURE_NUM_LENGTH])


def resolve_feature_branch(
    git: GitRepository,
    root: RepoRoot,
    *,
    protected: AbstractSet[str] = PROTECTED_BRANCHES,
    specify_command: str = DEFAULT_SPECIFY_COMMAND,
) -> ValidatedBranch:
    """Read the current branch from git and validate it.

    Raises:
        NotAGitRepositoryError: The root was not confirmed by git.
        WorktreeFeatureError: Any failure from ``validate_branch_name``.
    """
    if not root.has_vcs:
        raise NotAGitRepositoryError(root.path, specify_command=specify_command)

    branch = git.current_branch(Path(root.path))
    logger.debug("Current branch: %r", branch)
    return validate_branch_name(branch, protected=protected, specify_command=specify_command)
