"""Exception hierarchy for worktree feature initialization.

Every error carries a stable ``code`` (reported to the user verbatim) and a
list of remediation lines printed after the message.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .constants import DEFAULT_SPECIFY_COMMAND, FEATURE_BRANCH_EXAMPLE


class WorktreeFeatureError(Exception):
    """Base exception for all fatal initialization failures."""

    code = "WorktreeFeatureError"

    def __init__(self, message: str, remediation: List[str] | None = None):
        self.message = message
        self.remediation = list(remediation or [])
        super().__init__(message)


class MissingDescriptionError(WorktreeFeatureError):
    """No feature description text was supplied."""

    code = "MissingDescription"

    def __init__(self, usage: str | None = None):
        super().__init__(
            "Feature description is required",
            [usage] if usage else [],
        )


class RootNotFoundError(WorktreeFeatureError):
    """Neither git nor the marker walk located a repository root."""

    code = "RootNotFound"

    def __init__(self, start: Path):
        self.start = start
        super().__init__(
            f"Could not determine repository root from {start}.",
            ["Please run this command from within a git worktree."],
        )


class NotAGitRepositoryError(WorktreeFeatureError):
    """A project root exists but git does not recognize it."""

    code = "NotAGitRepository"

    def __init__(self, root: Path, specify_command: str = DEFAULT_SPECIFY_COMMAND):
        self.root = root
        super().__init__(
            "This command requires a git repository.",
            [f"Use {specify_command} for non-git repos."],
        )


class DetachedHeadError(WorktreeFeatureError):
    """No symbolic branch is checked out."""

    code = "DetachedHead"

    def __init__(self):
        super().__init__(
            "Not on a valid branch. You may be in detached HEAD state.",
            ["Please checkout a feature branch before running this command."],
        )


class ProtectedBranchError(WorktreeFeatureError):
    """The checked-out branch is a trunk branch."""

    code = "ProtectedBranch"

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f"Cannot run on '{branch}' branch.",
            ["Please checkout or create a feature branch first."],
        )


class InvalidBranchPatternError(WorktreeFeatureError):
    """The branch name lacks the ``###-`` numeric prefix."""

    code = "InvalidBranchPattern"

    def __init__(self, branch: str, specify_command: str = DEFAULT_SPECIFY_COMMAND):
        self.branch = branch
        example = FEATURE_BRANCH_EXAMPLE
        super().__init__(
            f"Current branch '{branch}' does not match required pattern.",
            [
                f"Expected pattern: ###-feature-name (e.g., {example})",
                "",
                "To use this command:",
                "  1. Create a branch with the correct pattern: git branch 042-my-feature",
                "  2. Create a worktree: git worktree add ../my-feature 042-my-feature",
                "  3. Navigate to the worktree and run this command",
                "",
                f"Or use {specify_command} to auto-generate a numbered branch.",
            ],
        )


class ConfigError(WorktreeFeatureError):
    """Raised when .specify/config.yaml cannot be parsed or validated."""

    code = "ConfigError"

    def __init__(self, config_file: Path, detail: str):
        self.config_file = config_file
        super().__init__(
            f"Invalid configuration in {config_file}: {detail}",
            [f"Fix or remove {config_file} and re-run."],
        )


class ProvisioningError(WorktreeFeatureError):
    """Filesystem failure while creating the feature directory or spec file."""

    code = "ProvisioningFailed"

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(
            f"Could not create {path}: {error.strerror or error}",
            ["Check directory permissions and re-run; completed steps are reused."],
        )


__all__ = [
    "ConfigError",
    "DetachedHeadError",
    "InvalidBranchPatternError",
    "MissingDescriptionError",
    "NotAGitRepositoryError",
    "ProtectedBranchError",
    "ProvisioningError",
    "RootNotFoundError",
    "WorktreeFeatureError",
]
