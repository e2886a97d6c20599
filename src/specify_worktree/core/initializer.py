"""Initialize a feature spec in a worktree that already sits on its branch.

Unlike the branch-creating ``specify`` flow, nothing here creates or switches
branches. The current branch must already follow the ``###-feature-name``
convention; its name becomes the feature directory under ``specs/``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import json
import logging
import os

from .branch import resolve_feature_branch
from .config import load_worktree_config
from .constants import SPECIFY_FEATURE_ENV
from .exceptions import MissingDescriptionError
from .git import GitRepository, SubprocessGit
from .provision import provision_feature
from .repo_root import resolve_repo_root

logger = logging.getLogger(__name__)

__all__ = ["FeatureInitResult", "init_worktree_feature", "join_description"]


@dataclass
class FeatureInitResult:
    """Outcome of a successful initialization."""

    branch_name: str
    spec_file: Path
    feature_num: str
    repo_root: Path
    feature_dir: Path
    description: str
    created: bool
    template_used: bool
    warnings: list[str] = field(default_factory=list)

    @property
    def env(self) -> dict[str, str]:
        """Environment entries downstream steps in the same session may use."""
        return {SPECIFY_FEATURE_ENV: self.branch_name}

    def to_dict(self) -> dict[str, str]:
        return {
            "BRANCH_NAME": self.branch_name,
            "SPEC_FILE": str(self.spec_file),
            "FEATURE_NUM": self.feature_num,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def to_lines(self) -> list[str]:
        return [f"{key}: {value}" for key, value in self.to_dict().items()]


def join_description(tokens: list[str] | tuple[str, ...] | None) -> str:
    """Join variadic description tokens the way a shell joins ``"$*"``."""
    return " ".join(tokens or ())


def init_worktree_feature(
    description: str,
    *,
    git: GitRepository | None = None,
    start: Path | None = None,
    export_env: bool = False,
) -> FeatureInitResult:
    """Provision ``specs/<branch>/spec.md`` for the checked-out feature branch.

    Args:
        description: Free-text feature description; required, not interpreted.
        git: Git capability (defaults to the ``git`` executable).
        start: Directory to resolve the repository from (default: cwd).
        export_env: Also set ``SPECIFY_FEATURE`` in ``os.environ``.

    Returns:
        FeatureInitResult describing the feature directory and spec file.

    Raises:
        WorktreeFeatureError: On any precondition or validation failure.
            Nothing is created on disk before the branch has been validated.
    """
    if not description.strip():
        raise MissingDescriptionError()

    git = git or SubprocessGit()
    root = resolve_repo_root(git, start)
    config = load_worktree_config(root.path)
    branch = resolve_feature_branch(
        git,
        root,
        protected=config.protected_branches,
        specify_command=config.specify_command,
    )

    provisioned = provision_feature(root.path, branch.name)
    result = FeatureInitResult(
        branch_name=branch.name,
        spec_file=provisioned.spec_file,
        feature_num=branch.feature_num,
        repo_root=root.path,
        feature_dir=provisioned.feature_dir,
        description=description,
        created=provisioned.created,
        template_used=provisioned.template_used,
        warnings=list(provisioned.warnings),
    )

    if export_env:
        os.environ.update(result.env)
        logger.debug("%s set to %s", SPECIFY_FEATURE_ENV, branch.name)

    logger.info("Feature %s ready at %s", branch.name, provisioned.spec_file)
    return result
