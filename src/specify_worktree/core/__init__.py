"""Core worktree feature initialization exports."""

from .branch import ValidatedBranch, resolve_feature_branch, validate_branch_name
from .config import WorktreeConfig, load_worktree_config
from .exceptions import (
    ConfigError,
    DetachedHeadError,
    InvalidBranchPatternError,
    MissingDescriptionError,
    NotAGitRepositoryError,
    ProtectedBranchError,
    ProvisioningError,
    RootNotFoundError,
    WorktreeFeatureError,
)
from .git import GitRepository, SubprocessGit
from .initializer import FeatureInitResult, init_worktree_feature, join_description
from .provision import ProvisionedFeature, provision_feature
from .repo_root import RepoRoot, resolve_repo_root

__all__ = [
    "ConfigError",
    "DetachedHeadError",
    "FeatureInitResult",
    "GitRepository",
    "InvalidBranchPatternError",
    "MissingDescriptionError",
    "NotAGitRepositoryError",
    "ProtectedBranchError",
    "ProvisionedFeature",
    "ProvisioningError",
    "RepoRoot",
    "RootNotFoundError",
    "SubprocessGit",
    "ValidatedBranch",
    "WorktreeConfig",
    "WorktreeFeatureError",
    "init_worktree_feature",
    "join_description",
    "load_worktree_config",
    "provision_feature",
    "resolve_feature_branch",
    "resolve_repo_root",
    "validate_branch_name",
]
