"""
wt-specify - initialize a spec-kit feature inside an existing git worktree.

Usage:
    wt-specify "Add user authentication system"
    wt-specify --json "Add user authentication system"

The library entry point is ``init_worktree_feature``; the CLI is a thin
parsing and rendering layer on top of it.
"""

from specify_worktree.core import (
    FeatureInitResult,
    WorktreeFeatureError,
    init_worktree_feature,
)

__version__ = "0.1.0"


def main():
    from specify_worktree.cli import app

    app()


__all__ = [
    "FeatureInitResult",
    "WorktreeFeatureError",
    "__version__",
    "init_worktree_feature",
    "main",
]
