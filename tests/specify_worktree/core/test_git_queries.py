"""Tests for the subprocess-backed git capability."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

from specify_worktree.core.git import SubprocessGit, _run_git
from tests.utils import init_git_repo, run


def test_top_level_path_from_nested_directory(feature_repo: Path) -> None:
    nested = feature_repo / "src" / "deep"
    nested.mkdir(parents=True)

    assert SubprocessGit().top_level_path(nested) == feature_repo.resolve()


def test_top_level_path_outside_repository(tmp_path: Path) -> None:
    outside = tmp_path.resolve() / "plain"
    outside.mkdir()

    with patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(tmp_path.resolve())}):
        assert SubprocessGit().top_level_path(outside) is None


def test_current_branch(feature_repo: Path) -> None:
    assert SubprocessGit().current_branch(feature_repo) == "001-test-feature"


def test_current_branch_detached_head_reports_sentinel(feature_repo: Path) -> None:
    run(["git", "checkout", "-q", "--detach"], cwd=feature_repo)

    assert SubprocessGit().current_branch(feature_repo) == "HEAD"


def test_current_branch_on_unborn_branch(tmp_path: Path) -> None:
    repo = tmp_path / "fresh"
    repo.mkdir()
    run(["git", "init", "-q"], cwd=repo)
    run(["git", "symbolic-ref", "HEAD", "refs/heads/007-first-feature"], cwd=repo)

    assert SubprocessGit().current_branch(repo) == "007-first-feature"


def test_linked_worktree_reports_its_own_root_and_branch(tmp_path: Path) -> None:
    main = init_git_repo(tmp_path / "main")
    worktree = tmp_path / "wt"
    run(["git", "worktree", "add", "-q", "-b", "042-user-auth", str(worktree)], cwd=main)

    git = SubprocessGit()
    assert (worktree / ".git").is_file()
    assert git.top_level_path(worktree) == worktree.resolve()
    assert git.current_branch(worktree) == "042-user-auth"


def test_run_git_handles_file_not_found(tmp_path: Path) -> None:
    """_run_git should return code 127 when git executable is missing."""
    with patch("specify_worktree.core.git.subprocess.run", side_effect=FileNotFoundError("git")):
        cmd_result = _run_git(tmp_path, ["status"])

    assert cmd_result.returncode == 127
    assert "not found" in cmd_result.stderr


def test_run_git_handles_timeout(tmp_path: Path) -> None:
    """_run_git should return code 124 when command times out."""
    with patch(
        "specify_worktree.core.git.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="git status", timeout=15),
    ):
        cmd_result = _run_git(tmp_path, ["status"])

    assert cmd_result.returncode == 124
    assert "timed out" in cmd_result.stderr


def test_missing_git_means_no_top_level(tmp_path: Path) -> None:
    with patch("specify_worktree.core.git.subprocess.run", side_effect=FileNotFoundError("git")):
        assert SubprocessGit().top_level_path(tmp_path) is None
        assert SubprocessGit().current_branch(tmp_path) is None
