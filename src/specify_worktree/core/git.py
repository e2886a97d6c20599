"""Narrow git capability used by the initializer.

Only two questions are ever asked of git: where the top of the working tree
is, and which branch is checked out. Both are exposed through the
``GitRepository`` protocol so the core can be exercised against fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
import logging
import subprocess

logger = logging.getLogger(__name__)

__all__ = [
    "GitRepository",
    "SubprocessGit",
]


class GitRepository(Protocol):
    """Read-only git queries needed to resolve and validate a feature branch."""

    def top_level_path(self, cwd: Path) -> Path | None:
        """Return the working tree root containing ``cwd``, or None."""
        ...

    def current_branch(self, repo_root: Path) -> str | None:
        """Return the checked-out branch name, ``"HEAD"`` when detached, or None."""
        ...


@dataclass
class _GitCommandResult:
    returncode: int
    stdout: str
    stderr: str


def _run_git(cwd: Path, args: list[str], timeout: int = 15) -> _GitCommandResult:
    """Run git command and normalize failure shape for deterministic handling."""
    try:
        completed = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
        )
        result = _GitCommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
    except FileNotFoundError:
        result = _GitCommandResult(
            returncode=127,
            stdout="",
            stderr="git executable not found on PATH",
        )
    except subprocess.TimeoutExpired:
        result = _GitCommandResult(
            returncode=124,
            stdout="",
            stderr=f"git command timed out: git {' '.join(args)}",
        )
    except NotADirectoryError:
        result = _GitCommandResult(
            returncode=128,
            stdout="",
            stderr=f"not a directory: {cwd}",
        )
    logger.debug("git %s (cwd=%s) -> %d", " ".join(args), cwd, result.returncode)
    return result


class SubprocessGit:
    """``GitRepository`` backed by the ``git`` executable."""

    def __init__(self, timeout: int = 15):
        self.timeout = timeout

    def top_level_path(self, cwd: Path) -> Path | None:
        result = _run_git(cwd, ["rev-parse", "--show-toplevel"], timeout=self.timeout)
        top_level = result.stdout.strip()
        if result.returncode != 0 or not top_level:
            if result.stderr.strip():
                logger.debug("git top-level query failed: %s", result.stderr.strip())
            return None
        return Path(top_level).resolve()

    def current_branch(self, repo_root: Path) -> str | None:
        result = _run_git(repo_root, ["rev-parse", "--abbrev-ref", "HEAD"], timeout=self.timeout)
        if result.returncode == 0:
            return result.stdout.strip() or None

        # Unborn branches (no commits yet) have no HEAD revision but still
        # have a symbolic ref.
        symbolic = _run_git(repo_root, ["symbolic-ref", "--short", "-q", "HEAD"], timeout=self.timeout)
        if symbolic.returncode == 0:
            return symbolic.stdout.strip() or None
        return None
