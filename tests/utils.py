from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def run(cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True)


def init_git_repo(path: Path, branch: str | None = None) -> Path:
    """Create a git repository with one commit, optionally on ``branch``."""
    path.mkdir(parents=True, exist_ok=True)
    run(["git", "init", "-q"], cwd=path)
    run(["git", "config", "user.email", "test@example.com"], cwd=path)
    run(["git", "config", "user.name", "Test User"], cwd=path)
    (path / "README.md").write_text("test\n", encoding="utf-8")
    run(["git", "add", "README.md"], cwd=path)
    run(["git", "commit", "-q", "-m", "init"], cwd=path)
    if branch:
        run(["git", "checkout", "-q", "-B", branch], cwd=path)
    return path


def write_spec_template(repo_root: Path, content: bytes) -> Path:
    template = repo_root / ".specify" / "templates" / "spec-template.md"
    template.parent.mkdir(parents=True, exist_ok=True)
    template.write_bytes(content)
    return template


@dataclass
class FakeGit:
    """In-memory ``GitRepository`` recording the queries made against it."""

    top_level: Path | None = None
    branch: str | None = None
    calls: list[str] = field(default_factory=list)

    def top_level_path(self, cwd: Path) -> Path | None:
        self.calls.append("top_level_path")
        return self.top_level

    def current_branch(self, repo_root: Path) -> str | None:
        self.calls.append("current_branch")
        return self.branch
