from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import FakeGit, init_git_repo


@pytest.fixture(autouse=True)
def _clean_feature_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # The CLI exports SPECIFY_FEATURE into os.environ; keep tests isolated.
    monkeypatch.delenv("SPECIFY_FEATURE", raising=False)


@pytest.fixture()
def feature_repo(tmp_path: Path) -> Path:
    return init_git_repo(tmp_path / "repo", branch="001-test-feature")


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture()
def fake_git(project_dir: Path) -> FakeGit:
    return FakeGit(top_level=project_dir, branch="001-test-feature")
