"""Feature directory and spec file provisioning."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os
import shutil
import tempfile

from .constants import (
    SPECIFY_DIR,
    SPECS_DIR,
    SPEC_FILENAME,
    SPEC_TEMPLATE_NAME,
    TEMPLATES_DIR,
)
from .exceptions import ProvisioningError

logger = logging.getLogger(__name__)

__all__ = [
    "ProvisionedFeature",
    "feature_dir_for",
    "provision_feature",
    "spec_template_path",
]


@dataclass
class ProvisionedFeature:
    """Paths produced for a feature plus what was done to them."""

    feature_dir: Path
    spec_file: Path
    created: bool
    template_used: bool
    warnings: list[str] = field(default_factory=list)


def spec_template_path(repo_root: Path) -> Path:
    return repo_root / SPECIFY_DIR / TEMPLATES_DIR / SPEC_TEMPLATE_NAME


def feature_dir_for(repo_root: Path, branch_name: str) -> Path:
    return repo_root / SPECS_DIR / branch_name


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ProvisioningError(path, e) from e


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_spec_file(spec_file: Path, template: Path | None) -> None:
    """Create ``spec_file`` from ``template`` bytes (or empty) via temp file + rename.

    An interrupted copy leaves only a hidden temp file, never a truncated
    spec.md, so a re-run starts from a clean slate.
    """
    fd, tmp_path = tempfile.mkstemp(
        dir=spec_file.parent,
        prefix=f".{spec_file.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as dst:
            if template is not None:
                with open(template, "rb") as src:
                    shutil.copyfileobj(src, dst)
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, spec_file)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise ProvisioningError(spec_file, e) from e


def provision_feature(repo_root: Path, branch_name: str) -> ProvisionedFeature:
    """Ensure ``specs/<branch>/spec.md`` exists under ``repo_root``.

    Existing spec content is never touched; a warning is recorded instead.
    A new spec file gets the template's bytes when the template exists and
    is empty otherwise.

    Raises:
        ProvisioningError: If a directory or the spec file cannot be created.
    """
    _make_dir(repo_root / SPECS_DIR)

    feature_dir = feature_dir_for(repo_root, branch_name)
    _make_dir(feature_dir)

    spec_file = feature_dir / SPEC_FILENAME
    if spec_file.exists():
        logger.debug("Reusing existing spec file: %s", spec_file)
        return ProvisionedFeature(
            feature_dir=feature_dir,
            spec_file=spec_file,
            created=False,
            template_used=False,
            warnings=[
                f"Spec directory already exists at {feature_dir}",
                "Existing spec.md will be used. Delete it manually if you want to start fresh.",
            ],
        )

    template = spec_template_path(repo_root)
    if template.is_file():
        logger.debug("Copying spec template %s -> %s", template, spec_file)
        _write_spec_file(spec_file, template)
        template_used = True
    else:
        logger.debug("No spec template at %s; creating empty spec file", template)
        _write_spec_file(spec_file, None)
        template_used = False

    return ProvisionedFeature(
        feature_dir=feature_dir,
        spec_file=spec_file,
        created=True,
        template_used=template_used,
    )
