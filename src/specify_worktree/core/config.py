"""Optional project configuration for worktree feature initialization.

Settings are read from ``.specify/config.yaml`` under the ``worktree`` key::

    worktree:
      protected_branches:
        - release
      specify_command: /speckit.specify

A missing file or section yields defaults. ``main`` and ``master`` are
always protected regardless of configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_SPECIFY_COMMAND,
    PROTECTED_BRANCHES,
    SPECIFY_DIR,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = ["WorktreeConfig", "config_path", "load_worktree_config"]


@dataclass(frozen=True)
class WorktreeConfig:
    """Worktree initializer settings.

    Attributes:
        protected_branches: Branch names the initializer refuses to use
        specify_command: Branch-creating command named in error guidance
    """

    protected_branches: frozenset[str] = field(default=PROTECTED_BRANCHES)
    specify_command: str = DEFAULT_SPECIFY_COMMAND


def config_path(repo_root: Path) -> Path:
    return repo_root / SPECIFY_DIR / CONFIG_FILENAME


def load_worktree_config(repo_root: Path) -> WorktreeConfig:
    """Load worktree settings from .specify/config.yaml.

    Args:
        repo_root: Repository root directory

    Returns:
        WorktreeConfig instance (defaults if not configured)

    Raises:
        ConfigError: If the file is not valid YAML or has wrong value types
    """
    config_file = config_path(repo_root)

    if not config_file.is_file():
        logger.debug("Config file not found: %s", config_file)
        return WorktreeConfig()

    yaml = YAML()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise ConfigError(config_file, f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(config_file, "expected a mapping at the top level")

    section = data.get("worktree") or {}
    if not isinstance(section, dict):
        raise ConfigError(config_file, "expected 'worktree' to be a mapping")

    extra = section.get("protected_branches") or []
    if isinstance(extra, str):
        extra = [extra]
    if not isinstance(extra, list) or not all(isinstance(name, str) for name in extra):
        raise ConfigError(
            config_file,
            "expected worktree.protected_branches to be a list of branch names",
        )

    specify_command = section.get("specify_command", DEFAULT_SPECIFY_COMMAND)
    if not isinstance(specify_command, str) or not specify_command.strip():
        raise ConfigError(config_file, "expected worktree.specify_command to be a non-empty string")

    protected = PROTECTED_BRANCHES | {name.strip() for name in extra if name.strip()}
    return WorktreeConfig(
        protected_branches=frozenset(protected),
        specify_command=specify_command.strip(),
    )
