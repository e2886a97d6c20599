"""Shared path and naming constants for the spec-kit repository layout."""

from __future__ import annotations

import re

SPECS_DIR = "specs"
SPECIFY_DIR = ".specify"
TEMPLATES_DIR = "templates"
SPEC_TEMPLATE_NAME = "spec-template.md"
SPEC_FILENAME = "spec.md"
CONFIG_FILENAME = "config.yaml"

# Markers accepted by the fallback root walk. ``.git`` may be a file in worktrees.
GIT_MARKER = ".git"

FEATURE_BRANCH_PATTERN = re.compile(r"^[0-9]{3}-.+")
FEATURE_BRANCH_EXAMPLE = "042-user-auth"
FEATURE_NUM_LENGTH = 3

PROTECTED_BRANCHES = frozenset({"main", "master"})
DETACHED_HEAD_SENTINEL = "HEAD"

SPECIFY_FEATURE_ENV = "SPECIFY_FEATURE"
DEFAULT_SPECIFY_COMMAND = "/speckit.specify"

LOG_PREFIX = "[wt-specify]"

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_SPECIFY_COMMAND",
    "DETACHED_HEAD_SENTINEL",
    "FEATURE_BRANCH_EXAMPLE",
    "FEATURE_BRANCH_PATTERN",
    "FEATURE_NUM_LENGTH",
    "GIT_MARKER",
    "LOG_PREFIX",
    "PROTECTED_BRANCHES",
    "SPECIFY_DIR",
    "SPECIFY_FEATURE_ENV",
    "SPECS_DIR",
    "SPEC_FILENAME",
    "SPEC_TEMPLATE_NAME",
    "TEMPLATES_DIR",
]
