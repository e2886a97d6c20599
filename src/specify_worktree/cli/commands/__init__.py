"""CLI command modules for wt-specify."""

from .init_feature import init_feature

__all__ = ["init_feature"]
