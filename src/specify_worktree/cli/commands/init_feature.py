"""``wt-specify``: initialize a feature spec on the current worktree branch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typing_extensions import Annotated

from specify_worktree.core import (
    FeatureInitResult,
    MissingDescriptionError,
    WorktreeFeatureError,
    init_worktree_feature,
    join_description,
)
from specify_worktree.core.constants import LOG_PREFIX, SPECIFY_FEATURE_ENV

USAGE = "Usage: wt-specify [--json] <feature_description>"

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("specify_worktree")
    if not verbose:
        return
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))


def _version_callback(value: bool) -> None:
    if value:
        from specify_worktree import __version__

        print(f"wt-specify {__version__}")
        raise typer.Exit()


def _print_error(error: WorktreeFeatureError) -> None:
    err_console.print(f"[red]Error[/red] {escape(f'[{error.code}]')}: {escape(error.message)}")
    for line in error.remediation:
        err_console.print(escape(line))


def _print_warnings(result: FeatureInitResult) -> None:
    for warning in result.warnings:
        err_console.print(f"{escape(LOG_PREFIX)} [yellow]Warning:[/yellow] {escape(warning)}")


def _print_result(result: FeatureInitResult, json_output: bool) -> None:
    if json_output:
        print(result.to_json())
        return
    for line in result.to_lines():
        console.print(line, markup=False)
    console.print(
        f"{SPECIFY_FEATURE_ENV} environment variable set to: {result.branch_name}",
        markup=False,
    )


def init_feature(
    description: Annotated[
        Optional[List[str]],
        typer.Argument(help="Feature description (multiple words are joined)", show_default=False),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output in JSON format")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log git and filesystem steps to stderr")] = False,
    repo: Annotated[
        Optional[Path],
        typer.Option(
            "--repo",
            exists=True,
            file_okay=False,
            help="Directory to resolve the repository from (default: current directory)",
        ),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """Initialize a feature specification using the current git branch.

    Designed for git worktree workflows where the branch already exists.
    The branch must match ###-feature-name (e.g., 042-user-auth) and must
    already exist, typically created via 'git worktree add'.

    Examples:
        wt-specify 'Add user authentication system'
        wt-specify --json 'Add user authentication system'
    """
    _configure_logging(verbose)

    try:
        feature_description = join_description(description)
        if not feature_description.strip():
            raise MissingDescriptionError(USAGE)

        result = init_worktree_feature(
            feature_description,
            start=repo,
            export_env=True,
        )
    except WorktreeFeatureError as e:
        _print_error(e)
        raise typer.Exit(1)

    _print_warnings(result)
    _print_result(result, json_output)

