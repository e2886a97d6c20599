"""Typer application for the wt-specify command."""

import typer

from .commands import init_feature

app = typer.Typer(
    name="wt-specify",
    help="Initialize a feature spec in a git worktree on an existing ###-feature branch",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Single command: typer runs it directly, no subcommand name needed.
app.command()(init_feature)

__all__ = ["app"]
