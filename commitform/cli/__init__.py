"""CLI entry point for commitform."""

import typer

from commitform.cli.main import main_command

app = typer.Typer(
    name="commitform",
    help="commitform: compose structured git commit messages",
    add_completion=False,
)

# Single command: no subcommands, options apply directly to `commitform`
app.command()(main_command)


__all__ = [
    "app",
    "main_command",
]
