"""Main CLI command: compose a commit message and commit it."""

import typer

from commitform import __revision__, __version__
from commitform.config import load_settings
from commitform.exceptions import SettingsError
from commitform.flow import Cancelled, Failed, run_commit_flow
from commitform.tui.app import run_composer


def main_command(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print the repository and author being used to stderr",
    ),
) -> None:
    """Compose a structured commit message in an interactive form and commit staged changes.

    Keys: tab/shift+tab move between fields, enter opens the prefix list or
    starts editing, esc stops editing, q or ctrl+c quits.
    """
    if version:
        typer.echo(f"v{__version__} (rev: {__revision__})")
        raise typer.Exit(0)

    try:
        settings = load_settings()
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    report = None
    if verbose:
        def report(note: str) -> None:
            typer.echo(note, err=True)

    outcome = run_commit_flow(
        compose=lambda: run_composer(settings=settings),
        report=report,
    )

    if isinstance(outcome, Cancelled):
        typer.echo("Quit selected")
        return
    if isinstance(outcome, Failed):
        typer.echo(f"Error: {outcome.error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Commit created: {outcome.commit_id}")
