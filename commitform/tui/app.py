"""Interactive loop driving the commit form."""

from typing import Callable, Optional

import typer

from commitform.config import Settings
from commitform.exceptions import TerminalError
from commitform.message import CommitMessage
from commitform.tui.keys import KeyEvent, read_key
from commitform.tui.state import ComposerState, Decision, update
from commitform.tui.view import render


def show_frame(frame: str, clear: bool = True) -> None:
    """Draw one frame of the form on the terminal."""
    if clear:
        typer.clear()
    typer.echo(frame, nl=False)


def run_composer(
    read: Callable[[], KeyEvent] = read_key,
    show: Callable[[str, bool], None] = show_frame,
    settings: Optional[Settings] = None,
) -> Optional[CommitMessage]:
    """Run the commit form until the user commits or quits.

    Args:
        read: Returns the next key press. Blocks until one is available.
        show: Draws a rendered frame; receives the frame and whether to clear.
        settings: Presentation settings. Defaults to Settings().

    Returns:
        The composed CommitMessage, or None if the user quit.

    Raises:
        TerminalError: If the terminal cannot be read.
    """
    settings = settings or Settings()
    state = ComposerState()

    while True:
        show(render(state, color=settings.color), settings.clear_screen)
        try:
            key = read()
        except OSError as e:
            raise TerminalError(f"error reading from terminal: {e}") from e

        state, decision = update(state, key)
        if decision is Decision.QUIT:
            return None
        if decision is Decision.COMMIT:
            return state.to_message()
