"""Rendering of the commit form.

``render`` is a pure projection of ComposerState to text: the same state
always renders to the same string.
"""

import typer

from commitform.message import PREFIX_OPTIONS
from commitform.tui.state import ComposerState, FocusSlot

FOCUS_COLOR = (247, 185, 119)  # #f7b977
BLUR_COLOR = (88, 88, 88)  # #585858
VALUE_COLOR = (230, 234, 230)  # #e6eae6

# Marks the focused slot when colors are disabled
PLAIN_FOCUS_MARKER = "» "

BUTTON_GAP = "    "


def _emphasis(text: str, focused: bool, color: bool) -> str:
    if not color:
        return PLAIN_FOCUS_MARKER + text if focused else text
    if focused:
        return typer.style(text, fg=FOCUS_COLOR, bold=True)
    return typer.style(text, fg=BLUR_COLOR)


def _value(text: str, color: bool) -> str:
    if not color:
        return typer.unstyle(text)
    # Style line by line so each terminal row resets its own attributes
    return "\n".join(typer.style(line, fg=VALUE_COLOR) for line in text.split("\n"))


def _dropdown(state: ComposerState, color: bool) -> list[str]:
    rows = []
    for index, option in enumerate(PREFIX_OPTIONS):
        if index == state.dropdown_index:
            line = "> " + option
            rows.append(typer.style(line, fg=FOCUS_COLOR, bold=True) if color else line)
        else:
            line = "  " + option
            rows.append(typer.style(line, fg=BLUR_COLOR) if color else line)
    return rows


def render(state: ComposerState, color: bool = True) -> str:
    """Render the form.

    Args:
        state: The form state to draw.
        color: Emit ANSI styling. When False the focused slot is marked with
            a leading "» " instead.

    Returns:
        The form as text, ending with a newline.
    """
    focus = state.focus
    lines = []

    lines.append(_emphasis("Prefix", focus == FocusSlot.PREFIX, color) + ": " + _value(state.prefix, color))
    if state.dropdown_open:
        lines.extend(_dropdown(state, color))
    lines.append("")

    summary = state.summary.view(focused=state.summary_editing)
    lines.append(_emphasis("Summary", focus == FocusSlot.SUMMARY, color) + ": " + _value(summary, color))
    lines.append("")

    description = state.description.view(focused=state.description_editing)
    lines.append(_emphasis("Description", focus == FocusSlot.DESCRIPTION, color) + ":")
    lines.append(_value(description, color))
    lines.append("")

    commit_button = _emphasis("[ Commit ]", focus == FocusSlot.COMMIT, color)
    quit_button = _emphasis("[ Quit ]", focus == FocusSlot.QUIT, color)
    lines.append(commit_button + BUTTON_GAP + quit_button)

    return "\n".join(lines) + "\n"
