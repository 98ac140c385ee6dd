"""Keyboard events for the commit form.

Contains:
- KeyEvent: A single key press, or a run of typed/pasted text
- decode_key: Translate raw terminal input into a KeyEvent
- read_key: Block until the next key press on the terminal
"""

from dataclasses import dataclass

import typer

# Event name for printable input; the typed text is carried in KeyEvent.text
RUNES = "runes"


@dataclass(frozen=True)
class KeyEvent:
    """A keyboard event.

    ``str(event)`` is the key name ("tab", "enter", "ctrl+c", ...) for special
    keys and the typed text for printable input, so handlers can compare
    against plain strings such as "q" or "enter".
    """

    name: str
    text: str = ""

    def __str__(self) -> str:
        if self.name == RUNES:
            return self.text
        return self.name

    @property
    def is_text(self) -> bool:
        return self.name == RUNES


def runes(text: str) -> KeyEvent:
    """Build an event for typed or pasted text."""
    return KeyEvent(RUNES, text)


CTRL_C = KeyEvent("ctrl+c")
CTRL_D = KeyEvent("ctrl+d")
TAB = KeyEvent("tab")
SHIFT_TAB = KeyEvent("shift+tab")
ENTER = KeyEvent("enter")
ESC = KeyEvent("esc")
UP = KeyEvent("up")
DOWN = KeyEvent("down")
LEFT = KeyEvent("left")
RIGHT = KeyEvent("right")
HOME = KeyEvent("home")
END = KeyEvent("end")
INSERT = KeyEvent("insert")
DELETE = KeyEvent("delete")
BACKSPACE = KeyEvent("backspace")
SPACE = runes(" ")

_SEQUENCES = {
    "\x1b": ESC,
    "\t": TAB,
    "\x1b[Z": SHIFT_TAB,
    "\r": ENTER,
    "\n": ENTER,
    "\r\n": ENTER,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    "\x03": CTRL_C,
    "\x04": CTRL_D,
    "\x01": KeyEvent("ctrl+a"),
    "\x05": KeyEvent("ctrl+e"),
    "\x0b": KeyEvent("ctrl+k"),
    "\x15": KeyEvent("ctrl+u"),
    "\x17": KeyEvent("ctrl+w"),
    "\x1b[A": UP,
    "\x1b[B": DOWN,
    "\x1b[C": RIGHT,
    "\x1b[D": LEFT,
    "\x1bOA": UP,
    "\x1bOB": DOWN,
    "\x1bOC": RIGHT,
    "\x1bOD": LEFT,
    "\x1b[H": HOME,
    "\x1b[F": END,
    "\x1bOH": HOME,
    "\x1bOF": END,
    "\x1b[1~": HOME,
    "\x1b[7~": HOME,
    "\x1b[4~": END,
    "\x1b[8~": END,
    "\x1b[2~": INSERT,
    "\x1b[3~": DELETE,
    # Windows console scan codes
    "\xe0H": UP,
    "\xe0P": DOWN,
    "\xe0M": RIGHT,
    "\xe0K": LEFT,
    "\xe0G": HOME,
    "\xe0O": END,
    "\xe0R": INSERT,
    "\xe0S": DELETE,
}


def decode_key(raw: str) -> KeyEvent:
    """Translate raw terminal input into a KeyEvent.

    Args:
        raw: Characters returned by a single terminal read.

    Returns:
        The matching special key, a text event for printable input (pastes
        may contain newlines), or an event named "unknown" otherwise.
    """
    if raw in _SEQUENCES:
        return _SEQUENCES[raw]
    if raw and all(ch.isprintable() or ch in "\r\n\t" for ch in raw):
        return runes(raw)
    return KeyEvent("unknown", raw)


def read_key() -> KeyEvent:
    """Read the next key press from the terminal.

    Raises:
        OSError: If no terminal is available.
    """
    try:
        raw = typer.getchar()
    except KeyboardInterrupt:
        return CTRL_C
    except EOFError:
        return CTRL_D
    return decode_key(raw)
