"""Text-field editors used by the commit form.

Contains:
- TextInput: Single-line editor with a character limit
- TextArea: Multi-line editor with a fixed visible height

Both are immutable: handle_key returns an updated copy. Text and cursor
position are kept as a flat string and an index into it; TextArea lines are
separated by "\\n".
"""

from dataclasses import dataclass, replace
from typing import Optional

import typer

from commitform.tui.keys import KeyEvent

FIELD_WIDTH = 50
SUMMARY_CHAR_LIMIT = 100
DESCRIPTION_HEIGHT = 3


def _line_start(value: str, cursor: int) -> int:
    return value.rfind("\n", 0, cursor) + 1


def _line_end(value: str, cursor: int) -> int:
    end = value.find("\n", cursor)
    return len(value) if end == -1 else end


def _word_start(value: str, cursor: int) -> int:
    start = _line_start(value, cursor)
    i = cursor
    while i > start and value[i - 1].isspace():
        i -= 1
    while i > start and not value[i - 1].isspace():
        i -= 1
    return i


def _edit(value: str, cursor: int, key: str) -> Optional[tuple[str, int]]:
    """Apply a line-editing key shared by both editors.

    Returns:
        The new (value, cursor), or None if the key is not an editing key.
    """
    if key == "backspace":
        if cursor == 0:
            return value, cursor
        return value[:cursor - 1] + value[cursor:], cursor - 1
    if key in ("delete", "ctrl+d"):
        return value[:cursor] + value[cursor + 1:], cursor
    if key == "left":
        return value, max(0, cursor - 1)
    if key == "right":
        return value, min(len(value), cursor + 1)
    if key in ("home", "ctrl+a"):
        return value, _line_start(value, cursor)
    if key in ("end", "ctrl+e"):
        return value, _line_end(value, cursor)
    if key == "ctrl+u":
        start = _line_start(value, cursor)
        return value[:start] + value[cursor:], start
    if key == "ctrl+k":
        return value[:cursor] + value[_line_end(value, cursor):], cursor
    if key == "ctrl+w":
        start = _word_start(value, cursor)
        return value[:start] + value[cursor:], start
    return None


def _cursor(ch: str) -> str:
    return typer.style(ch, reverse=True, reset=False) + typer.style("", reverse=False, reset=False)


def _render_row(row: str, cursor_col: Optional[int]) -> str:
    """Render one visible row, drawing the cursor in reverse video.

    Only reverse video is switched off after the cursor, so colors applied
    around the row carry on past it.
    """
    if cursor_col is None:
        return row
    under = row[cursor_col] if cursor_col < len(row) else " "
    return row[:cursor_col] + _cursor(under) + row[cursor_col + 1:]


@dataclass(frozen=True)
class TextInput:
    """Single-line text editor."""

    value: str = ""
    cursor: int = 0
    char_limit: int = SUMMARY_CHAR_LIMIT
    width: int = FIELD_WIDTH

    def handle_key(self, key: KeyEvent) -> "TextInput":
        """Apply a key press and return the updated editor."""
        if key.is_text:
            # Newlines and control characters never enter a single-line field
            text = "".join(ch for ch in key.text if ch.isprintable())
            text = text[:max(0, self.char_limit - len(self.value))]
            if not text:
                return self
            value = self.value[:self.cursor] + text + self.value[self.cursor:]
            return replace(self, value=value, cursor=self.cursor + len(text))

        edited = _edit(self.value, self.cursor, str(key))
        if edited is None:
            return self
        value, cursor = edited
        return replace(self, value=value, cursor=cursor)

    def view(self, focused: bool = False) -> str:
        """Render the visible part of the field.

        The window is ``width`` columns wide and scrolls to keep the cursor
        visible while focused.
        """
        if not focused:
            return self.value[:self.width]
        start = max(0, self.cursor - self.width + 1)
        visible = self.value[start:start + self.width]
        return _render_row(visible, self.cursor - start)


@dataclass(frozen=True)
class TextArea:
    """Multi-line text editor without a character limit."""

    value: str = ""
    cursor: int = 0
    width: int = FIELD_WIDTH
    height: int = DESCRIPTION_HEIGHT

    def handle_key(self, key: KeyEvent) -> "TextArea":
        """Apply a key press and return the updated editor."""
        name = str(key)
        if key.is_text or name == "enter":
            text = "\n" if name == "enter" else key.text
            text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\t", "    ")
            text = "".join(ch for ch in text if ch == "\n" or ch.isprintable())
            if not text:
                return self
            value = self.value[:self.cursor] + text + self.value[self.cursor:]
            return replace(self, value=value, cursor=self.cursor + len(text))

        if name in ("up", "down"):
            return replace(self, cursor=self._vertical_move(-1 if name == "up" else 1))

        edited = _edit(self.value, self.cursor, name)
        if edited is None:
            return self
        value, cursor = edited
        return replace(self, value=value, cursor=cursor)

    def _vertical_move(self, step: int) -> int:
        start = _line_start(self.value, self.cursor)
        column = self.cursor - start
        if step < 0:
            if start == 0:
                return self.cursor
            target_start = _line_start(self.value, start - 1)
        else:
            end = _line_end(self.value, self.cursor)
            if end == len(self.value):
                return self.cursor
            target_start = end + 1
        target_end = _line_end(self.value, target_start)
        return min(target_start + column, target_end)

    def _rows(self) -> tuple[list[str], int, int]:
        """Soft-wrap the text into rows of at most ``width`` characters.

        Returns:
            The rows, plus the row and column holding the cursor.
        """
        rows: list[str] = []
        cursor_row, cursor_col = 0, 0
        offset = 0
        for line in self.value.split("\n"):
            chunks = [line[i:i + self.width] for i in range(0, max(len(line), 1), self.width)]
            if offset <= self.cursor <= offset + len(line):
                column = self.cursor - offset
                index = min(column // self.width, len(chunks) - 1)
                cursor_row = len(rows) + index
                cursor_col = column - index * self.width
            rows.extend(chunks)
            offset += len(line) + 1
        return rows, cursor_row, cursor_col

    def view(self, focused: bool = False) -> str:
        """Render exactly ``height`` rows, scrolled to the cursor while focused."""
        rows, cursor_row, cursor_col = self._rows()
        top = max(0, cursor_row - self.height + 1) if focused else 0
        lines = []
        for index in range(top, top + self.height):
            row = rows[index] if index < len(rows) else ""
            lines.append(_render_row(row, cursor_col if focused and index == cursor_row else None))
        return "\n".join(lines)
