"""Interactive commit form.

This package provides:
- keys: KeyEvent, decode_key, read_key
- fields: TextInput, TextArea
- state: ComposerState, FocusSlot, Decision, update
- view: render
- app: run_composer
"""

from commitform.tui.keys import KeyEvent, decode_key, read_key, runes
from commitform.tui.fields import TextArea, TextInput
from commitform.tui.state import ComposerState, Decision, FocusSlot, update
from commitform.tui.view import render
from commitform.tui.app import run_composer


__all__ = [
    "KeyEvent",
    "decode_key",
    "read_key",
    "runes",
    "TextArea",
    "TextInput",
    "ComposerState",
    "Decision",
    "FocusSlot",
    "update",
    "render",
    "run_composer",
]
