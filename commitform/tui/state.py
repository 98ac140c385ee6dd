"""Commit form state machine.

The form has five focus slots arranged in a cycle:

    Prefix -> Summary -> Description -> [ Commit ] -> [ Quit ] -> Prefix

Besides the focused slot, the form is in exactly one mode: browsing, the open
prefix dropdown, editing the summary or editing the description. A mode other
than browsing is only valid on its own slot.

``update`` is the pure transition function. Key handling precedence:

1. ctrl+c quits from any state, even while editing text.
2. "q" quits unless a text field is being edited. This also applies while
   the prefix dropdown is open or a button has focus, so "q" abandons an open
   dropdown immediately.
3. tab / shift+tab leave the current mode (an open dropdown is closed without
   confirming its highlighted entry) and move focus one slot.
4. Otherwise the focused slot handles the key.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Optional, Union

from commitform.message import PREFIX_OPTIONS, CommitMessage
from commitform.tui.fields import TextArea, TextInput
from commitform.tui.keys import KeyEvent


class FocusSlot(IntEnum):
    """Interactive regions of the form, in focus order."""

    PREFIX = 0
    SUMMARY = 1
    DESCRIPTION = 2
    COMMIT = 3
    QUIT = 4

    def step(self, delta: int) -> "FocusSlot":
        """Return the slot ``delta`` steps away, wrapping around."""
        return FocusSlot((self.value + delta) % len(FocusSlot))


class Decision(Enum):
    """How the form terminated."""

    COMMIT = "commit"
    QUIT = "quit"


@dataclass(frozen=True)
class Browsing:
    """No field is open; keys move focus or activate the focused slot."""


@dataclass(frozen=True)
class PrefixDropdownOpen:
    """The prefix list is expanded with ``highlight`` marked."""

    highlight: int


@dataclass(frozen=True)
class EditingSummary:
    """Keys are forwarded to the summary editor."""


@dataclass(frozen=True)
class EditingDescription:
    """Keys are forwarded to the description editor."""


Mode = Union[Browsing, PrefixDropdownOpen, EditingSummary, EditingDescription]

BROWSING = Browsing()

# Slot each non-browsing mode belongs to
_MODE_SLOTS = {
    PrefixDropdownOpen: FocusSlot.PREFIX,
    EditingSummary: FocusSlot.SUMMARY,
    EditingDescription: FocusSlot.DESCRIPTION,
}

QUIT_KEY = "q"
INTERRUPT_KEY = "ctrl+c"
ACCEPT_KEY = "enter"
CANCEL_KEY = "esc"
EDIT_KEYS = ("enter", "i", "insert")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")


@dataclass(frozen=True)
class ComposerState:
    """Complete state of the commit form."""

    focus: FocusSlot = FocusSlot.PREFIX
    mode: Mode = BROWSING
    prefix_index: int = 0
    summary: TextInput = field(default_factory=TextInput)
    description: TextArea = field(default_factory=TextArea)

    def __post_init__(self):
        slot = _MODE_SLOTS.get(type(self.mode))
        if slot is not None and slot != self.focus:
            raise ValueError(f"{type(self.mode).__name__} is only valid on {slot.name}, not {self.focus.name}")
        if not 0 <= self.prefix_index < len(PREFIX_OPTIONS):
            raise ValueError(f"prefix_index out of range: {self.prefix_index}")
        if isinstance(self.mode, PrefixDropdownOpen) and not 0 <= self.mode.highlight < len(PREFIX_OPTIONS):
            raise ValueError(f"dropdown highlight out of range: {self.mode.highlight}")

    @property
    def prefix(self) -> str:
        return PREFIX_OPTIONS[self.prefix_index]

    @property
    def dropdown_open(self) -> bool:
        return isinstance(self.mode, PrefixDropdownOpen)

    @property
    def dropdown_index(self) -> Optional[int]:
        """Highlighted dropdown entry, or None while the dropdown is closed."""
        if isinstance(self.mode, PrefixDropdownOpen):
            return self.mode.highlight
        return None

    @property
    def summary_editing(self) -> bool:
        return isinstance(self.mode, EditingSummary)

    @property
    def description_editing(self) -> bool:
        return isinstance(self.mode, EditingDescription)

    @property
    def summary_buffer(self) -> str:
        return self.summary.value

    @property
    def description_buffer(self) -> str:
        return self.description.value

    def to_message(self) -> CommitMessage:
        """Build the commit message from the confirmed prefix and both buffers."""
        return CommitMessage(
            prefix=self.prefix,
            summary=self.summary_buffer,
            description=self.description_buffer,
        )


def update(state: ComposerState, key: KeyEvent) -> tuple[ComposerState, Optional[Decision]]:
    """Apply one key press to the form.

    Args:
        state: Current form state.
        key: The key press.

    Returns:
        The new state, and the Decision if the form terminated (None otherwise).
    """
    name = str(key)
    if key.is_text and len(key.text) != 1:
        # pasted text never matches a key binding
        name = ""

    if name == INTERRUPT_KEY:
        return state, Decision.QUIT

    if name == QUIT_KEY and not (state.summary_editing or state.description_editing):
        return state, Decision.QUIT

    if name in ("tab", "shift+tab"):
        step = 1 if name == "tab" else -1
        return replace(state, mode=BROWSING, focus=state.focus.step(step)), None

    handler = _SLOT_HANDLERS[state.focus]
    return handler(state, key, name)


def _handle_prefix(state, key, name):
    mode = state.mode
    if isinstance(mode, PrefixDropdownOpen):
        if name in UP_KEYS:
            return replace(state, mode=PrefixDropdownOpen(max(0, mode.highlight - 1))), None
        if name in DOWN_KEYS:
            last = len(PREFIX_OPTIONS) - 1
            return replace(state, mode=PrefixDropdownOpen(min(last, mode.highlight + 1))), None
        if name == ACCEPT_KEY:
            return replace(state, mode=BROWSING, prefix_index=mode.highlight), None
        if name == CANCEL_KEY:
            return replace(state, mode=BROWSING), None
        return state, None

    if name == ACCEPT_KEY:
        return replace(state, mode=PrefixDropdownOpen(state.prefix_index)), None
    return state, None


def _handle_summary(state, key, name):
    if not state.summary_editing:
        if name in EDIT_KEYS:
            return replace(state, mode=EditingSummary()), None
        return state, None
    if name == CANCEL_KEY:
        return replace(state, mode=BROWSING), None
    return replace(state, summary=state.summary.handle_key(key)), None


def _handle_description(state, key, name):
    if not state.description_editing:
        if name in EDIT_KEYS:
            return replace(state, mode=EditingDescription()), None
        return state, None
    if name == CANCEL_KEY:
        return replace(state, mode=BROWSING), None
    return replace(state, description=state.description.handle_key(key)), None


def _handle_commit(state, key, name):
    if name == ACCEPT_KEY:
        return state, Decision.COMMIT
    return state, None


def _handle_quit(state, key, name):
    if name == ACCEPT_KEY:
        return state, Decision.QUIT
    return state, None


_SLOT_HANDLERS = {
    FocusSlot.PREFIX: _handle_prefix,
    FocusSlot.SUMMARY: _handle_summary,
    FocusSlot.DESCRIPTION: _handle_description,
    FocusSlot.COMMIT: _handle_commit,
    FocusSlot.QUIT: _handle_quit,
}
