"""
Custom widgets for ndevtop.

Contains:
- DeviceTable: Data table with vi-style scroll keys
- PromptInput: Single line editor used by the modal prompts
"""

from textual.binding import Binding
from textual.message import Message
from textual.widgets import DataTable, Input


class DeviceTable(DataTable):
    """Device rate table; scroll keys mirror less(1)."""

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("h", "cursor_left", "Left", show=False),
        Binding("l", "cursor_right", "Right", show=False),
        Binding("g", "scroll_top", "Top", show=False),
        Binding("G", "scroll_bottom", "Bottom", show=False),
        Binding("ctrl+f", "page_down", "Page Down", show=False),
        Binding("ctrl+b", "page_up", "Page Up", show=False),
    ]


class PromptInput(Input):
    """Input field that is only enabled while a prompt is active."""

    BINDINGS = [
        Binding("escape", "abandon", "Cancel", show=False),
    ]

    class Abandoned(Message):
        """Posted when the user leaves the prompt without confirming."""
        def __init__(self, prompt: "PromptInput") -> None:
            self.prompt = prompt
            super().__init__()

    def begin(self, numeric: bool = False, max_length: int = 0) -> None:
        """Clear and unlock the field for a new prompt."""
        self.restrict = r"[0-9]*" if numeric else None
        self.max_length = max_length
        self.value = ""
        self.disabled = False

    def end(self) -> None:
        self.value = ""
        self.restrict = None
        self.max_length = 0
        self.disabled = True

    def action_abandon(self) -> None:
        self.post_message(self.Abandoned(self))
