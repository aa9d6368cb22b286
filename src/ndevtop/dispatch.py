"""
Keyboard dispatch filter.

Every raw key event is classified according to the current input mode
before any widget sees it:

- COMMAND: command letters go to the refresh loop, anything else reaches
  the table (scroll keys keep working)
- TEXT_ENTRY: everything reaches the prompt except focus cycling keys
"""

from enum import Enum
from typing import Optional

KEY_QUIT = "q"
KEY_INTERVAL = "d"
KEY_FILTER = "f"

# letter -> (sort key, ascending)
SORT_KEYS_BY_LETTER = {
    "n": ("name", True),
    "N": ("name", False),
    "r": ("rx_bytes", True),
    "R": ("rx_bytes", False),
    "t": ("tx_bytes", True),
    "T": ("tx_bytes", False),
    "i": ("rx_packets", True),
    "I": ("rx_packets", False),
    "o": ("tx_packets", True),
    "O": ("tx_packets", False),
}

COMMAND_KEYS = frozenset({KEY_QUIT, KEY_INTERVAL, KEY_FILTER, *SORT_KEYS_BY_LETTER})

FOCUS_CYCLE_KEYS = frozenset({"tab", "shift+tab"})


class InputMode(Enum):
    COMMAND = "command"
    TEXT_ENTRY = "text_entry"


class Verdict(Enum):
    FORWARD = "forward"  # consumed and sent to the refresh loop
    PASS = "pass"        # left for the focused widget
    BLOCK = "block"      # consumed and dropped


def dispatch(mode: InputMode, key: str, character: Optional[str] = None) -> Verdict:
    """Classify one key event.

    Args:
        mode: Current input mode
        key: Key name as reported by the terminal (e.g. "tab", "j")
        character: Printable character of the key, if any
    """
    if mode is InputMode.TEXT_ENTRY:
        if key in FOCUS_CYCLE_KEYS:
            return Verdict.BLOCK
        return Verdict.PASS

    if character is not None and character in COMMAND_KEYS:
        return Verdict.FORWARD
    return Verdict.PASS
