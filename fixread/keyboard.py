"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """A parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'page_down')
    raw: str  # The raw key string from curtsies

    @property
    def is_ctrl(self) -> bool:
        return self.key_type == KeyType.CTRL


# curtsies names -> canonical special key names
_SPECIAL_NAMES = {
    'left': 'left', 'right': 'right', 'up': 'up', 'down': 'down',
    'home': 'home', 'end': 'end', 'enter': 'enter', 'backspace': 'backspace',
    'delete': 'delete', 'pageup': 'page_up', 'page_up': 'page_up',
    'pagedown': 'page_down', 'page_down': 'page_down',
    'esc': 'escape', 'escape': 'escape',
}


class KeyboardHandler:
    """Turns curtsies key names into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token such as '<PAGEDOWN>', '<Ctrl-q>' or 'a'."""
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            parts = key_str[1:-1].lower().replace('+', '-').split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(KeyType.REGULAR, ' ', ' ')
            if 'ctrl' in mods and len(base) == 1:
                # Terminals send Ctrl-J / Ctrl-M for Enter
                if base in ('j', 'm'):
                    return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
                return KeyEvent(KeyType.CTRL, base, key_str)
            return KeyEvent(KeyType.SPECIAL, _SPECIAL_NAMES.get(base, base), key_str)

        if len(key_str) == 1:
            code = ord(key_str)
            if code in (10, 13):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if code in (8, 127):
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if code == 27:
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            if 1 <= code <= 26:  # Ctrl-A .. Ctrl-Z
                return KeyEvent(KeyType.CTRL, chr(ord('a') + code - 1), key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)
