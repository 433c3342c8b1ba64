"""Keyboard input handling using curtsies-style key names."""

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
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str = ""


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'escape',
}

ALIASES = {
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'page_up': 'page_up',
    'page_down': 'page_down',
    'esc': 'escape',
    'return': 'enter',
}


class KeyboardHandler:
    """Turns terminal key names into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it."""
        key = self.terminal.read_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name such as ``<LEFT>`` or ``<Ctrl-q>``.

        Plain strings are treated as typed text.
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = ALIASES.get(parts[-1], parts[-1])
            mods = set(parts[:-1])
            if not mods:
                if base in ('space', 'spacebar'):
                    return KeyEvent(KeyType.REGULAR, ' ', key_str)
                if base == 'tab':
                    return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if 'ctrl' in mods and len(base) == 1:
                return self._ctrl(base, key_str)
            if base in SPECIAL_KEYS:
                return KeyEvent(KeyType.SPECIAL, base, key_str)
            # Unknown named keys (function keys, Alt combinations) stay special
            return KeyEvent(KeyType.SPECIAL, name, key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str == '\t':
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if 1 <= o <= 26:
                return self._ctrl(chr(ord('a') + o - 1), key_str)
            if o == 27:
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            if o == 127:
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)

    @staticmethod
    def _ctrl(letter: str, raw: str) -> KeyEvent:
        # Ctrl-J / Ctrl-M arrive for Enter, Ctrl-H for Backspace on some terminals
        if letter in ('j', 'm'):
            return KeyEvent(KeyType.SPECIAL, 'enter', raw)
        if letter == 'h':
            return KeyEvent(KeyType.SPECIAL, 'backspace', raw)
        if letter == 'i':
            return KeyEvent(KeyType.REGULAR, '\t', raw)
        return KeyEvent(KeyType.CTRL, letter, raw)
