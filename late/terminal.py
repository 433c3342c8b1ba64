"""Terminal interface using Blessed for display and Curtsies for input."""

from typing import Optional

import blessed
from curtsies import Input

from .highlight import keyword_style


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    The editor only issues commands through this class; raw mode is owned
    by the curtsies ``Input`` context entered in ``setup``.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def setup(self):
        """Enter fullscreen mode and raw input."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._input is None:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore the terminal."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def read_key(self) -> Optional[str]:
        """Block until the next key arrives and return its curtsies name."""
        if self._input is None:
            return None
        return str(next(self._input))

    def write(self, text: str, width: Optional[int] = None):
        """Write text at the current position, truncated to ``width`` cells.

        Truncation keeps terminal sequences intact.
        """
        if width is not None:
            text = self.term.truncate(text, width)
        print(text, end='')

    def write_status(self, text: str, width: int):
        """Write a full-width line in reverse video."""
        print(self.term.reverse + text[:width].ljust(width) + self.term.normal, end='')

    def keyword_style(self, token: str) -> str:
        """Style used for highlighted keywords."""
        return keyword_style(self.term)(token)

    def move_cursor(self, column: int, row: int):
        print(self.term.move_xy(column, row), end='')

    def clear_line(self):
        print(self.term.clear_eol, end='')

    def clear_screen(self):
        print(self.term.home + self.term.clear, end='')

    def hide_cursor(self):
        print(self.term.hide_cursor, end='')

    def show_cursor(self):
        print(self.term.normal_cursor, end='')

    def flush(self):
        print(end='', flush=True)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
