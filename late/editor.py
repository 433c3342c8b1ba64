"""Main editor controller: one document, one cursor, one loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .config import EditorConfig
from .constants import EditorConstants
from .cursor import CursorController
from .document import Document
from .errors import DocumentIOError
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .keywords import KeywordSource
from .terminal import TerminalInterface
from .version import get_version

logger = logging.getLogger(__name__)


class Editor:
    """Editor session.

    Each loop iteration draws the screen, blocks for one key and applies
    at most one edit or cursor move. I/O errors from opening propagate to
    the caller; save errors are reported on the message line.
    """

    def __init__(self, config: EditorConfig, terminal: Optional[TerminalInterface] = None,
                 keyword_source: Optional[KeywordSource] = None):
        self.config = config
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.keyword_source = keyword_source or KeywordSource(config.keyword_dirs or None)
        self.cursor = CursorController(config.viewport, config.tab_size)
        self.command_registry = CommandRegistry()
        self.running = False
        self.status_message: Optional[str] = EditorConstants.HELP_MESSAGE
        self.prompt_mode = None  # None or 'save_filename'
        self.prompt_input = ""
        self._quit_pending = False
        if config.path:
            self.document = Document.open(config.path, self.keyword_source)
        else:
            self.document = Document()

    @property
    def viewport(self):
        return self.cursor.viewport

    def run(self):
        """Run the main editor loop until quit."""
        self.terminal.setup()
        self.running = True
        try:
            while self.running:
                self._sync_size()
                self.refresh_screen()
                key_event = self.keyboard.get_key_event()
                if key_event:
                    self.handle_key_event(key_event)
        finally:
            self.terminal.clear_screen()
            self.terminal.cleanup()

    def _sync_size(self):
        """Follow terminal resizes between key presses."""
        viewport = EditorConfig.viewport_for(self.terminal.width, self.terminal.height)
        if viewport != self.cursor.viewport:
            self.cursor.resize(viewport, self.document)

    # --- Key handling ---

    def handle_key_event(self, key_event: KeyEvent):
        """Apply one key event to the document or cursor."""
        if self.prompt_mode == 'save_filename':
            self._handle_filename_prompt(key_event)
            return

        is_quit = key_event.key_type == KeyType.CTRL and key_event.value == 'q'
        if not is_quit:
            self._quit_pending = False
            self.status_message = None

        self.command_registry.execute(self, key_event)

    def request_quit(self):
        """Quit, asking once for confirmation when there are unsaved changes."""
        if self.document.dirty and not self._quit_pending:
            self._quit_pending = True
            self.status_message = EditorConstants.UNSAVED_CHANGES_MESSAGE
            return
        self.running = False

    def handle_save(self):
        """Save to the document's file, or prompt for a name."""
        if self.document.path:
            self.save_file(self.document.path)
        else:
            self.prompt_mode = 'save_filename'
            self.prompt_input = ""

    def save_file(self, filename: str) -> bool:
        """Save the document and report the outcome on the message line.

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            written = self.document.save(filename)
        except DocumentIOError as e:
            logger.warning("Save failed: %s", e)
            self.status_message = f"Error: {e}"
            return False
        self.status_message = f"{written} bytes written to {filename}"
        return True

    def _handle_filename_prompt(self, key_event: KeyEvent):
        """Handle keypress during the Save As prompt."""
        if (key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape') or \
           (key_event.key_type == KeyType.CTRL and key_event.value == 'g'):
            self.prompt_mode = None
            self.prompt_input = ""
            self.status_message = "Save aborted"
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            if not self.prompt_input:
                self.prompt_mode = None
                self.status_message = "Save aborted"
                return
            # On failure the prompt stays open so the name can be corrected
            if self.save_file(self.prompt_input):
                self.prompt_mode = None
                self.prompt_input = ""
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            self.prompt_input = self.prompt_input[:-1]
        elif key_event.key_type == KeyType.REGULAR and key_event.value.isprintable():
            self.prompt_input += key_event.value

    # --- Drawing ---

    def status_bar(self) -> str:
        dirty = " [+]" if self.document.dirty else ""
        return (f"File: '{self.document.file_name}'{dirty} "
                f"line: {self.cursor.position.row + 1}/{len(self.document)}")

    def message_line(self) -> str:
        if self.prompt_mode == 'save_filename':
            prefix = f"{self.status_message} | " if self.status_message else ""
            return f"{prefix}{EditorConstants.SAVE_PROMPT}{self.prompt_input}"
        return self.status_message or ""

    def welcome_line(self) -> str:
        width = self.viewport.width
        message = EditorConstants.WELCOME_MESSAGE.format(get_version())
        padding = " " * (max(width - len(message), 0) // 2)
        return (EditorConstants.EMPTY_ROW_MARKER + padding + message)[:width]

    def render_rows(self) -> list[str]:
        """Display strings for every text line of the viewport."""
        doc = self.document
        offset = self.cursor.offset
        width, height = self.viewport.width, self.viewport.height
        lines = []
        for i in range(height):
            row = doc.row(offset.y + i)
            if row is not None:
                lines.append(row.render(offset.x, offset.x + width, doc.keywords,
                                        self.config.tab_size,
                                        style=self.terminal.keyword_style))
            elif doc.is_empty() and i == height // 2:
                lines.append(self.welcome_line())
            else:
                lines.append(EditorConstants.EMPTY_ROW_MARKER)
        return lines

    def refresh_screen(self):
        """Redraw the status bar, the visible rows and the message line."""
        term = self.terminal
        width = self.viewport.width
        top = EditorConstants.STATUS_BAR_ROWS

        term.hide_cursor()
        term.move_cursor(0, 0)
        term.write_status(self.status_bar(), width)
        for i, line in enumerate(self.render_rows()):
            term.move_cursor(0, top + i)
            term.clear_line()
            term.write(line, width)
        message = self.message_line()
        term.move_cursor(0, top + self.viewport.height)
        term.clear_line()
        term.write(message, width)

        if self.prompt_mode:
            term.move_cursor(min(len(message), width - 1), top + self.viewport.height)
        else:
            x, y = self.cursor.screen_position(self.document)
            term.move_cursor(x, top + y)
        term.show_cursor()
        term.flush()
