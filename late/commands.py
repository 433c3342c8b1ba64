"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

import grapheme

from .constants import EditorConstants
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Returns:
            True if the command modified the document
        """


class MovementCommand(EditorCommand):
    """Moves the cursor in the direction named by the key."""

    def __init__(self, direction: Optional[str] = None):
        self.direction = direction

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.cursor.move(self.direction or key_event.value, editor.document)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        text = key_event.value
        if not text or any(ord(ch) < 32 and ch != '\t' for ch in text):
            return
        for cluster in grapheme.graphemes(text):
            doc = editor.document
            pos = editor.cursor.position
            row = doc.row(pos.row)
            before = row.length if row is not None else -1
            doc.insert(cluster, pos)
            after = doc.row(pos.row)
            # A lone combining mark joins the previous grapheme
            if after is not None and after.length > before:
                editor.cursor.move('right', doc)


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.document.insert(EditorConstants.NEWLINE, editor.cursor.position)
        editor.cursor.move('right', editor.document)


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        pos = editor.cursor.position
        if pos.column > 0 or pos.row > 0:
            editor.cursor.move('left', editor.document)
            editor.document.delete(editor.cursor.position)


class DeleteCharCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.document.delete(editor.cursor.position)
        editor.cursor.refresh(editor.document)


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Run the command."""


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.request_quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.handle_save()


class CommandRegistry:
    """Maps key events to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        # Navigation
        for direction in ('left', 'right', 'up', 'down', 'home', 'end',
                          'page_up', 'page_down'):
            self.register((KeyType.SPECIAL, direction), MovementCommand())
        self.register((KeyType.CTRL, 'a'), MovementCommand('home'))
        self.register((KeyType.CTRL, 'e'), MovementCommand('end'))

        # Editing
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.CTRL, 'd'), DeleteCharCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        if key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand().execute(editor, key_event)

        return False
