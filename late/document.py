"""Document model: an ordered list of rows with an optional file."""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Collection, Iterator, Optional

from .constants import EditorConstants
from .cursor import Position
from .errors import DocumentIOError
from .keywords import KeywordSource
from .row import Row

logger = logging.getLogger(__name__)


def file_extension(path: str) -> str:
    """Return the extension of ``path`` without the dot, or ''."""
    return os.path.splitext(os.path.basename(path))[1].lstrip(".")


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    The last line need not end in a newline, and a final newline does not
    start an extra empty line. ``\\r\\n`` endings are accepted.
    """
    if not content:
        return []
    lines = content.split(EditorConstants.NEWLINE)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Document:
    """Rows of text plus the file they came from and its keyword set.

    Positions passed to ``insert`` and ``delete`` may be out of range; such
    calls are no-ops instead of errors.
    """

    def __init__(self, rows: Optional[list[Row]] = None, path: Optional[str] = None,
                 keywords: Collection[str] = frozenset()):
        self.rows: list[Row] = rows if rows is not None else []
        self.path = path
        self.keywords = frozenset(keywords)
        self.dirty = False

    @classmethod
    def from_lines(cls, lines: list[str], path: Optional[str] = None,
                   keywords: Collection[str] = frozenset()) -> "Document":
        return cls([Row(line) for line in lines], path=path, keywords=keywords)

    @classmethod
    def open(cls, path: str, keyword_source: Optional[KeywordSource] = None) -> "Document":
        """Load ``path`` and the keyword set for its extension.

        Raises:
            DocumentIOError: the file cannot be read.
            KeywordSourceError: no keyword file exists for the extension.
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f"Cannot open {path}: {e}", path) from e

        extension = file_extension(path)
        keywords: frozenset[str] = frozenset()
        if extension:
            source = keyword_source or KeywordSource()
            keywords = source.load(extension)

        doc = cls.from_lines(split_lines(content), path=path, keywords=keywords)
        logger.debug("Opened %s (%d rows)", path, len(doc))
        return doc

    @property
    def file_name(self) -> str:
        return self.path or EditorConstants.UNTITLED_NAME

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def row(self, index: int) -> Optional[Row]:
        """Return the row at ``index``, or None past either end."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def lines(self) -> list[str]:
        return [row.text for row in self.rows]

    def to_text(self) -> str:
        """Rows joined by single newlines, no newline after the last row."""
        return EditorConstants.NEWLINE.join(self.lines())

    def insert(self, ch: str, pos: Position) -> None:
        """Insert a character, or split a row when ``ch`` is a newline."""
        if pos.row < 0 or pos.row > len(self.rows):
            return
        if ch == EditorConstants.NEWLINE:
            if pos.row == len(self.rows):
                self.rows.append(Row())
            else:
                remainder = self.rows[pos.row].split(pos.column)
                self.rows.insert(pos.row + 1, remainder)
        elif pos.row == len(self.rows):
            row = Row()
            row.insert(ch, 0)
            self.rows.append(row)
        else:
            self.rows[pos.row].insert(ch, pos.column)
        self.dirty = True

    def delete(self, pos: Position) -> None:
        """Delete the grapheme at ``pos``.

        At the end of a row that has a successor, the next row is merged
        into this one instead.
        """
        if pos.row < 0 or pos.row >= len(self.rows):
            return
        row = self.rows[pos.row]
        if pos.column == row.length and pos.row < len(self.rows) - 1:
            row.append(self.rows.pop(pos.row + 1))
            self.dirty = True
        elif 0 <= pos.column < row.length:
            row.delete(pos.column)
            self.dirty = True

    def save(self, path: Optional[str] = None) -> int:
        """Write the document atomically and return the bytes written.

        Uses the document's own path when ``path`` is None and adopts
        ``path`` after a successful write.

        Raises:
            DocumentIOError: no path is known or the write failed. The
                document and any existing file are left unchanged.
        """
        target = path or self.path
        if not target:
            raise DocumentIOError("No file name")

        data = self.to_text().encode("utf-8")
        dir_name = os.path.dirname(target) or "."
        suffix = os.path.splitext(target)[1]
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(mode="wb", dir=dir_name, suffix=suffix,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, target)
        except OSError as e:
            if temp_filename and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_filename)
            raise DocumentIOError(f"Cannot save to {target}: {e.strerror or e}", target) from e

        self.path = target
        self.dirty = False
        logger.debug("Saved %d rows to %s", len(self.rows), target)
        return len(data)
