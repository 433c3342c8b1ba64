"""Grapheme-indexed storage for a single line of text."""

from typing import Collection, Optional

import grapheme

from .constants import EditorConstants
from .highlight import Style, expand_tabs, highlight_keywords


class Row:
    """One line of a document.

    All indexes are grapheme cluster indexes, so ``"e\\u0301"`` (e plus a
    combining acute accent) counts as a single character. The cached
    ``length`` is recomputed after every mutation.
    """

    __slots__ = ("_text", "_length")

    def __init__(self, text: str = ""):
        self._text = text
        self._length = 0
        self._update_length()

    @classmethod
    def from_text(cls, text: str) -> "Row":
        return cls(text)

    def _update_length(self) -> None:
        self._length = grapheme.length(self._text)

    @property
    def text(self) -> str:
        """Raw text as stored, used when saving."""
        return self._text

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return self._text == other._text

    def __repr__(self) -> str:
        return f"Row({self._text!r})"

    def insert(self, ch: str, index: int) -> None:
        """Insert ``ch`` so it becomes the grapheme at ``index``.

        An index at or past the end appends.
        """
        if index >= self._length:
            self._text += ch
        else:
            index = max(index, 0)
            head = grapheme.slice(self._text, 0, index)
            tail = grapheme.slice(self._text, index)
            self._text = head + ch + tail
        self._update_length()

    def delete(self, index: int) -> None:
        """Remove the grapheme at ``index``; out of range is a no-op."""
        if index < 0 or index >= self._length:
            return
        head = grapheme.slice(self._text, 0, index)
        tail = grapheme.slice(self._text, index + 1)
        self._text = head + tail
        self._update_length()

    def split(self, index: int) -> "Row":
        """Keep the first ``index`` graphemes and return the rest as a new row."""
        index = max(index, 0)
        head = grapheme.slice(self._text, 0, index)
        tail = grapheme.slice(self._text, index)
        self._text = head
        self._update_length()
        return Row(tail)

    def append(self, other: "Row") -> None:
        """Concatenate ``other`` onto this row.

        The caller is expected to discard ``other`` afterwards.
        """
        self._text += other._text
        self._update_length()

    def _slice(self, start: int, end: int) -> str:
        end = min(max(end, 0), self._length)
        start = min(max(start, 0), end)
        return grapheme.slice(self._text, start, end)

    def display_width(self, start: int, end: int,
                      tab_size: int = EditorConstants.TAB_SIZE) -> int:
        """Number of grapheme cells the slice ``[start, end)`` takes on screen."""
        return grapheme.length(expand_tabs(self._slice(start, end), tab_size))

    def render(self, start: int, end: int, keywords: Collection[str] = (),
               tab_size: int = EditorConstants.TAB_SIZE,
               style: Optional[Style] = None) -> str:
        """Return the display string for graphemes ``[start, end)``.

        The range is clamped to the row. Tabs are expanded before keyword
        highlighting is applied.
        """
        visible = expand_tabs(self._slice(start, end), tab_size)
        return highlight_keywords(visible, keywords, style)
