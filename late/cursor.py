"""Cursor and viewport navigation.

Every transition is a pure function of ``(position, offset, document)``.
After each move the offset follows the cursor by the smallest amount that
keeps it inside the viewport, both vertically and horizontally.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Optional

from .constants import EditorConstants

if TYPE_CHECKING:
    from .document import Document


@dataclass(frozen=True)
class Position:
    """Logical cursor position: grapheme column within a row, row index."""
    column: int = 0
    row: int = 0


@dataclass(frozen=True)
class Offset:
    """First visible grapheme column (x) and first visible row (y)."""
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Viewport:
    """Size of the text area in terminal cells."""
    width: int = EditorConstants.DEFAULT_WIDTH
    height: int = EditorConstants.DEFAULT_HEIGHT


def _right(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    row = doc.row(pos.row)
    if row is None:
        return replace(pos, column=0)
    if pos.column < row.length:
        return replace(pos, column=pos.column + 1)
    if doc.row(pos.row + 1) is not None:
        return Position(0, pos.row + 1)
    return pos


def _left(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    if pos.column == 0 and pos.row > 0:
        above = doc.row(pos.row - 1)
        # One past the end; the final clamp pulls it back onto the row.
        column = above.length + 1 if above is not None else 0
        return Position(column, pos.row - 1)
    return replace(pos, column=max(pos.column - 1, 0))


def _up(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    if pos.row > 0:
        return replace(pos, row=pos.row - 1)
    return pos


def _down(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    if pos.row < len(doc) - 1:
        return replace(pos, row=pos.row + 1)
    return pos


def _home(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    return replace(pos, column=0)


def _end(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    row = doc.row(pos.row)
    return replace(pos, column=row.length if row is not None else 0)


def _page_up(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    return replace(pos, row=max(pos.row - viewport.height, 0))


def _page_down(pos: Position, doc: "Document", viewport: Viewport) -> Position:
    last = len(doc) - 1
    if pos.row < last:
        return replace(pos, row=min(pos.row + viewport.height, last))
    return pos


MOVES: dict[str, Callable[[Position, "Document", Viewport], Position]] = {
    "left": _left,
    "right": _right,
    "up": _up,
    "down": _down,
    "home": _home,
    "end": _end,
    "page_up": _page_up,
    "page_down": _page_down,
}


def clamp(pos: Position, doc: "Document") -> Position:
    """Pull the column back onto the row when the row exists."""
    row = doc.row(pos.row)
    if row is not None and pos.column > row.length:
        return replace(pos, column=row.length)
    return pos


def _follow(value: int, start: int, size: int) -> int:
    size = max(size, 1)
    if value < start:
        return value
    if value >= start + size:
        return value - size + 1
    return start


def _follow_cells(pos: Position, start: int, doc: Optional["Document"], width: int,
                  tab_size: int) -> int:
    """Horizontal offset keeping the cursor cell inside ``width`` cells.

    Tabs take ``tab_size`` cells on screen, so the offset is advanced one
    grapheme at a time until the text before the cursor fits.
    """
    row = doc.row(pos.row) if doc is not None else None
    if row is None:
        return _follow(pos.column, start, width)
    width = max(width, 1)
    if pos.column < start:
        return pos.column
    while start < pos.column and row.display_width(start, pos.column, tab_size) >= width:
        start += 1
    return start


def scroll(pos: Position, offset: Offset, viewport: Viewport,
           doc: Optional["Document"] = None,
           tab_size: int = EditorConstants.TAB_SIZE) -> Offset:
    """Return the offset that keeps ``pos`` inside the viewport.

    The offset only moves when the cursor would leave the visible window,
    and then by the minimal amount. With a document the horizontal check
    is made in screen cells of the cursor's row.
    """
    return Offset(_follow_cells(pos, offset.x, doc, viewport.width, tab_size),
                  _follow(pos.row, offset.y, viewport.height))


def move(direction: str, pos: Position, offset: Offset, doc: "Document",
         viewport: Viewport,
         tab_size: int = EditorConstants.TAB_SIZE) -> tuple[Position, Offset]:
    """Apply one navigation command.

    Unknown directions leave the position alone but still clamp and scroll.
    """
    step = MOVES.get(direction)
    if step is not None:
        pos = step(pos, doc, viewport)
    pos = clamp(pos, doc)
    return pos, scroll(pos, offset, viewport, doc, tab_size)


class CursorController:
    """Holds the cursor position, scroll offset and viewport size."""

    def __init__(self, viewport: Viewport = Viewport(),
                 tab_size: int = EditorConstants.TAB_SIZE):
        self.viewport = viewport
        self.tab_size = tab_size
        self.position = Position()
        self.offset = Offset()

    def move(self, direction: str, doc: "Document") -> Position:
        self.position, self.offset = move(direction, self.position, self.offset, doc,
                                          self.viewport, self.tab_size)
        return self.position

    def refresh(self, doc: "Document") -> Position:
        """Re-clamp and re-scroll after the document changed under the cursor."""
        self.position = clamp(self.position, doc)
        self.offset = scroll(self.position, self.offset, self.viewport, doc, self.tab_size)
        return self.position

    def reset(self) -> None:
        self.position = Position()
        self.offset = Offset()

    def resize(self, viewport: Viewport, doc: Optional["Document"] = None) -> None:
        """Change the viewport size and scroll to keep the cursor visible."""
        self.viewport = viewport
        self.offset = scroll(self.position, self.offset, viewport, doc, self.tab_size)

    def screen_position(self, doc: "Document") -> tuple[int, int]:
        """Cursor (column, row) relative to the top-left of the viewport."""
        row = doc.row(self.position.row)
        if row is None:
            x = max(self.position.column - self.offset.x, 0)
        else:
            x = row.display_width(self.offset.x, self.position.column, self.tab_size)
        return x, self.position.row - self.offset.y
