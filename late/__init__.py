"""Late - a small terminal text editor."""

from .row import Row
from .document import Document
from .cursor import CursorController, Offset, Position, Viewport
from .errors import DocumentIOError, KeywordSourceError, LateError
from .keywords import KeywordSource

__all__ = [
    'Row',
    'Document',
    'CursorController',
    'Offset',
    'Position',
    'Viewport',
    'DocumentIOError',
    'KeywordSourceError',
    'LateError',
    'KeywordSource',
]
