"""Startup configuration for an editor session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import EditorConstants
from .cursor import Viewport


@dataclass(frozen=True)
class EditorConfig:
    """Everything a session needs from the outside world.

    Built once at startup and handed to the ``Editor``; nothing below
    the command line reads process arguments or the environment.

    Attributes:
        path: File to open, or None for an untitled document
        width: Terminal width in columns
        height: Terminal height in rows, including the status bar and
            message line
        tab_size: Spaces shown for each tab
        keyword_dirs: Directories searched for keyword files; empty means
            the default search path
    """
    path: Optional[str] = None
    width: int = EditorConstants.DEFAULT_WIDTH
    height: int = EditorConstants.DEFAULT_HEIGHT
    tab_size: int = EditorConstants.TAB_SIZE
    keyword_dirs: tuple[str, ...] = ()

    @property
    def viewport(self) -> Viewport:
        """Text area left after reserving the status bar and message line."""
        return self.viewport_for(self.width, self.height)

    @staticmethod
    def viewport_for(width: int, height: int) -> Viewport:
        """Text area of a ``width`` x ``height`` terminal."""
        reserved = EditorConstants.STATUS_BAR_ROWS + EditorConstants.MESSAGE_ROWS
        return Viewport(width=max(width, 1), height=max(height - reserved, 1))

    @classmethod
    def from_terminal(cls, path: Optional[str], terminal, **kwargs) -> "EditorConfig":
        """Size the configuration from a ``TerminalInterface``."""
        return cls(path=path, width=terminal.width, height=terminal.height, **kwargs)
