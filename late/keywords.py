"""Keyword files for highlighting.

Keywords for a file extension live in ``<extension>.txt``, one keyword per
line. The first search directory that has the file wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import platformdirs

from .constants import EditorConstants
from .errors import KeywordSourceError

logger = logging.getLogger(__name__)

BUNDLED_KEYWORD_DIR = Path(__file__).resolve().parent / EditorConstants.KEYWORD_DIR_NAME


def default_search_dirs() -> list[Path]:
    """Directories searched when none are configured.

    The working directory's ``markup/`` comes first, then the per-user
    config directory, then the files shipped with the package.
    """
    user_dir = Path(platformdirs.user_config_dir("late")) / EditorConstants.KEYWORD_DIR_NAME
    return [Path(EditorConstants.KEYWORD_DIR_NAME), user_dir, BUNDLED_KEYWORD_DIR]


def parse_keywords(content: str) -> frozenset[str]:
    """Parse keyword file content, skipping blank and whitespace-only lines."""
    keywords = set()
    for line in content.split("\n"):
        line = line.rstrip("\r")
        if line.strip():
            keywords.add(line)
    return frozenset(keywords)


class KeywordSource:
    """Loads keyword sets by file extension from a list of directories."""

    def __init__(self, search_dirs: Optional[Iterable[Path | str]] = None):
        if search_dirs is None:
            self.search_dirs = default_search_dirs()
        else:
            self.search_dirs = [Path(d) for d in search_dirs]

    def find(self, extension: str) -> Optional[Path]:
        """Return the keyword file for ``extension`` or None."""
        name = extension + EditorConstants.KEYWORD_FILE_SUFFIX
        for directory in self.search_dirs:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def load(self, extension: str) -> frozenset[str]:
        """Load the keyword set for ``extension``.

        Raises:
            KeywordSourceError: no directory has a readable keyword file.
        """
        path = self.find(extension)
        if path is None:
            searched = ", ".join(str(d) for d in self.search_dirs)
            raise KeywordSourceError(
                f"No keyword file for '.{extension}' (searched {searched})", extension)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise KeywordSourceError(f"Cannot read keyword file {path}: {e}", extension) from e
        keywords = parse_keywords(content)
        logger.debug("Loaded %d keywords for .%s from %s", len(keywords), extension, path)
        return keywords
