"""Keyword highlighting for rendered rows.

Both transformations here are pure functions. Tab expansion runs first and
keyword matching second, so each can be tested on its own.
"""

from typing import Callable, Collection, Optional

import blessed

from .constants import EditorConstants

Style = Callable[[str], str]


def keyword_style(term: blessed.Terminal) -> Style:
    """Return the style that wraps a token in a blue foreground sequence."""
    return term.blue


def expand_tabs(text: str, tab_size: int = EditorConstants.TAB_SIZE) -> str:
    """Replace every tab with a fixed run of ``tab_size`` spaces."""
    return text.replace("\t", " " * tab_size)


def highlight_keywords(text: str, keywords: Collection[str],
                       style: Optional[Style] = None) -> str:
    """Style every space-delimited token that exactly matches a keyword.

    Only whole tokens match: ``if(`` is not the keyword ``if``. Runs of
    spaces produce empty tokens, which are kept so the spacing survives
    the rejoin.
    """
    if not keywords:
        return text
    if style is None:
        style = keyword_style(blessed.Terminal())
    tokens = text.split(" ")
    return " ".join(style(token) if token in keywords else token for token in tokens)
