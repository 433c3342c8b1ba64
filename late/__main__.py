"""Late CLI entry point.

Allows running via `python -m late` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .errors import LateError
from .version import get_version_string


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version flag and an optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    # Lazy import to avoid importing UI deps for --version
    from .config import EditorConfig
    from .editor import Editor
    from .terminal import TerminalInterface

    terminal = TerminalInterface()
    config = EditorConfig.from_terminal(args[0] if args else None, terminal)
    try:
        editor = Editor(config, terminal=terminal)
    except LateError as e:
        print(f"late: {e}", file=sys.stderr)
        return 1
    editor.run()
    print("Goodbye!")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
