from __future__ import annotations

import importlib.metadata


def get_version() -> str:
    """Installed package version, or a placeholder when running from source."""
    try:
        return importlib.metadata.version("late")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0+unknown"


def get_version_string() -> str:
    return f"late {get_version()}"
