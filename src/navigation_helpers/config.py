"""Configuration constants for navigation-helpers."""

import os
from pathlib import Path

# Names that resolve to the application's default navigation container.
DEFAULT_CONTAINER_NAMES: tuple[str, ...] = ("default", "navigation")

# Environment variable pointing at a navigation file. Wins over the candidates below.
NAVIGATION_FILE_ENV: str = "NAVIGATION_HELPERS_FILE"

# Navigation file location. First file found is used.
NAVIGATION_FILES: list[Path] = [
    Path("navigation.json"),
    Path("~/.config/navigation-helpers/navigation.json").expanduser(),
]

# Unbounded descent for the active page search.
UNBOUNDED_DEPTH: int = -1


def resolve_navigation_file() -> Path | None:
    """Return the navigation file to use, or None if none exists."""
    override = os.environ.get(NAVIGATION_FILE_ENV)
    if override:
        return Path(override).expanduser()
    for candidate in NAVIGATION_FILES:
        if candidate.is_file():
            return candidate
    return None
