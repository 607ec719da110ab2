"""Logging configuration for the navigation helpers CLI."""

import sys
from typing import Any, TextIO

from loguru import logger

# DEBUG lines carry the module name so finder, parser and loader output can be told apart.
_FORMAT = "{level.icon} {message}"
_DEBUG_FORMAT = "{level.icon} {name}: {message}"


def configure_logging(
    *,
    verbose: bool = False,
    level: str | None = None,
    sink: TextIO | Any = None,
) -> None:
    """Replace loguru's sinks with a single one for the CLI.

    Args:
        verbose: Shorthand for ``level="DEBUG"``.
        level: Explicit level name, wins over ``verbose``.
        sink: Where to write, stderr by default.
    """
    logger.remove()
    level = level or ("DEBUG" if verbose else "INFO")
    fmt = _DEBUG_FORMAT if level == "DEBUG" else _FORMAT
    logger.add(sys.stderr if sink is None else sink, level=level, format=fmt)
