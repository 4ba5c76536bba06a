"""Logging setup shared by applications embedding telluris."""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False,
    level: Optional[str] = None,
    fmt: Optional[str] = None,
) -> None:
    """Configure root logging to stdout.

    Args:
        verbose: Use DEBUG level when no explicit level is given
        level: Level name (e.g. "INFO"); overrides ``verbose``
        fmt: Log record format, defaults to ``DEFAULT_FORMAT``
    """
    if level is not None:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
    else:
        resolved = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=resolved,
        format=fmt or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
