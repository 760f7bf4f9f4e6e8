"""Logger setup for run progress: a debug file, the terminal, or both."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "testy",
) -> logging.Logger:
    """Return the named logger, configured to record runner progress.

    Progress lines (one per procedure plus start and end of run) go to
    ``debug_file`` when given and to stderr when ``verbose`` is set. Calling
    again with the same name replaces the previous handlers, so each run
    writes only where it was told to. Use distinct names for runs whose logs
    must not mix.
    """
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    handlers: list[logging.Handler] = []
    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(debug_file, mode="a"))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
