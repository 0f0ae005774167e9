# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the envload CLI.

The library itself only creates module loggers; nothing is printed unless an
application (or ``envload --verbose``) configures logging.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "envload"


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Attach a Rich handler on stderr to the ``envload`` logger.

    Level precedence: *level*, then ``ENVLOAD_LOG_LEVEL``, then DEBUG when
    *verbose*.  With none of them set, logging stays disabled.
    """
    level_name = level or os.environ.get("ENVLOAD_LOG_LEVEL") or ("DEBUG" if verbose else None)
    if not level_name:
        return

    log_level = logging.getLevelName(level_name.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
