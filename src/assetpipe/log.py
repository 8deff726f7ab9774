"""Logging setup shared by the CLI and the library modules."""

from __future__ import annotations

import logging
import os
from typing import Optional

LEVEL_ENV = "ASSETPIPE_LOG_LEVEL"

_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once with a consistent, readable format.

    Args:
        level: Optional log level name (e.g., "INFO", "DEBUG"). If omitted,
               reads ASSETPIPE_LOG_LEVEL or defaults to WARNING.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or os.getenv(LEVEL_ENV) or "WARNING").upper()
    log_level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
