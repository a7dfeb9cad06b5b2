"""Logging configuration."""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    The level comes from the argument, then ``LOG_LEVEL``, then INFO.
    """
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(resolved)
    # python-multipart logs every parsed part at DEBUG
    logging.getLogger("multipart").setLevel(logging.WARNING)
