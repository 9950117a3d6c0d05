"""Logging configuration for the viewer application."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the ``LightboxViewer`` logger once.

    Level precedence:
      - explicit ``level`` arg
      - env LIGHTBOX_LOG_LEVEL (e.g. DEBUG/INFO/WARNING/ERROR)
      - default INFO

    Calling it again only updates the level.
    """
    lvl_name = (level or os.environ.get("LIGHTBOX_LOG_LEVEL") or "INFO").upper()
    lvl = logging.getLevelName(lvl_name)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    logger = logging.getLogger("LightboxViewer")
    logger.setLevel(lvl)
    if getattr(logger, "_lightbox_configured", False):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    logger._lightbox_configured = True  # type: ignore[attr-defined]
