"""Process-wide logging setup."""

from __future__ import annotations

import logging

from gmgn_server.core.config import Settings

_configured = False


def configure_logging(settings: Settings) -> None:
    """Configure the root logger once per process."""
    global _configured
    level = logging.getLevelName(settings.logging.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if _configured:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(level=level, format=settings.logging.format)
    _configured = True


__all__ = ["configure_logging"]
