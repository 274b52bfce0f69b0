"""Logging setup for scripts built on the client."""

from __future__ import annotations

import logging

from youtu.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger; ``level`` falls back to ``LOG_LEVEL``."""

    name = (level or get_settings().log_level).upper()
    resolved = logging.getLevelNamesMapping().get(name, logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(resolved, logging.WARNING))
