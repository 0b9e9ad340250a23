"""Console logging for the shape lab and test runs.

Library modules only call ``logging.getLogger(__name__)``; the entry point
decides level and format, usually from :class:`core.config.AppConfig`.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # unknown names come back as the string "Level <name>"
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_default_logging(level: int | str = "INFO", fmt: str = LOG_FORMAT) -> bool:
    """Install one console handler on the root logger.

    Returns ``False`` without touching anything when the root logger already
    has handlers, ``True`` when the handler was installed.
    """
    root = logging.getLogger()
    if root.handlers:
        return False
    logging.basicConfig(level=_resolve_level(level), format=fmt)
    return True


__all__ = ["setup_default_logging", "LOG_FORMAT"]
