"""
Logging configuration helpers.
"""

from __future__ import annotations

import logging

_LOGGING_CONFIGURED = False


def configure_logging(level: str = "WARNING") -> None:
    """Configure process-wide logging to stderr."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
