"""Logging configuration for the search service."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None, *, debug_llm: bool = False) -> None:
    """Configure Python logging for the process.

    Logs are internal diagnostics only and are never sent back to the person searching.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Reduce noisy third-party logs by default.
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)

    if debug_llm:
        logging.getLogger("hotel_finder.search.translator").setLevel(logging.DEBUG)
