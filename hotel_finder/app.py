"""Application composition root.

This module wires together configuration, the loaded dataset, and the locale tables shared by every
request. All of it is read-only after startup.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hotel_finder.config.settings import Settings
from hotel_finder.data.loader import load_records
from hotel_finder.data.records import HotelRecord
from hotel_finder.search.llm_client import LLMConfig, llm_config_from_settings
from hotel_finder.search.locale import LocaleKnowledge, build_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class App:
    """Shared application dependencies for transports."""

    settings: Settings
    records: tuple[HotelRecord, ...]
    locale: LocaleKnowledge
    llm_config: LLMConfig | None


def create_app(settings: Settings, *, records: Sequence[HotelRecord] | None = None) -> App:
    """Create the application container.

    Records are loaded from `settings.hotels_csv_path` unless given explicitly.
    """

    loaded = tuple(records) if records is not None else load_records(settings.hotels_csv_path)
    llm_config = llm_config_from_settings(settings)
    if llm_config is None:
        logger.warning("LLM_API_KEY not set - every search will answer 503")

    return App(
        settings=settings,
        records=loaded,
        locale=build_locale(loaded),
        llm_config=llm_config,
    )
