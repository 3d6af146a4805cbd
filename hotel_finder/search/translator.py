"""Query translator: free text -> validated `HotelFilter`.

The LLM proposes a filter; deterministic corrections then fix its known failure modes (city aliases,
states placed in `city`, a missing city the text clearly names, night counts read as point values)
before the result is validated against the strict schema.

Failures are returned as `TranslationFailure` values from a closed set of kinds rather than raised,
so the request boundary branches on `FailureKind` instead of catching generic exceptions.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from hotel_finder.search.intent import QueryIntent
from hotel_finder.search.llm_client import LLMClientError, LLMConfig, LLMTimeoutError, request_filter_json
from hotel_finder.search.locale import LocaleKnowledge
from hotel_finder.search.schema import HotelFilter, SchemaValidationError, validate_filter

logger = logging.getLogger(__name__)

# Point thresholds below this are a misparsed night count ("for 5 nights"), not a real budget.
POINTS_FLOOR = 1000

_POINT_KEYS: tuple[str, ...] = ("maxPtsNight", "minPtsNight")


class FailureKind(StrEnum):
    """Why a query could not be translated."""

    configuration = "configuration"
    parse = "parse"
    timeout = "timeout"
    schema = "schema"


@dataclass(frozen=True)
class Translation:
    """A validated filter plus the raw LLM object it was corrected from."""

    filter: HotelFilter
    raw: dict[str, Any]


@dataclass(frozen=True)
class TranslationFailure:
    """A translation that produced no usable filter."""

    kind: FailureKind
    message: str
    details: tuple[dict[str, str], ...] = ()

    @property
    def retryable(self) -> bool:
        return self.kind == FailureKind.timeout


TranslationResult = Translation | TranslationFailure


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def correct_filter(raw: dict[str, Any], query: str, locale: LocaleKnowledge) -> dict[str, Any]:
    """Apply the deterministic corrections to a raw LLM filter and return a new dict.

    Values of an unexpected type are left untouched; the schema rejects them afterwards.
    """

    corrected = dict(raw)

    city = corrected.get("city")
    if isinstance(city, str) and city:
        city = locale.canonical_city(city)
        corrected["city"] = city

        if not corrected.get("state") and locale.is_known_state(city):
            corrected["state"] = city
            del corrected["city"]

    if not corrected.get("city"):
        inferred = locale.infer_city(query)
        if inferred is not None:
            corrected["city"] = inferred

    for key in _POINT_KEYS:
        value = corrected.get(key)
        if _is_number(value) and value < POINTS_FLOOR:
            del corrected[key]

    return corrected


async def _request_with_retry(query: str, config: LLMConfig) -> dict[str, Any]:
    """Run the blocking LLM call off the event loop; only timeouts are retried."""

    attempt = 1
    while True:
        try:
            return await asyncio.to_thread(request_filter_json, query, config=config)
        except LLMTimeoutError:
            if attempt >= config.max_attempts:
                raise
            logger.warning("llm timeout attempt=%d/%d, retrying", attempt, config.max_attempts)
            attempt += 1


async def translate_query(
        query: str,
        *,
        intent: QueryIntent,
        locale: LocaleKnowledge,
        llm_config: LLMConfig | None,
) -> TranslationResult:
    """Translate `query` into a validated filter.

    Steps:
        1) Ask the LLM for a raw filter object.
        2) Apply `correct_filter`.
        3) Drop `maxDistanceKm` when the query asks for the nearest hotels; the nearest ranking
           replaces any distance cap.
        4) Validate against the schema.
    """

    if llm_config is None:
        return TranslationFailure(FailureKind.configuration, "LLM_API_KEY missing")

    try:
        raw = await _request_with_retry(query, llm_config)
    except LLMTimeoutError as exc:
        return TranslationFailure(FailureKind.timeout, str(exc))
    except LLMClientError as exc:
        return TranslationFailure(FailureKind.parse, str(exc))

    corrected = correct_filter(raw, query, locale)
    if QueryIntent.NEAREST in intent:
        corrected.pop("maxDistanceKm", None)

    try:
        hotel_filter = validate_filter(corrected)
    except SchemaValidationError as exc:
        return TranslationFailure(FailureKind.schema, str(exc), details=tuple(exc.details))

    logger.debug("llm filter -> %s", json.dumps(hotel_filter.to_dict(), ensure_ascii=False))
    return Translation(filter=hotel_filter, raw=raw)
