"""Search request boundary.

Hard contract: a request either fully succeeds with a (possibly empty) list of hotels, or fails with
exactly one error. Nothing raised below this point escapes to the transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from time import monotonic
from typing import Any

from hotel_finder.app import App
from hotel_finder.search.filters import apply_filter
from hotel_finder.search.intent import apply_intent, detect_intent
from hotel_finder.search.translator import FailureKind, TranslationFailure, translate_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResponse:
    """Transport-neutral response: an HTTP-style status and a JSON-ready body."""

    status: HTTPStatus
    body: dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status == HTTPStatus.OK


def _failure_response(failure: TranslationFailure) -> SearchResponse:
    if failure.kind == FailureKind.schema:
        return SearchResponse(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            {"error": "invalid filter generated", "details": list(failure.details)},
        )

    body: dict[str, Any] = {"error": failure.message}
    if failure.retryable:
        body["retryable"] = True
    return SearchResponse(HTTPStatus.SERVICE_UNAVAILABLE, body)


async def search(query: str | None, app: App) -> SearchResponse:
    """Run one search request end to end."""

    if not query or not query.strip():
        return SearchResponse(HTTPStatus.BAD_REQUEST, {"error": "query field required"})

    started = monotonic()
    # noinspection PyBroadException
    try:
        intent = detect_intent(query)
        result = await translate_query(
            query,
            intent=intent,
            locale=app.locale,
            llm_config=app.llm_config,
        )
        if isinstance(result, TranslationFailure):
            latency_ms = int((monotonic() - started) * 1000)
            logger.info(
                "translation failed kind=%s reason=%s latency_ms=%d",
                result.kind,
                result.message,
                latency_ms,
            )
            return _failure_response(result)

        matches = apply_filter(result.filter, app.records)
        data = apply_intent(matches, intent)
    except Exception as exc:
        logger.exception("search failed")
        return SearchResponse(HTTPStatus.SERVICE_UNAVAILABLE, {"error": str(exc)})

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled intent=%s keys=%s matched=%d returned=%d latency_ms=%d",
        intent.name,
        ",".join(result.filter.to_dict()) or "-",
        len(matches),
        len(data),
        latency_ms,
    )
    return SearchResponse(
        HTTPStatus.OK,
        {"count": len(data), "data": [r.to_dict() for r in data]},
    )
