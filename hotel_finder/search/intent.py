"""Secondary intents detected from the raw query text.

Intents are computed once per request, independently of the LLM filter, and applied after the
filter to reduce ("cheapest") or re-rank ("nearest") the matches.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Flag, auto

from hotel_finder.data.records import HotelRecord

NEAREST_LIMIT = 5

_CHEAPEST_RE = re.compile(r"\b(cheapest|lowest|least expensive|min(?:imum)?)\b", flags=re.IGNORECASE)
_NEAREST_RE = re.compile(r"\b(nearest|closest)\b", flags=re.IGNORECASE)


class QueryIntent(Flag):
    """Intents found in the query; both may be present at once."""

    NONE = 0
    CHEAPEST = auto()
    NEAREST = auto()


def detect_intent(text: str) -> QueryIntent:
    """Classify the raw query text."""

    value = text or ""
    intent = QueryIntent.NONE
    if _CHEAPEST_RE.search(value):
        intent |= QueryIntent.CHEAPEST
    if _NEAREST_RE.search(value):
        intent |= QueryIntent.NEAREST
    return intent


def reduce_to_cheapest(records: Sequence[HotelRecord]) -> list[HotelRecord]:
    """Keep every record tied at the minimum `avg_pts_night` (input order preserved)."""

    if not records:
        return []
    lowest = min(r.avg_pts_night for r in records)
    return [r for r in records if r.avg_pts_night == lowest]


def nearest_first(records: Sequence[HotelRecord], *, limit: int = NEAREST_LIMIT) -> list[HotelRecord]:
    """Records with a known airport distance, closest first, at most `limit` of them."""

    measured = [r for r in records if r.has_distance]
    return sorted(measured, key=lambda r: r.distance_km_from_airport)[:limit]


def apply_intent(records: Sequence[HotelRecord], intent: QueryIntent) -> list[HotelRecord]:
    """Apply the cheapest reduction, then the nearest sort/truncate, as requested by `intent`."""

    result = list(records)
    if QueryIntent.CHEAPEST in intent:
        result = reduce_to_cheapest(result)
    if QueryIntent.NEAREST in intent:
        result = nearest_first(result)
    return result
