"""Deterministic filter applier.

A validated `HotelFilter` becomes a list of independent predicates, one per present key. A record
matches when every predicate accepts it; the result is always a subsequence of the input.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from hotel_finder.data.records import HotelRecord
from hotel_finder.search.schema import HotelFilter

Predicate = Callable[[HotelRecord], bool]

# Umbrella chain names are not stored literally on sub-brands; filtering by one is a no-op.
UMBRELLA_BRANDS: frozenset[str] = frozenset({"marriott"})


def contains(haystack: str, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def contains_all_tokens(text: str, query: str) -> bool:
    """Whether every whitespace-separated token of `query` occurs somewhere in `text`."""

    lowered = (text or "").lower()
    return all(token in lowered for token in query.lower().split())


def _tokens_predicate(getter: Callable[[HotelRecord], str], query: str) -> Predicate:
    return lambda r: contains_all_tokens(getter(r), query)


def _brand_predicate(brand: str) -> Predicate | None:
    if brand.strip().lower() in UMBRELLA_BRANDS:
        return None
    return lambda r: contains(r.brand, brand) or contains(r.hotel, brand)


def build_predicates(hotel_filter: HotelFilter) -> list[Predicate]:
    """Translate each present filter key into a predicate."""

    predicates: list[Predicate] = []

    if hotel_filter.city is not None:
        predicates.append(_tokens_predicate(lambda r: r.city, hotel_filter.city))

    if hotel_filter.brand is not None:
        brand = _brand_predicate(hotel_filter.brand)
        if brand is not None:
            predicates.append(brand)

    if hotel_filter.hotel is not None:
        predicates.append(_tokens_predicate(lambda r: r.hotel, hotel_filter.hotel))

    if hotel_filter.state is not None:
        predicates.append(_tokens_predicate(lambda r: r.state, hotel_filter.state))

    max_pts = hotel_filter.max_pts_night
    if max_pts is not None:
        predicates.append(lambda r: r.avg_pts_night <= max_pts)

    min_pts = hotel_filter.min_pts_night
    if min_pts is not None:
        predicates.append(lambda r: r.avg_pts_night >= min_pts)

    max_km = hotel_filter.max_distance_km
    if max_km is not None:
        # Unknown (zero) distances never satisfy a distance cap.
        predicates.append(lambda r: r.has_distance and r.distance_km_from_airport <= max_km)

    return predicates


def apply_filter(hotel_filter: HotelFilter, records: Sequence[HotelRecord]) -> list[HotelRecord]:
    """Return the records matching every present key, in their original order."""

    predicates = build_predicates(hotel_filter)
    return [r for r in records if all(p(r) for p in predicates)]
