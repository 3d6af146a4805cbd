"""Tests for the deterministic predicate-chain filter applier."""

from __future__ import annotations

import pytest

from hotel_finder.search.filters import apply_filter, contains_all_tokens
from hotel_finder.search.schema import validate_filter


def _hotels(records) -> list[str]:
    return [r.hotel for r in records]


def test_empty_filter_returns_every_record_in_order(hotels) -> None:
    assert apply_filter(validate_filter({}), hotels) == list(hotels)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"city": "hyderabad"},
        {"brand": "marriott"},
        {"brand": "courtyard", "state": "haryana"},
        {"minPtsNight": 20000, "maxPtsNight": 30000},
        {"maxDistanceKm": 15},
        {"hotel": "nowhere"},
    ],
)
def test_filtering_never_increases_cardinality_or_reorders(hotels, raw) -> None:
    result = apply_filter(validate_filter(raw), hotels)

    assert len(result) <= len(hotels)
    positions = [hotels.index(r) for r in result]
    assert positions == sorted(positions)


def test_city_uses_token_and_matching(hotels) -> None:
    assert _hotels(apply_filter(validate_filter({"city": "new delhi"}), hotels)) == [
        "JW Marriott Hotel New Delhi Aerocity"
    ]
    assert _hotels(apply_filter(validate_filter({"city": "Delhi NEW"}), hotels)) == [
        "JW Marriott Hotel New Delhi Aerocity"
    ]
    assert apply_filter(validate_filter({"city": "new mumbai"}), hotels) == []


def test_contains_all_tokens_ignores_order_and_adjacency() -> None:
    assert contains_all_tokens("Four Points by Sheraton Hyderabad Hitec City", "hitec four")
    assert not contains_all_tokens("Four Points by Sheraton", "four seasons")
    assert contains_all_tokens("anything", "   ")


def test_umbrella_brand_is_a_no_op(hotels) -> None:
    unfiltered = apply_filter(validate_filter({"city": "hyderabad"}), hotels)

    for brand in ("marriott", "Marriott", "  MARRIOTT "):
        result = apply_filter(validate_filter({"city": "hyderabad", "brand": brand}), hotels)
        assert result == unfiltered

    assert {r.brand for r in unfiltered} == {"Courtyard", "Westin", "Four Points"}


def test_brand_matches_brand_or_hotel_name_substring(hotels) -> None:
    assert _hotels(apply_filter(validate_filter({"brand": "court"}), hotels)) == [
        "Courtyard by Marriott Hyderabad",
        "Courtyard by Marriott Gurugram Downtown",
    ]
    # "Sheraton" is the brand of one record and part of another's hotel name.
    assert _hotels(apply_filter(validate_filter({"brand": "sheraton"}), hotels)) == [
        "Sheraton Grand Bangalore Hotel at Brigade Gateway",
        "Four Points by Sheraton Hyderabad Hitec City",
    ]


def test_brand_is_plain_substring_not_token_and(hotels) -> None:
    assert apply_filter(validate_filter({"brand": "courtyard hyderabad"}), hotels) == []


def test_hotel_and_state_use_token_and_matching(hotels) -> None:
    assert _hotels(apply_filter(validate_filter({"hotel": "mindspace westin"}), hotels)) == [
        "The Westin Hyderabad Mindspace"
    ]
    assert len(apply_filter(validate_filter({"state": "telangana"}), hotels)) == 3
    assert apply_filter(validate_filter({"state": "tamil nadu"}), hotels) == []


def test_points_range_is_inclusive(hotels) -> None:
    result = apply_filter(validate_filter({"minPtsNight": 20000, "maxPtsNight": 25000}), hotels)
    assert sorted({r.avg_pts_night for r in result}) == [20000, 25000]
    assert len(result) == 4


def test_distance_cap_excludes_unknown_distances(hotels) -> None:
    result = apply_filter(validate_filter({"maxDistanceKm": 18.5}), hotels)

    assert _hotels(result) == [
        "Courtyard by Marriott Hyderabad",
        "JW Marriott Hotel New Delhi Aerocity",
        "Renaissance Mumbai Convention Centre Hotel",
        "Courtyard by Marriott Gurugram Downtown",
    ]
    assert all(r.distance_km_from_airport > 0 for r in result)


def test_keys_combine_with_and(hotels) -> None:
    result = apply_filter(
        validate_filter({"city": "bengaluru", "brand": "marriott", "maxPtsNight": 25000}),
        hotels,
    )
    assert _hotels(result) == [
        "Fairfield by Marriott Bengaluru Whitefield",
        "Sheraton Grand Bangalore Hotel at Brigade Gateway",
    ]
