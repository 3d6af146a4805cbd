"""Pytest configuration and shared fixtures.

The repository uses a flat layout without requiring an installed package. This conftest ensures tests
can import from the `hotel_finder.*` namespace when running `pytest` locally.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import hotel_finder...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from hotel_finder.data.records import HotelRecord  # noqa: E402


def make_hotel(
        hotel: str,
        *,
        brand: str,
        city: str,
        state: str,
        pts: float,
        km: float = 0.0,
) -> HotelRecord:
    return HotelRecord(
        brand=brand,
        hotel=hotel,
        city=city,
        state=state,
        avg_pt_value=0.8,
        avg_pts_night=pts,
        avg_pts_5_nights=pts * 4,
        distance_km_from_airport=km,
    )


HOTELS: tuple[HotelRecord, ...] = (
    make_hotel("Courtyard by Marriott Hyderabad", brand="Courtyard", city="Hyderabad",
               state="Telangana", pts=25000, km=18.5),
    make_hotel("JW Marriott Hotel New Delhi Aerocity", brand="JW Marriott", city="New Delhi",
               state="Delhi", pts=40000, km=3.2),
    make_hotel("The Westin Hyderabad Mindspace", brand="Westin", city="Hyderabad",
               state="Telangana", pts=30000),
    make_hotel("Fairfield by Marriott Bengaluru Whitefield", brand="Fairfield", city="Bengaluru",
               state="Karnataka", pts=15000, km=35.0),
    make_hotel("Sheraton Grand Bangalore Hotel at Brigade Gateway", brand="Sheraton",
               city="Bengaluru", state="Karnataka", pts=25000, km=32.1),
    make_hotel("Four Points by Sheraton Hyderabad Hitec City", brand="Four Points",
               city="Hyderabad", state="Telangana", pts=25000, km=22.0),
    make_hotel("The Ritz-Carlton Bangalore", brand="Ritz-Carlton", city="Bengaluru",
               state="Karnataka", pts=60000, km=33.5),
    make_hotel("Renaissance Mumbai Convention Centre Hotel", brand="Renaissance", city="Mumbai",
               state="Maharashtra", pts=35000, km=9.8),
    make_hotel("Courtyard by Marriott Gurugram Downtown", brand="Courtyard", city="Gurgaon",
               state="Haryana", pts=20000, km=14.0),
)


@pytest.fixture
def hotels() -> tuple[HotelRecord, ...]:
    return HOTELS
