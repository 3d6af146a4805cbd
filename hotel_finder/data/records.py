"""Immutable hotel record shared read-only by every request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HotelRecord:
    """One row of the hotel dataset.

    `distance_km_from_airport == 0` means the distance is unknown, never a measured zero.
    """

    brand: str
    hotel: str
    city: str
    state: str = ""
    avg_pt_value: float = 0.0
    avg_pts_night: float = 0.0
    avg_pts_5_nights: float = 0.0
    distance_km_from_airport: float = 0.0

    @property
    def has_distance(self) -> bool:
        return self.distance_km_from_airport > 0

    def to_dict(self) -> dict[str, Any]:
        """Return the full record keyed by its wire (camelCase) names."""

        return {
            "brand": self.brand,
            "hotel": self.hotel,
            "city": self.city,
            "state": self.state,
            "avgPtValue": self.avg_pt_value,
            "avgPtsNight": self.avg_pts_night,
            "avgPts5Nights": self.avg_pts_5_nights,
            "distanceKmFromAirport": self.distance_km_from_airport,
        }
