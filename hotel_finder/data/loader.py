"""Load `hotels.csv` into immutable `HotelRecord`s.

Hand-maintained CSVs use a few header spellings for the same column, and point values are often
formatted as currency strings (`"₹1,234.50"`). Both are reconciled here so the search pipeline only
ever sees clean numbers and a (possibly empty) state string.
"""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from hotel_finder.data.records import HotelRecord

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """Raised when the hotel dataset cannot be loaded."""


_HEADER_VARIANTS: dict[str, tuple[str, ...]] = {
    "brand": ("Brand",),
    "hotel": ("Hotel", "Hotel Name"),
    "city": ("City",),
    "state": ("State", "state"),
    "avg_pt_value": ("AvgPtValue", "Ave Pt Value"),
    "avg_pts_night": ("AvgPtsNight", "Ave Pts / night", "Ave Pts / Night"),
    "avg_pts_5_nights": ("AvgPts5Nights", "Ave Pts / 5 Nights", "Ave Pts / 5 nights"),
    "distance_km_from_airport": ("DistanceKmFromAirport",),
}

# Used only when a row has no State value.
CITY_STATES: dict[str, str] = {
    "Tehri Garhwal": "Uttarakhand",
    "Navi Mumbai": "Maharashtra",
    "Hyderabad": "Telangana",
    "Faridabad": "Haryana",
    "Chennai": "Tamil Nadu",
    "Bengaluru": "Karnataka",
    "Siliguri": "West Bengal",
    "Pushkar": "Rajasthan",
    "Mumbai": "Maharashtra",
    "Kochi": "Kerala",
    "Ramnagar": "Uttarakhand",
    "Visakhapatnam": "Andhra Pradesh",
    "Vishakhapatnam": "Andhra Pradesh",
    "Pune": "Maharashtra",
    "Gurugram Haryana": "Haryana",
    "Gurgaon": "Haryana",
    "Sohna": "Haryana",
    "Sohna-Gurgaon": "Haryana",
    "New Delhi": "Delhi",
    "Delhi": "Delhi",
    "Delhi NCR": "Delhi",
    "Raipur": "Chhattisgarh",
    "Bilaspur Chhattisgarh": "Chhattisgarh",
    "Madurai": "Tamil Nadu",
    "Lucknow": "Uttar Pradesh",
    "Agra": "Uttar Pradesh",
    "Jhansi": "Uttar Pradesh",
    "Kolkata": "West Bengal",
    "Vadodara": "Gujarat",
    "Surat": "Gujarat",
    "Ahmedabad": "Gujarat",
    "Mahabaleshwar": "Maharashtra",
    "Nashik": "Maharashtra",
    "Nagpur": "Maharashtra",
    "Ganderbal": "Jammu and Kashmir",
    "Srinagar": "Jammu and Kashmir",
    "Katra": "Jammu and Kashmir",
    "Indore": "Madhya Pradesh",
    "Bhopal": "Madhya Pradesh",
    "Jaipur": "Rajasthan",
    "Jaisalmer": "Rajasthan",
    "Dehradun": "Uttarakhand",
    "Mussoorie": "Uttarakhand",
    "Coimbatore": "Tamil Nadu",
    "Tiruchirappalli": "Tamil Nadu",
    "Sriperumbudur": "Tamil Nadu",
    "Mahabalipuram": "Tamil Nadu",
    "Mahabalipuram Resort": "Tamil Nadu",
    "Amritsar": "Punjab",
    "Belgaum": "Karnataka",
    "Belagavi": "Karnataka",
    "Madikeri": "Karnataka",
    "Calangute": "Goa",
    "Colva": "Goa",
    "Goa": "Goa",
    "Anjuna": "Goa",
    "Shillong": "Meghalaya",
}

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")


def parse_number(value: object) -> float:
    """Coerce a currency-formatted value (`"₹1,234"`) into a float; blanks become `0.0`."""

    cleaned = _NON_NUMERIC_RE.sub("", str(value if value is not None else ""))
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        # e.g. "1.2.3" after stripping
        return 0.0


def _pick(row: Mapping[str, str | None], field: str) -> str:
    for header in _HEADER_VARIANTS[field]:
        value = row.get(header)
        if value:
            return value.strip()
    return ""


def record_from_row(row: Mapping[str, str | None]) -> HotelRecord:
    """Convert one CSV row (any supported header variant) into a `HotelRecord`."""

    city = _pick(row, "city")
    state = _pick(row, "state") or CITY_STATES.get(city, "")
    return HotelRecord(
        brand=_pick(row, "brand"),
        hotel=_pick(row, "hotel"),
        city=city,
        state=state,
        avg_pt_value=parse_number(_pick(row, "avg_pt_value")),
        avg_pts_night=parse_number(_pick(row, "avg_pts_night")),
        avg_pts_5_nights=parse_number(_pick(row, "avg_pts_5_nights")),
        distance_km_from_airport=parse_number(_pick(row, "distance_km_from_airport")),
    )


def iter_records(rows: Iterable[Mapping[str, str | None]]) -> Iterable[HotelRecord]:
    """Yield records for every non-blank row."""

    for row in rows:
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        yield record_from_row(row)


def load_records(path: str | Path) -> tuple[HotelRecord, ...]:
    """Read the CSV at `path` and return the immutable record sequence.

    Raises:
        DatasetError: If the file is missing or has no header row.
    """

    csv_path = Path(path)
    if not csv_path.is_file():
        raise DatasetError(f"{csv_path} not found")

    with csv_path.open(encoding="utf-8-sig", newline="") as fh:
        reader = csv.DictReader(fh)
        if not reader.fieldnames:
            raise DatasetError(f"{csv_path} has no header row")
        records = tuple(iter_records(reader))

    unmapped = sorted({r.city for r in records if not r.state})
    if unmapped:
        logger.warning("no state mapping for cities=%s", ", ".join(unmapped))
    logger.info("loaded records=%d path=%s", len(records), csv_path)
    return records


def known_cities(records: Sequence[HotelRecord]) -> list[str]:
    return sorted({r.city for r in records if r.city})
