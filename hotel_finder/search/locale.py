"""City alias table and the set of states present in the dataset.

These tables are built once at startup and passed explicitly into the translator; nothing here is
mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from hotel_finder.data.records import HotelRecord

# Order matters: city inference from free text picks the first alias found.
CITY_ALIASES: dict[str, str] = {
    "bangalore": "bengaluru",
    "bengaluru": "bengaluru",
    "bombay": "mumbai",
    "delhi": "new delhi",
    "gurugram": "gurgaon",
    "gurgaon": "gurgaon",
}


@dataclass(frozen=True)
class LocaleKnowledge:
    """Read-only locale context used by the query translator."""

    city_aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(CITY_ALIASES)))
    known_states: frozenset[str] = frozenset()

    def canonical_city(self, name: str) -> str:
        """Map an alias to its canonical city; unknown names are returned unchanged."""

        return self.city_aliases.get(name.lower(), name)

    def is_known_state(self, name: str) -> bool:
        return name.lower() in self.known_states

    def infer_city(self, text: str) -> str | None:
        """Return the canonical city of the first alias mentioned in `text`, if any."""

        lowered = (text or "").lower()
        for alias, canonical in self.city_aliases.items():
            if alias in lowered:
                return canonical
        return None


def build_locale(
        records: Iterable[HotelRecord],
        *,
        aliases: Mapping[str, str] | None = None,
) -> LocaleKnowledge:
    """Build the locale context from the loaded dataset and an alias table."""

    table = {k.lower(): v for k, v in (CITY_ALIASES if aliases is None else aliases).items()}
    states = frozenset(r.state.lower() for r in records if r.state)
    return LocaleKnowledge(city_aliases=MappingProxyType(table), known_states=states)
