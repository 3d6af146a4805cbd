"""Hotel filter schema (Pydantic model).

This schema is the only contract between untyped LLM output and the deterministic filter applier.
Exactly seven keys are allowed; anything else is rejected before a single record is examined.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

NonNegativeNumber = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]

class SchemaValidationError(ValueError):
    """Raised when a candidate filter violates the schema.

    `details` lists every offending key as `{"loc", "msg", "type"}`.
    """

    def __init__(self, message: str, *, details: list[dict[str, str]]) -> None:
        super().__init__(message)
        self.details = details


class HotelFilter(BaseModel):
    """A validated filter; absent keys impose no constraint.

    Fields are populated by their wire names (`minPtsNight`, ...) only, so a Python attribute name
    can never slip through as an eighth key.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    city: StrictStr | None = None
    brand: StrictStr | None = None
    state: StrictStr | None = None
    hotel: StrictStr | None = None
    min_pts_night: NonNegativeNumber | None = Field(default=None, alias="minPtsNight")
    max_pts_night: NonNegativeNumber | None = Field(default=None, alias="maxPtsNight")
    max_distance_km: NonNegativeNumber | None = Field(default=None, alias="maxDistanceKm")

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any) -> Any:
        # Defaults are not validated, so this only fires for a key that is present with null.
        if value is None:
            raise ValueError("must not be null; omit the key instead")
        return value

    def to_dict(self) -> dict[str, Any]:
        """Return only the present keys, by wire name."""

        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_dict()


def _format_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def validate_filter(obj: Any) -> HotelFilter:
    """Validate a decoded JSON object into a `HotelFilter`.

    Raises:
        SchemaValidationError: On unknown keys, wrong types, negative numbers or explicit nulls.
    """

    if not isinstance(obj, dict):
        raise SchemaValidationError(
            "filter must be a JSON object",
            details=[{"loc": "", "msg": "expected an object", "type": "dict_type"}],
        )

    try:
        return HotelFilter.model_validate(obj)
    except ValidationError as exc:
        raise SchemaValidationError("invalid filter generated", details=_format_errors(exc)) from exc
