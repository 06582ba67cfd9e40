"""FlightLog: one flight the user actually took (or simulated and saved).

Stored in ``flight_logs.json`` as a JSON array, in log order.  The same
array format is used for export and import.
"""

import uuid
from datetime import datetime, timezone

from pydantic import Field, field_validator

from avgeek.contracts.common import StoreModel
from avgeek.contracts.enums import PREMIUM_CABINS, CabinClass


def new_flight_id() -> str:
    return str(uuid.uuid4()).upper()


class FlightLog(StoreModel):
    """A logged flight.

    ``id`` is generated once at creation and never changes; it is the
    merge key for imports.  ``distance_km`` is frozen at creation time
    (great-circle distance between the two airports) and is never
    recomputed, even if the airport catalog changes later.

    ``aircraft_id`` references the aircraft catalog but may dangle: a
    flight whose aircraft has since disappeared still counts towards
    distance and airport totals.
    """

    id: str = Field(default_factory=new_flight_id, min_length=1)
    date: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    aircraft_id: str = Field(..., alias="aircraftID")
    origin_iata: str = Field(..., min_length=1, alias="originIATA")
    destination_iata: str = Field(..., min_length=1, alias="destinationIATA")
    distance_km: float = Field(..., ge=0, allow_inf_nan=False, alias="distanceKM")
    note: str | None = None
    cabin: CabinClass | None = None

    @field_validator("origin_iata", "destination_iata", mode="before")
    @classmethod
    def upper_codes(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("date")
    @classmethod
    def naive_date_is_utc(cls, v: datetime) -> datetime:
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v

    @field_validator("note", mode="before")
    @classmethod
    def blank_note_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_premium_cabin(self) -> bool:
        return self.cabin in PREMIUM_CABINS
