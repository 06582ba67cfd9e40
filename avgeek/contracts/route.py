"""RouteEstimate, RouteChallenge, YearSummary: calculated response models.

None of these is ever persisted; they can be recomputed at any time from
the reference catalog and the flight log.
"""

from datetime import datetime, timezone

from pydantic import Field

from avgeek.contracts.common import StoreModel


class RouteEstimate(StoreModel):
    """Great-circle route between two airports under an optional aircraft.

    Fuel and CO2 are only defined when an aircraft is selected: they are
    ``None`` (not zero) otherwise.
    """

    origin_iata: str
    destination_iata: str
    aircraft_id: str | None = None

    distance_km: float = Field(..., ge=0)
    distance_nm: float = Field(..., ge=0)
    cruise_speed_kmh: float = Field(..., gt=0, description="Resolved cruise speed")
    estimated_minutes: int = Field(..., ge=0)
    estimated_fuel_kg: float | None = Field(default=None, ge=0)
    estimated_co2_kg: float | None = Field(default=None, ge=0)
    within_range: bool | None = Field(
        default=None,
        description="None when no aircraft is selected or its range is unknown",
    )


class RouteChallenge(StoreModel):
    """A randomly picked route the user must match with a capable aircraft."""

    origin_iata: str
    destination_iata: str
    distance_km: float = Field(..., ge=0)


class ChallengeResult(StoreModel):
    challenge: RouteChallenge
    aircraft_id: str
    range_km: int | None = None
    success: bool
    message: str


class YearSummary(StoreModel):
    """Shareable summary card data for a year (or all time)."""

    year: int | None = Field(default=None, description="None = all flights")
    total_distance_km: int = Field(..., ge=0)
    total_flights: int = Field(..., ge=0)
    top_aircraft: str | None = None
    top_airport: str | None = None
    longest_flight_km: int = Field(default=0, ge=0)
    badge_count: int = Field(default=0, ge=0)
    top_badges: list[str] = Field(default_factory=list)
    estimated_co2_tonnes: float = Field(default=0.0, ge=0)

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc),
    )
