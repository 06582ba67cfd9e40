"""Aircraft type: one entry of the bundled reference catalog.

Loaded from ``aircraft_db.json`` at startup, never mutated at runtime.
"""

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from avgeek.contracts.common import StoreModel
from avgeek.contracts.enums import AircraftCategory, ProductionStatus


class Aircraft(StoreModel):
    """Reference data for an aircraft type (e.g. Airbus A320neo)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable catalog id, e.g. 'a320neo'")
    name: str
    manufacturer: str
    iata: str | None = None
    icao: str | None = None
    category: AircraftCategory = AircraftCategory.OTHER
    status: ProductionStatus

    range_km: int | None = Field(default=None, ge=0, alias="rangeKM")
    cruise_speed_kmh: int | None = Field(default=None, gt=0, alias="cruiseSpeedKMH")
    typical_seating: str | None = Field(default=None, alias="typicalSeating")
    first_flight_year: int | None = Field(default=None, alias="firstFlightYear")
    production_start: int | None = Field(default=None, alias="productionStart")
    production_end: int | None = Field(default=None, alias="productionEnd")
    intro: str = ""
    fuel_burn_kg_per_hour: float | None = Field(
        default=None, gt=0, alias="fuelBurnKgPerHour",
        description="Average block fuel burn",
    )
    image_names: list[str] = Field(default_factory=list, alias="imageNames")

    @field_validator("category", mode="before")
    @classmethod
    def lenient_category(cls, v: Any) -> AircraftCategory:
        return AircraftCategory.parse(v)

    @field_validator("status", mode="before")
    @classmethod
    def lenient_status(cls, v: Any) -> ProductionStatus:
        return ProductionStatus.parse(v)
