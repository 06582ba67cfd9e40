"""Airport: one entry of the bundled reference catalog, keyed by IATA code."""

from pydantic import ConfigDict, Field, computed_field

from avgeek.contracts.common import StoreModel


class Airport(StoreModel):
    model_config = ConfigDict(frozen=True)

    iata: str = Field(..., min_length=1, description="IATA code, e.g. 'CDG'")
    name: str
    city: str
    country: str
    latitude: float
    longitude: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return self.iata
