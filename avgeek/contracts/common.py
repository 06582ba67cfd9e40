"""Base classes and shared types for AvGeek contracts.

Unit conventions (all contracts and API responses):
- **Distances**: kilometers (km), suffix ``_km``; nautical miles only
  for display, suffix ``_nm``
- **Speeds**: kilometers per hour, suffix ``_kmh``
- **Fuel burn**: kilograms per hour, suffix ``_kg_per_hour``
- **Masses**: kilograms, suffix ``_kg``
- **Durations**: minutes, suffix ``_minutes``
- **Coordinates**: WGS84 decimal degrees

Wire names are the camelCase keys of the bundled datasets and of exported
flight logs (``aircraftID``, ``distanceKM``...).  Python attributes are
snake_case; the mapping is declared with field aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class StoreModel(BaseModel):
    """Base model with JSON-document friendly serialization.

    - Enums serialize as string values.
    - ``to_document()`` produces a JSON-safe dict keyed by wire names.
    - ``from_document()`` hydrates from such a dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_document(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict (wire names, no ``None`` values)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "StoreModel":
        """Create a model instance from a document dict."""
        return cls.model_validate(data)
