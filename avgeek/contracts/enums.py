"""Enumerations shared across all AvGeek contracts."""

from enum import Enum
from typing import Any


class ProductionStatus(str, Enum):
    IN_PRODUCTION = "In Production"
    DISCONTINUED = "Discontinued"

    @classmethod
    def parse(cls, value: Any) -> "ProductionStatus":
        """Case-insensitive decoding; accepts ``in_production`` style too."""
        if isinstance(value, cls):
            return value
        s = str(value).strip().replace("_", " ").replace("-", " ").lower()
        if s.startswith("discontinued") or s == "out of production":
            return cls.DISCONTINUED
        if s == "in production":
            return cls.IN_PRODUCTION
        raise ValueError(f"Unknown production status: {value!r}")


class AircraftCategory(str, Enum):
    """Broad aircraft family.

    Datasets spell categories inconsistently ("Regional_Turboprop",
    "cargo", "Biz jet"...).  ``parse`` normalizes them with substring
    rules and never fails: anything unrecognized becomes ``OTHER``.
    """

    NARROW_BODY = "Narrow-body"
    WIDE_BODY = "Wide-body"
    REGIONAL_JET = "Regional Jet"
    REGIONAL_TURBOPROP = "Regional Turboprop"
    BUSINESS_JET = "Business Jet"
    FREIGHTER = "Freighter"
    SUPERSONIC = "Supersonic"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: Any) -> "AircraftCategory":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.OTHER
        s = value.strip().replace("_", " ").lower()

        # Order matters: first matching rule wins.
        if "narrow" in s:
            return cls.NARROW_BODY
        if "wide" in s:
            return cls.WIDE_BODY
        if "regional" in s and "turbo" in s:
            return cls.REGIONAL_TURBOPROP
        if "regional" in s and "jet" in s:
            return cls.REGIONAL_JET
        if "business" in s or "biz" in s:
            return cls.BUSINESS_JET
        if "freight" in s or "cargo" in s:
            return cls.FREIGHTER
        if "supersonic" in s:
            return cls.SUPERSONIC
        return cls.OTHER


class CabinClass(str, Enum):
    """Service tier of a logged flight."""
    ECONOMY = "Economy"
    PREMIUM_ECONOMY = "Premium Economy"
    BUSINESS = "Business"
    FIRST = "First"


PREMIUM_CABINS = frozenset({CabinClass.BUSINESS.value, CabinClass.FIRST.value})
