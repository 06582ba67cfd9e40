"""Tests for Aircraft / Airport contracts and enum decoding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.airport import Airport
from avgeek.contracts.enums import AircraftCategory, ProductionStatus


def _aircraft_doc(**overrides) -> dict:
    doc = {
        "id": "a320neo",
        "name": "Airbus A320neo",
        "manufacturer": "Airbus",
        "category": "Narrow-body",
        "status": "In Production",
        "rangeKM": 6300,
        "cruiseSpeedKMH": 833,
        "fuelBurnKgPerHour": 2100,
    }
    doc.update(overrides)
    return doc


class TestAircraftCategory:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Narrow-body", AircraftCategory.NARROW_BODY),
            ("wide_body", AircraftCategory.WIDE_BODY),
            ("Regional Turboprop", AircraftCategory.REGIONAL_TURBOPROP),
            ("Regional_Turboprop", AircraftCategory.REGIONAL_TURBOPROP),
            ("regional_turbo", AircraftCategory.REGIONAL_TURBOPROP),
            ("REGIONAL-TURBO-PROP", AircraftCategory.REGIONAL_TURBOPROP),
            ("regional_jet", AircraftCategory.REGIONAL_JET),
            ("Biz Jet", AircraftCategory.BUSINESS_JET),
            ("Business Jet", AircraftCategory.BUSINESS_JET),
            ("cargo", AircraftCategory.FREIGHTER),
            ("Freighter", AircraftCategory.FREIGHTER),
            ("Supersonic", AircraftCategory.SUPERSONIC),
            ("Strategic Airlifter", AircraftCategory.OTHER),
            ("Hypersonic Glider", AircraftCategory.OTHER),
            ("", AircraftCategory.OTHER),
        ],
    )
    def test_parse(self, raw, expected):
        assert AircraftCategory.parse(raw) == expected

    def test_first_rule_wins(self):
        # Contains both "wide" and "cargo": the wide-body rule comes first.
        assert AircraftCategory.parse("wide-body cargo") == AircraftCategory.WIDE_BODY

    def test_non_string_is_other(self):
        assert AircraftCategory.parse(42) == AircraftCategory.OTHER
        assert AircraftCategory.parse(None) == AircraftCategory.OTHER


class TestProductionStatus:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("In Production", ProductionStatus.IN_PRODUCTION),
            ("in_production", ProductionStatus.IN_PRODUCTION),
            ("IN PRODUCTION", ProductionStatus.IN_PRODUCTION),
            ("Discontinued", ProductionStatus.DISCONTINUED),
            ("discontinued", ProductionStatus.DISCONTINUED),
        ],
    )
    def test_parse(self, raw, expected):
        assert ProductionStatus.parse(raw) == expected

    def test_unknown_raises(self):
        with pytest.raises(ValueError):
            ProductionStatus.parse("prototype")


class TestAircraft:
    def test_from_wire_names(self):
        ac = Aircraft.model_validate(_aircraft_doc())
        assert ac.range_km == 6300
        assert ac.cruise_speed_kmh == 833
        assert ac.fuel_burn_kg_per_hour == 2100
        assert ac.status == ProductionStatus.IN_PRODUCTION
        assert ac.category == AircraftCategory.NARROW_BODY
        assert ac.image_names == []

    def test_lenient_category(self):
        ac = Aircraft.model_validate(_aircraft_doc(category="Regional_Turboprop"))
        assert ac.category == AircraftCategory.REGIONAL_TURBOPROP

    def test_missing_category_is_other(self):
        doc = _aircraft_doc()
        del doc["category"]
        assert Aircraft.model_validate(doc).category == AircraftCategory.OTHER

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Aircraft.model_validate(_aircraft_doc(status="maybe"))

    def test_status_required(self):
        doc = _aircraft_doc()
        del doc["status"]
        with pytest.raises(ValidationError):
            Aircraft.model_validate(doc)

    def test_document_uses_wire_names(self):
        doc = Aircraft.model_validate(_aircraft_doc()).to_document()
        assert doc["rangeKM"] == 6300
        assert doc["cruiseSpeedKMH"] == 833
        assert doc["status"] == "In Production"
        assert "productionEnd" not in doc

    def test_frozen(self):
        ac = Aircraft.model_validate(_aircraft_doc())
        with pytest.raises(ValidationError):
            ac.name = "Other"


class TestAirport:
    def test_id_is_iata(self):
        ap = Airport(
            iata="CDG", name="Paris Charles de Gaulle", city="Paris",
            country="France", latitude=49.0097, longitude=2.5479,
        )
        assert ap.id == "CDG"
        assert ap.to_document()["id"] == "CDG"
