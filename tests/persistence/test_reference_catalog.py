"""Tests for the reference catalog loader and lookups."""

from __future__ import annotations

import json

from avgeek.contracts.aircraft import Aircraft
from avgeek.contracts.enums import AircraftCategory, ProductionStatus
from avgeek.persistence.catalog import ReferenceCatalog, load_aircraft, load_airports


def _ac(ac_id: str, name: str, manufacturer: str = "Airbus") -> Aircraft:
    return Aircraft(
        id=ac_id, name=name, manufacturer=manufacturer,
        status=ProductionStatus.IN_PRODUCTION,
    )


class TestLoaders:
    def test_bundled_catalog(self, catalog):
        assert len(catalog.aircraft) > 10
        assert len(catalog.airports) > 20

    def test_aircraft_sorted_by_name(self, catalog):
        names = [a.name for a in catalog.aircraft]
        assert names == sorted(names)

    def test_airports_sorted_by_code(self, catalog):
        codes = [a.iata for a in catalog.airports]
        assert codes == sorted(codes)

    def test_missing_file_is_empty(self, tmp_path):
        assert load_aircraft(tmp_path / "nope.json") == []
        assert load_airports(tmp_path / "nope.json") == []

    def test_malformed_file_is_empty(self, tmp_path):
        path = tmp_path / "aircraft.json"
        path.write_text(json.dumps([{"id": "x"}]))
        assert load_aircraft(path) == []

    def test_categories_normalized(self, catalog):
        assert catalog.aircraft_by_id("atr72-600").category == AircraftCategory.REGIONAL_TURBOPROP
        assert catalog.aircraft_by_id("dash8-400").category == AircraftCategory.REGIONAL_TURBOPROP
        assert catalog.aircraft_by_id("b747-8f").category == AircraftCategory.FREIGHTER
        assert catalog.aircraft_by_id("an225").category == AircraftCategory.OTHER


class TestLookups:
    def test_airport_case_insensitive(self, catalog):
        assert catalog.airport_by_code("cdg").iata == "CDG"
        assert catalog.airport_by_code(" jfk ").iata == "JFK"
        assert catalog.airport_by_code("XXX") is None

    def test_first_duplicate_wins(self):
        cat = ReferenceCatalog([_ac("x", "First"), _ac("x", "Second")], [])
        assert cat.aircraft_by_id("x").name == "First"

    def test_compare(self, catalog):
        first, second = catalog.compare("a320neo", "nope")
        assert first.id == "a320neo"
        assert second is None

    def test_manufacturers(self, catalog):
        makers = catalog.manufacturers()
        assert makers == sorted(set(makers))
        assert "Airbus" in makers and "Boeing" in makers


class TestSearch:
    def test_query_matches_name_and_codes(self, catalog):
        assert [a.id for a in catalog.search_aircraft("A38M")] == []
        assert "b737max8" in [a.id for a in catalog.search_aircraft("b38m")]
        assert "a380-800" in [a.id for a in catalog.search_aircraft("a380")]

    def test_filters(self, catalog):
        result = catalog.search_aircraft(
            manufacturer="Boeing", status=ProductionStatus.DISCONTINUED,
        )
        assert result
        assert all(a.manufacturer == "Boeing" for a in result)
        assert all(a.status == ProductionStatus.DISCONTINUED for a in result)

    def test_category_filter(self, catalog):
        result = catalog.search_aircraft(category=AircraftCategory.SUPERSONIC)
        assert [a.id for a in result] == ["concorde"]

    def test_favorites_filter(self, catalog):
        result = catalog.search_aircraft(favorites={"e190", "nope"})
        assert [a.id for a in result] == ["e190"]

    def test_airport_search(self, catalog):
        assert {a.iata for a in catalog.search_airports("paris")} == {"CDG", "ORY"}
        assert len(catalog.search_airports("")) == len(catalog.airports)
