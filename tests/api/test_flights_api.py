"""Tests for flight log endpoints."""

from __future__ import annotations

import json

PAYLOAD = {
    "id": "FLIGHT-1",
    "date": "2024-04-02T07:15:00Z",
    "aircraftID": "a320neo",
    "originIATA": "CDG",
    "destinationIATA": "NCE",
    "distanceKM": 686.4,
}


class TestFlightsAPI:
    async def test_list_empty(self, client):
        resp = await client.get("/api/flights")
        assert resp.status_code == 200
        assert resp.json() == []

    async def test_create_and_get(self, client):
        resp = await client.post("/api/flights", json=PAYLOAD)
        assert resp.status_code == 201
        data = resp.json()
        assert data["id"] == "FLIGHT-1"
        assert data["unlocked_badges"] == []

        resp = await client.get("/api/flights/FLIGHT-1")
        assert resp.status_code == 200
        assert resp.json()["distanceKM"] == 686.4

    async def test_create_duplicate(self, client):
        await client.post("/api/flights", json=PAYLOAD)
        resp = await client.post("/api/flights", json=PAYLOAD)
        assert resp.status_code == 409

    async def test_create_invalid(self, client):
        resp = await client.post("/api/flights", json={**PAYLOAD, "distanceKM": -5})
        assert resp.status_code == 422

    async def test_create_infinite_distance(self, client):
        body = json.dumps(PAYLOAD).replace("686.4", "1e400")
        resp = await client.post(
            "/api/flights", content=body, headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422
        assert (await client.get("/api/flights")).json() == []

    async def test_create_reports_unlocks(self, client):
        resp = await client.post("/api/flights", json={**PAYLOAD, "distanceKM": 6000})
        assert resp.json()["unlocked_badges"] == ["Long-Haul"]

    async def test_log_by_codes(self, client):
        resp = await client.post(
            "/api/flights/log",
            json={"origin": "cdg", "destination": "jfk", "aircraft_id": "b777-300er",
                  "cabin": "Business"},
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["originIATA"] == "CDG"
        assert data["cabin"] == "Business"
        assert 5800 < data["distanceKM"] < 5880

    async def test_log_unknown_airport(self, client):
        resp = await client.post(
            "/api/flights/log",
            json={"origin": "XXX", "destination": "JFK", "aircraft_id": "a320neo"},
        )
        assert resp.status_code == 404

    async def test_delete(self, client):
        await client.post("/api/flights", json=PAYLOAD)
        resp = await client.delete("/api/flights/FLIGHT-1")
        assert resp.status_code == 204
        resp = await client.delete("/api/flights/FLIGHT-1")
        assert resp.status_code == 404

    async def test_get_not_found(self, client):
        resp = await client.get("/api/flights/nonexistent")
        assert resp.status_code == 404

    async def test_export(self, client):
        await client.post("/api/flights", json=PAYLOAD)
        resp = await client.get("/api/flights/export")
        assert resp.status_code == 200
        assert "attachment" in resp.headers["content-disposition"]
        assert [d["id"] for d in resp.json()] == ["FLIGHT-1"]

    async def test_import_merges(self, client):
        await client.post("/api/flights", json=PAYLOAD)
        second = {**PAYLOAD, "id": "FLIGHT-2"}
        content = json.dumps([PAYLOAD, second]).encode()
        resp = await client.post(
            "/api/flights/import",
            files={"file": ("logs.json", content, "application/json")},
        )
        assert resp.status_code == 200
        assert resp.json() == {"added": 1, "total": 2}

    async def test_import_bad_file(self, client):
        resp = await client.post(
            "/api/flights/import",
            files={"file": ("logs.json", b"garbage", "application/json")},
        )
        assert resp.status_code == 400

    async def test_newest_first(self, client):
        await client.post("/api/flights", json=PAYLOAD)
        await client.post(
            "/api/flights",
            json={**PAYLOAD, "id": "FLIGHT-2", "date": "2025-01-01T00:00:00Z"},
        )
        resp = await client.get("/api/flights", params={"newest_first": True})
        assert [f["id"] for f in resp.json()] == ["FLIGHT-2", "FLIGHT-1"]
