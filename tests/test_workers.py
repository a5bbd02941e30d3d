from fastapi.testclient import TestClient

from topcar.integrations.geocoding import MOCK_ADDRESSES, MockGeocoder, get_geocoder
from topcar.main import app


def test_reverse_geocode_is_deterministic():
    geocoder = MockGeocoder()
    first = geocoder.reverse(-33.8688, 151.2093)
    assert first in MOCK_ADDRESSES
    assert geocoder.reverse(-33.8688, 151.2093) == first


def test_location_upsert(client):
    res = client.put("/workers/worker1/location", json={"latitude": -33.8688, "longitude": 151.2093, "workerName": "John Smith"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["address"] == MockGeocoder().reverse(-33.8688, 151.2093)
    assert res.json()["message"] == f"Location updated: {data['address']}"

    client.put("/workers/worker1/location", json={"latitude": -33.7488, "longitude": 151.1397})
    client.put("/workers/worker2/location", json={"latitude": -33.9173, "longitude": 151.2313})

    locations = client.get("/workers/locations").json()["data"]
    assert [l["workerId"] for l in locations] == ["worker1", "worker2"]
    assert locations[0]["latitude"] == -33.7488
    assert locations[0]["workerName"] == "John Smith"


def test_rejects_out_of_range_coordinates(client):
    res = client.put("/workers/worker1/location", json={"latitude": 123, "longitude": 0})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"


class BrokenGeocoder:
    def reverse(self, latitude, longitude):
        raise RuntimeError("geocoder exploded")


def test_unexpected_errors_become_generic_500():
    app.dependency_overrides[get_geocoder] = lambda: BrokenGeocoder()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            res = c.put("/workers/worker1/location", json={"latitude": 1, "longitude": 1})
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error", "message": None}
