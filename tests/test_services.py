from topcar.catalog import SERVICE_PACKAGES


def test_catalog_is_seeded_in_order(client):
    res = client.get("/services")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert [s["id"] for s in body["data"]] == [p["id"] for p in SERVICE_PACKAGES]

    full = next(s for s in body["data"] if s["id"] == "full-detail")
    assert full["basePrice"] == 199
    assert full["premiumPrice"] == 300
    assert full["inclusions"][0] == "Everything in Basic Detail"


def test_listing_twice_is_identical(client):
    first = client.get("/services").json()["data"]
    second = client.get("/services").json()["data"]
    assert first == second


def test_create_applies_defaults(client):
    res = client.post("/services", json={"name": "Headlight Restore", "description": "Lens polish", "basePrice": 100})
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["premiumPrice"] == 130
    assert data["duration"] == 120
    assert data["category"] == "basic"
    assert data["inclusions"] == []

    ids = [s["id"] for s in client.get("/services").json()["data"]]
    assert ids[-1] == data["id"]


def test_create_requires_fields(client):
    res = client.post("/services", json={"name": "No price", "description": "x"})
    assert res.status_code == 400
    assert res.json()["error"] == "Missing required fields"

    res = client.post("/services", json={"name": "", "description": "x", "basePrice": 10})
    assert res.status_code == 400


def test_non_finite_price_is_rejected(client):
    body = '{"name": "Overflow", "description": "x", "basePrice": 1e999}'
    res = client.post("/services", content=body, headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"
    assert len(client.get("/services").json()["data"]) == len(SERVICE_PACKAGES)


def test_new_package_can_be_booked(client, book):
    created = client.post(
        "/services",
        json={"name": "Pet Hair Removal", "description": "Interior", "basePrice": 60, "premiumPrice": 90, "category": "interior"},
    ).json()["data"]
    appt = book(servicePackageId=created["id"], vehicleType="large")
    assert appt["totalPrice"] == 90


def test_update_merges_fields(client):
    res = client.put("/services?id=basic-detail", json={"basePrice": 85})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["basePrice"] == 85
    assert data["premiumPrice"] == 100
    assert data["name"] == "Basic Detail"


def test_reprice_does_not_change_existing_bookings(client, book):
    appt = book(servicePackageId="basic-detail")
    client.put("/services?id=basic-detail", json={"basePrice": 99, "name": "Basic Plus"})
    stored = client.get("/appointments").json()["data"][0]
    assert stored["id"] == appt["id"]
    assert stored["totalPrice"] == 79
    assert stored["servicePackageName"] == "Basic Detail"


def test_update_unknown_is_404(client):
    res = client.put("/services?id=nope", json={"basePrice": 1})
    assert res.status_code == 404
    assert res.json()["error"] == "Service not found"


def test_update_requires_id(client):
    assert client.put("/services", json={"basePrice": 1}).status_code == 400


def test_delete_removes_exactly_one(client):
    before = client.get("/services").json()["data"]

    res = client.delete("/services?id=cut-polish")
    assert res.status_code == 200
    assert res.json()["message"] == "Service deleted successfully"

    after = client.get("/services").json()["data"]
    assert len(after) == len(before) - 1
    assert "cut-polish" not in [s["id"] for s in after]

    again = client.delete("/services?id=cut-polish")
    assert again.status_code == 404


def test_delete_requires_id(client):
    assert client.delete("/services").status_code == 400
