import json
from datetime import datetime, timezone

from topcar.core import clock

JSON = {"Content-Type": "application/json"}


def _expense(**overrides):
    payload = {
        "workerId": "worker1",
        "workerName": "John Smith",
        "type": "fuel",
        "amount": 45.5,
        "description": "Fuel for service vehicle",
    }
    payload.update(overrides)
    return payload


def test_create_expense(client):
    res = client.post("/expenses", json=_expense(appointmentId="A1"))
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["amount"] == 45.5
    assert data["appointmentId"] == "A1"
    assert data["date"]


def test_worker_name_defaults(client):
    data = client.post("/expenses", json=_expense(workerName=None)).json()["data"]
    assert data["workerName"] == "Unknown Worker"


def test_amount_must_be_positive(client):
    for amount in (0, -5):
        res = client.post("/expenses", json=_expense(amount=amount))
        assert res.status_code == 400
        assert res.json()["error"] == "Amount must be greater than 0"
    assert client.get("/expenses").json()["data"] == []


def test_non_finite_amount_is_rejected(client):
    # 1e999 overflows to inf when the body is parsed
    body = json.dumps(_expense(amount=0)).replace('"amount": 0', '"amount": 1e999')
    res = client.post("/expenses", content=body, headers=JSON)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"
    assert client.get("/expenses").json()["data"] == []

    created = client.post("/expenses", json=_expense()).json()["data"]
    res = client.put(f"/expenses?id={created['id']}", content='{"amount": 1e999}', headers=JSON)
    assert res.status_code == 400
    assert client.get("/expenses").json()["data"][0]["amount"] == 45.5


class _SydneyMorning(datetime):
    """2026-10-19 14:00 UTC, which is already 01:00 on the 20th in Sydney."""

    @classmethod
    def now(cls, tz=None):
        instant = datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc)
        return instant.astimezone(tz) if tz else instant.replace(tzinfo=None)


def test_undated_expense_counts_toward_business_day(client, monkeypatch):
    monkeypatch.setattr(clock, "datetime", _SydneyMorning)

    created = client.post("/expenses", json=_expense(amount=30)).json()["data"]
    assert created["date"].startswith("2026-10-20T01:00")

    data = client.get("/sales/daily").json()["data"]
    assert data["date"] == "2026-10-20"
    assert data["expenses"] == 30
    assert data["netProfit"] == -30


def test_missing_fields(client):
    payload = _expense()
    del payload["description"]
    res = client.post("/expenses", json=payload)
    assert res.status_code == 400


def test_invalid_type(client):
    res = client.post("/expenses", json=_expense(type="lunch"))
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request"


def test_filters(client):
    client.post("/expenses", json=_expense(workerId="worker1", type="fuel", date="2026-10-01T09:00:00"))
    client.post("/expenses", json=_expense(workerId="worker2", type="receipt", date="2026-10-10T09:00:00"))
    client.post("/expenses", json=_expense(workerId="worker1", type="other", appointmentId="A9", date="2026-10-15T23:30:00"))

    assert len(client.get("/expenses", params={"workerId": "worker1"}).json()["data"]) == 2
    assert len(client.get("/expenses", params={"type": "receipt"}).json()["data"]) == 1
    assert len(client.get("/expenses", params={"appointmentId": "A9"}).json()["data"]) == 1

    ranged = client.get("/expenses", params={"startDate": "2026-10-10", "endDate": "2026-10-15"}).json()["data"]
    assert [e["type"] for e in ranged] == ["receipt", "other"]

    # one bound alone is ignored
    assert len(client.get("/expenses", params={"startDate": "2026-10-10"}).json()["data"]) == 3


def test_update_expense(client):
    created = client.post("/expenses", json=_expense()).json()["data"]
    res = client.put(f"/expenses?id={created['id']}", json={"amount": 60, "description": "Full tank"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["amount"] == 60
    assert data["description"] == "Full tank"
    assert data["updatedAt"] is not None

    assert client.put(f"/expenses?id={created['id']}", json={"amount": 0}).status_code == 400
    assert client.put("/expenses?id=missing", json={"amount": 1}).status_code == 404
    assert client.put("/expenses", json={"amount": 1}).status_code == 400


def test_delete_expense(client):
    created = client.post("/expenses", json=_expense()).json()["data"]
    assert client.delete(f"/expenses?id={created['id']}").status_code == 200
    assert client.get("/expenses").json()["data"] == []
    assert client.delete(f"/expenses?id={created['id']}").status_code == 404
