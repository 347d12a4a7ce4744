import io

from openpyxl import load_workbook

from ghostnets.router import EXPORT_HEADERS


def _submit(client, headers=None, **body):
    payload = {"latitude": 10.0, "longitude": 20.0}
    payload.update(body)
    return client.post("/api/ghostnets/add", json=payload, headers=headers or {})


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_submit_anonymous_ignores_client_status(client):
    resp = _submit(client, size=5.0, status="RECOVERED")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "REPORTED"
    assert data["size"] == 5.0

    net = client.get("/api/ghostnets").json()[0]
    assert net["reported_by"] is None
    assert net["reported_at"] is not None


def test_submit_accepts_depth_meters_alias(client):
    assert _submit(client, depth_meters=12.5).json()["size"] == 12.5


def test_submit_with_user_header(client):
    _submit(client, headers={"X-User-Id": "42"})
    assert client.get("/api/ghostnets").json()[0]["reported_by"] == 42


def test_submit_out_of_range(client):
    resp = _submit(client, latitude=95.0)
    assert resp.status_code == 400
    assert "latitude" in resp.json()["detail"]

    resp = client.post("/api/ghostnets/add", json={"latitude": 1.0})
    assert resp.status_code == 400
    assert "longitude" in resp.json()["detail"]

    assert client.get("/api/ghostnets").json() == []


def test_status_scenario(client):
    net_id = _submit(client, size=5.0).json()["id"]

    resp = client.patch(
        f"/api/ghostnets/{net_id}/status",
        json={"status": "SCHEDULED", "scheduled_by_user_id": 7},
    )
    assert resp.status_code == 200
    scheduled = resp.json()
    assert scheduled["status"] == "SCHEDULED"
    assert scheduled["scheduled_by"] == 7
    assert scheduled["scheduled_at"] is not None

    resp = client.patch(
        f"/api/ghostnets/{net_id}/status",
        json={"status": "RECOVERED", "recovered_by_user_id": 9},
    )
    recovered = resp.json()
    assert recovered["status"] == "RECOVERED"
    assert recovered["recovered_by"] == 9
    assert recovered["recovered_at"] is not None
    assert recovered["scheduled_by"] == 7
    assert recovered["scheduled_at"] == scheduled["scheduled_at"]


def test_status_update_errors(client):
    net_id = _submit(client).json()["id"]

    assert client.patch("/api/ghostnets/999/status", json={"status": "SCHEDULED"}).status_code == 404
    assert client.patch(f"/api/ghostnets/{net_id}/status", json={}).status_code == 400
    assert client.patch(f"/api/ghostnets/{net_id}/status", json={"status": "LOST"}).status_code == 422


def test_history_newest_first(client):
    net_id = _submit(client, headers={"X-User-Id": "3"}).json()["id"]
    client.patch(f"/api/ghostnets/{net_id}/status", json={"status": "SCHEDULED", "scheduled_by_user_id": 7})
    client.patch(
        f"/api/ghostnets/{net_id}/status",
        json={"status": "RECOVERED", "recovered_by_user_id": 9},
        headers={"X-User-Id": "11"},
    )

    resp = client.get(f"/api/ghostnets/{net_id}/history")
    assert resp.status_code == 200
    events = resp.json()["events"]
    assert [e["action"] for e in events] == ["update_status", "update_status", "submit_report"]
    assert [e["actor_id"] for e in events] == [11, 7, 3]
    assert events[0]["detail"] == "status=RECOVERED"


def test_history_unknown_report(client):
    assert client.get("/api/ghostnets/999/history").status_code == 404


def test_export(client):
    net_id = _submit(client, size=3.0).json()["id"]
    client.patch(f"/api/ghostnets/{net_id}/status", json={"status": "CANCELLED", "cancelled_by_user_id": 5})
    _submit(client, latitude=-45.5, longitude=170.25)

    resp = client.get("/api/ghostnets/export")
    assert resp.status_code == 200
    assert "ghost-nets.xlsx" in resp.headers["content-disposition"]

    ws = load_workbook(io.BytesIO(resp.content)).active
    rows = list(ws.iter_rows(values_only=True))
    assert list(rows[0]) == EXPORT_HEADERS
    assert len(rows) == 3
    assert rows[1][0] == net_id
    assert rows[1][4] == "CANCELLED"
    assert rows[1][11] == 5
    assert rows[2][1:3] == (-45.5, 170.25)


def test_root_is_not_routed(client):
    assert client.get("/").status_code == 404
