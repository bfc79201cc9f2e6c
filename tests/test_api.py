"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from api.deps import get_service
from config.settings import Settings
from main import create_app


def add(client, **player):
    resp = client.post("/api/roster", json=player)
    assert resp.status_code == 200
    return resp.json()


def assign(client, player_id, quarter, position, **source):
    body = {
        "targetQuarter": quarter,
        "targetPositionIndex": position,
        "dragged": {"playerId": player_id, "sourceType": "list", **source},
    }
    return client.post("/api/schedule/assign", json=body)


def test_healthcheck(client):
    resp = client.get("/api/health/check")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_roster_endpoints(client):
    data = add(client, name="Alice", jersey=7)
    player = data["plan"]["players"][0]
    assert player["jerseyNumber"] == "7"
    assert player["id"]
    assert data["diagnostics"][0]["code"] == "player_added"

    resp = client.put(f"/api/roster/{player['id']}", json={"name": "Alice B", "position": "PG"})
    assert resp.json()["plan"]["players"][0]["position"] == "PG"

    assert [p["name"] for p in client.get("/api/roster").json()] == ["Alice B"]

    resp = client.delete(f"/api/roster/{player['id']}")
    assert resp.json()["plan"]["players"] == []


def test_add_player_requires_name(client):
    assert client.post("/api/roster", json={"jerseyNumber": "4"}).status_code == 422


def test_assign_move_and_retime(client):
    add(client, id="p1", name="Alice")

    plan = assign(client, "p1", "Q1", 0).json()["plan"]
    segment = plan["schedule"]["Q1"][0][0]
    assert segment["minutes"] == 10

    resp = client.patch(f"/api/schedule/Q1/0/{segment['id']}", json={"minutes": 25})
    assert resp.json()["plan"]["schedule"]["Q1"][0][0]["minutes"] == 10

    resp = assign(
        client,
        "p1",
        "Q1",
        3,
        sourceType="timeline",
        sourceQuarter="Q1",
        sourcePositionIndex=0,
        sourceSegmentId=segment["id"],
    )
    q1 = resp.json()["plan"]["schedule"]["Q1"]
    assert q1[0] == []
    assert q1[3][0]["playerId"] == "p1"

    resp = client.delete(f"/api/schedule/Q1/3/{q1[3][0]['id']}")
    assert resp.json()["plan"]["schedule"]["Q1"][3] == []


def test_overflow_warning_is_returned(client):
    add(client, id="p1", name="Alice")
    add(client, id="p2", name="Bea")
    assign(client, "p1", "Q2", 1)
    diagnostics = assign(client, "p2", "Q2", 1).json()["diagnostics"]
    assert diagnostics[0]["level"] == "warning"
    assert diagnostics[0]["code"] == "position_overflow"


def test_invalid_slot_is_a_bad_request(client):
    add(client, id="p1", name="Alice")
    assert assign(client, "p1", "Q9", 0).status_code == 400
    assert assign(client, "p1", "Q1", 5).status_code == 400
    assert client.patch("/api/schedule/Q1/7/x", json={"minutes": 1}).status_code == 400


def test_playing_time_endpoints(client):
    add(client, id="p1", name="Alice", jerseyNumber="7")
    add(client, id="p2", name="Bea")
    assign(client, "p2", "Q1", 0)
    assign(client, "p2", "Q2", 0)
    assign(client, "p1", "Q3", 2)

    rows = client.get("/api/schedule/playing-time").json()
    assert [(r["id"], r["total"]) for r in rows] == [("p2", 20), ("p1", 10)]
    assert rows[1]["jerseyNumber"] == "7"

    assert client.get("/api/schedule/playing-time/p1").json() == {"playerId": "p1", "minutes": 10}
    assert client.get("/api/schedule/on-court").json() == {"playerIds": ["p1", "p2"]}
    assert client.get("/api/schedule/on-court", params={"quarter": "Q3"}).json() == {"playerIds": ["p1"]}


def test_plan_endpoints(client):
    listing = client.get("/api/plans").json()
    first_id = listing["currentPlanId"]
    assert len(listing["plans"]) == 1

    book = client.post("/api/plans", json={}).json()["book"]
    second_id = book["currentPlanId"]
    assert book["plans"][1]["name"] == "Game Plan 2"

    book = client.post("/api/plans/save-as", json={"name": "Copy"}).json()["book"]
    assert book["plans"][-1]["name"] == "Copy"

    resp = client.patch(f"/api/plans/{second_id}", json={"name": "Second"})
    assert resp.json()["book"]["plans"][1]["name"] == "Second"

    resp = client.post(f"/api/plans/{first_id}/load")
    assert resp.json()["book"]["currentPlanId"] == first_id
    assert client.get("/api/plans/current").json()["id"] == first_id

    resp = client.delete(f"/api/plans/{first_id}")
    assert resp.json()["book"]["currentPlanId"] == second_id


def test_plan_errors(client):
    assert client.post("/api/plans/missing/load").status_code == 404
    assert client.patch("/api/plans/missing", json={"name": "x"}).status_code == 404

    only_id = client.get("/api/plans").json()["currentPlanId"]
    resp = client.delete(f"/api/plans/{only_id}")
    assert resp.status_code == 409
    assert len(client.get("/api/plans").json()["plans"]) == 1


def test_api_key_guard(service):
    app = create_app(Settings(api_key="secret", allowed_hosts=["*"], max_body_bytes=0))
    app.dependency_overrides[get_service] = lambda: service
    client = TestClient(app)

    assert client.get("/api/health/check").status_code == 200
    assert client.get("/api/roster").status_code == 401
    assert client.get("/api/roster", headers={"x-api-key": "wrong"}).status_code == 401
    assert client.get("/api/roster", headers={"x-api-key": "secret"}).status_code == 200


def test_body_size_guard(service):
    app = create_app(Settings(api_key=None, allowed_hosts=["*"], max_body_bytes=10))
    app.dependency_overrides[get_service] = lambda: service
    client = TestClient(app)

    resp = client.post("/api/roster", json={"name": "A very long player name indeed"})
    assert resp.status_code == 413


def test_assigning_unknown_player_is_not_found(client):
    add(client, id="p1", name="Alice")
    assert assign(client, "ghost", "Q1", 0).status_code == 404
    assert client.get("/api/schedule/playing-time/ghost").json()["minutes"] == 0
