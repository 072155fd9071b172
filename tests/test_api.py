import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app

TEE = [-93.621, 42.034]
MID = [-93.620, 42.034]
FLAG = [-93.619, 42.034]

CONFIGURED = [
    {"name": "Driver", "minDistance": 230, "maxDistance": 240, "averageDistance": 235},
    {"name": "7 Iron", "minDistance": 150, "maxDistance": 160, "averageDistance": 155},
    {"name": "PW", "minDistance": 80, "maxDistance": 90, "averageDistance": 85},
]


@pytest.fixture
def client():
    with TestClient(create_app(Settings())) as c:
        yield c


@pytest.fixture
def round_id(client):
    resp = client.post("/api/rounds")
    assert resp.status_code == 201
    return resp.json()["id"]


def _place(client, round_id, mode, coordinate):
    assert client.post(f"/api/rounds/{round_id}/mode", json={"mode": mode}).status_code == 200
    return client.post(f"/api/rounds/{round_id}/place", json={"coordinate": coordinate})


def test_health_without_database(client):
    resp = client.get("/api/health")
    assert resp.json() == {"status": "ok", "database": None}


# ================================================================
# Clubs
# ================================================================

def test_bands(client):
    bands = client.get("/api/clubs/bands").json()
    assert len(bands) == 30
    assert bands[0] == {"label": "0-10 yards", "min_yards": 0, "max_yards": 10, "average_yards": 5}


def test_get_clubs_defaults(client):
    body = client.get("/api/clubs/player-1").json()
    assert len(body["clubs"]) == 13
    assert body["usable"] is False
    assert body["configured"] == 0
    assert body["clubs"][0]["averageDistance"] == 0


def test_save_gate(client):
    resp = client.put("/api/clubs/player-1", json={"clubs": CONFIGURED[:2]})
    assert resp.status_code == 422

    resp = client.put("/api/clubs/player-1", json={"clubs": CONFIGURED})
    assert resp.status_code == 200
    assert resp.json()["usable"] is True

    stored = client.get("/api/clubs/player-1").json()
    assert [c["name"] for c in stored["clubs"]] == ["Driver", "7 Iron", "PW"]


def test_band_and_manual_edits(client):
    resp = client.post("/api/clubs/player-2/6/band", json={"min_yards": 150, "max_yards": 160})
    assert resp.status_code == 200
    club = resp.json()["clubs"][6]
    assert club["name"] == "7 Iron"
    assert (club["minDistance"], club["maxDistance"], club["averageDistance"]) == (150, 160, 155)
    assert resp.json()["usable"] is False      # edits allowed while under-configured

    resp = client.post(
        "/api/clubs/player-2/11/manual",
        json={"min_distance": 100, "max_distance": 80, "average_distance": 90},
    )
    assert resp.status_code == 200
    assert resp.json()["warnings"] == ["SW: min (100) exceeds max (80)"]

    assert client.post("/api/clubs/player-2/99/band", json={"min_yards": 0, "max_yards": 10}).status_code == 404


def test_delete_clubs(client):
    assert client.delete("/api/clubs/player-3").status_code == 404
    client.put("/api/clubs/player-3", json={"clubs": CONFIGURED})
    assert client.delete("/api/clubs/player-3").status_code == 204


# ================================================================
# Rounds
# ================================================================

def test_start_round(client):
    body = client.post("/api/rounds").json()
    assert body["current_index"] == 0
    assert body["hole"]["par"] == 4
    assert body["state"]["mode"] == "none"
    assert body["state"]["shots"] == []
    assert body["score"] == "-"


def test_start_round_with_catalog(client):
    holes = [{"number": 1, "name": "Only", "par": 3, "distance": 150}]
    body = client.post("/api/rounds", json={"holes": holes}).json()
    assert body["hole"]["name"] == "Only"


def test_unknown_round(client):
    assert client.get("/api/rounds/nope").status_code == 404
    assert client.post("/api/rounds/nope/reset").status_code == 404


def test_shot_mode_rejected_before_tee_and_flag(client, round_id):
    resp = client.post(f"/api/rounds/{round_id}/mode", json={"mode": "shot"})
    assert resp.status_code == 409
    assert client.get(f"/api/rounds/{round_id}").json()["state"]["mode"] == "none"


def test_tap_ignored_without_mode(client, round_id):
    body = client.post(f"/api/rounds/{round_id}/place", json={"coordinate": TEE}).json()
    assert body["placed"] is False
    assert body["round"]["state"]["tee"] is None


def test_play_a_hole(client, round_id):
    assert _place(client, round_id, "tee", TEE).json()["placed"] is True
    _place(client, round_id, "flag", FLAG)
    body = _place(client, round_id, "shot", MID).json()

    state = body["round"]["state"]
    assert state["tee"] == {"lng": TEE[0], "lat": TEE[1]}
    assert state["shots"] == [{"lng": MID[0], "lat": MID[1]}]
    assert state["mode"] == "none"
    assert body["round"]["score"] == "-3"

    body = client.post(f"/api/rounds/{round_id}/reset").json()
    assert body["state"] == {
        "tee": None, "flag": None, "shots": [], "mode": "none", "can_add_shot": False,
    }


def test_select_hole_records_and_resets(client, round_id):
    for _ in range(5):
        client.post(f"/api/rounds/{round_id}/shots", json={"coordinate": MID})

    body = client.post(f"/api/rounds/{round_id}/holes/1").json()
    assert body["hole"]["number"] == 2
    assert body["state"]["shots"] == []

    card = client.get(f"/api/rounds/{round_id}/scorecard").json()
    assert [r["label"] for r in card["rows"]][:2] == ["+1", "-"]
    assert card["holes_played"] == 1
    assert card["to_par"] == 1

    assert client.post(f"/api/rounds/{round_id}/holes/9").status_code == 404


def test_recommendation(client, round_id):
    url = f"/api/rounds/{round_id}/recommendation"

    resp = client.get(url, params={"user_id": "player-4"})
    assert resp.status_code == 409                 # default bag is not configured

    client.put("/api/clubs/player-4", json={"clubs": CONFIGURED})
    assert client.get(url, params={"user_id": "player-4"}).status_code == 409   # no tee/flag

    _place(client, round_id, "tee", TEE)
    _place(client, round_id, "flag", FLAG)
    body = client.get(url, params={"user_id": "player-4"}).json()
    assert body["distance_yards"] == pytest.approx(180.6, abs=0.1)
    assert body["club"]["name"] == "Driver"

    _place(client, round_id, "shot", MID)
    body = client.get(url, params={"user_id": "player-4"}).json()
    assert body["club"]["name"] == "7 Iron"


def test_delete_round(client, round_id):
    assert client.delete(f"/api/rounds/{round_id}").status_code == 204
    assert client.get(f"/api/rounds/{round_id}").status_code == 404


def test_revisited_hole_score_matches_scorecard(client, round_id):
    for _ in range(5):
        client.post(f"/api/rounds/{round_id}/shots", json={"coordinate": MID})
    client.post(f"/api/rounds/{round_id}/holes/1")

    body = client.post(f"/api/rounds/{round_id}/holes/0").json()
    card = client.get(f"/api/rounds/{round_id}/scorecard").json()
    assert body["state"]["shots"] == []
    assert body["score"] == "+1"
    assert card["rows"][0]["label"] == body["score"]


def test_recommendation_ignores_unconfigured_clubs(client, round_id):
    clubs = [{"name": "Driver", "minDistance": 0, "maxDistance": 0, "averageDistance": 0}] + CONFIGURED
    client.put("/api/clubs/player-5", json={"clubs": clubs})
    _place(client, round_id, "tee", TEE)
    _place(client, round_id, "flag", FLAG)
    _place(client, round_id, "shot", FLAG)

    body = client.get(f"/api/rounds/{round_id}/recommendation", params={"user_id": "player-5"}).json()
    assert body["distance_yards"] == 0
    assert body["club"]["name"] == "PW"
