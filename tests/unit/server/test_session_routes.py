"""Tests for the live session endpoints."""

import pytest
from fastapi.testclient import TestClient

from catlauncher.config import GameConfig, ObstacleConfig
from catlauncher.server import create_app


@pytest.fixture
def app_client():
    """App driving a session with no obstacles."""
    app = create_app(config=GameConfig(obstacles=ObstacleConfig(density=0.0), seed=0))
    return TestClient(app)


def _start_and_launch(client: TestClient) -> dict:
    snap = client.get("/api/session").json()
    lx = snap["viewport"]["launcher_x"]
    ly = snap["viewport"]["launcher_y"] - 10.0
    response = client.post(
        "/api/session/tick",
        json={
            "inputs": [
                {"kind": "primary"},
                {"kind": "gesture_begin", "x": lx + 20.0, "y": ly - 20.0},
                {"kind": "gesture_update", "x": lx + 200.0, "y": ly - 200.0},
                {"kind": "gesture_end"},
            ]
        },
    )
    assert response.status_code == 200
    return response.json()


def test_health(app_client):
    response = app_client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["state"] == "instructions"


def test_get_snapshot(app_client):
    response = app_client.get("/api/session")
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "instructions"
    assert data["score"] == 0
    assert data["obstacles"] == []


def test_input_by_name_and_by_value(app_client):
    response = app_client.post("/api/session/input", json={"kind": "primary"})
    assert response.status_code == 200
    assert response.json()["snapshot"]["state"] == "aiming"

    response = app_client.post("/api/session/input", json={"kind": 1, "x": 150.0, "y": 300.0})
    assert response.status_code == 200
    assert response.json()["snapshot"]["is_aiming"] is True


def test_gesture_without_coordinates_is_rejected(app_client):
    app_client.post("/api/session/input", json={"kind": "primary"})
    response = app_client.post("/api/session/input", json={"kind": "gesture_begin"})
    assert response.status_code == 400


def test_unknown_input_kind_is_rejected(app_client):
    response = app_client.post("/api/session/input", json={"kind": "jump"})
    assert response.status_code == 422


def test_tick_launches_and_flies(app_client):
    data = _start_and_launch(app_client)
    types = [e["type"] for e in data["events"]]
    assert types == ["reset", "launch"]
    assert data["snapshot"]["state"] == "flying"

    response = app_client.post("/api/session/tick", json={"ticks": 20})
    assert response.status_code == 200
    snap = response.json()["snapshot"]
    assert snap["score"] > 0
    assert snap["camera_x"] == pytest.approx(snap["projectile"]["x"] - 0.2 * snap["viewport"]["width"])


def test_tick_until_game_over(app_client):
    _start_and_launch(app_client)
    snap = None
    for _ in range(20):
        snap = app_client.post("/api/session/tick", json={"ticks": 500}).json()["snapshot"]
        if snap["state"] == "gameOver":
            break
    assert snap is not None and snap["state"] == "gameOver"
    assert snap["high_score"] == snap["score"] > 0


def test_tick_limit(app_client):
    response = app_client.post("/api/session/tick", json={"ticks": 100_000})
    assert response.status_code == 400
    response = app_client.post("/api/session/tick", json={"ticks": 0})
    assert response.status_code == 422


def test_reset_and_resize(app_client):
    _start_and_launch(app_client)
    response = app_client.post("/api/session/reset", json={"seed": 3, "width": 1280.0, "height": 720.0})
    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "instructions"
    assert data["viewport"]["width"] == 1280.0

    response = app_client.post("/api/session/resize", json={"width": 800.0, "height": 600.0})
    assert response.status_code == 200
    assert response.json()["viewport"]["ground_level"] == pytest.approx(510.0)

    assert app_client.post("/api/session/resize", json={"width": -1.0, "height": 600.0}).status_code == 422
    assert app_client.post("/api/session/reset", json={"width": 0.0}).status_code == 422


def test_replay(app_client):
    assert app_client.get("/api/session/replay").status_code == 404

    app_client.post("/api/session/reset", json={"seed": 1, "record_replay": True})
    app_client.post("/api/session/tick", json={"ticks": 5})
    response = app_client.get("/api/session/replay")
    assert response.status_code == 200
    data = response.json()
    assert data["seed"] == 1
    assert len(data["frames"]) == 5


@pytest.mark.parametrize(
    "path,body",
    [
        ("/api/session/resize", {"width": 1e20, "height": 600.0}),
        ("/api/session/resize", {"width": 800.0, "height": 0.0}),
        ("/api/session/resize", {"width": 800.0}),
        ("/api/session/reset", {"width": 1e20}),
        ("/api/session/reset", {"height": -5.0}),
    ],
)
def test_rejected_viewport_leaves_session_untouched(app_client, path, body):
    before = app_client.get("/api/session").json()["viewport"]
    response = app_client.post(path, json=body)
    assert response.status_code == 422
    assert app_client.get("/api/session").json()["viewport"] == before


def test_resize_beyond_float_precision_does_not_hang(app_client):
    _start_and_launch(app_client)
    response = app_client.post("/api/session/resize", json={"width": 1e20, "height": 1e20})
    assert response.status_code == 422
    # The session still ticks with its old viewport.
    response = app_client.post("/api/session/tick", json={"ticks": 3})
    assert response.status_code == 200


def test_reset_without_seed_keeps_configured_seed():
    app = create_app(config=GameConfig(obstacles=ObstacleConfig(density=0.0), seed=7, record_replay=True))
    client = TestClient(app)

    response = client.post("/api/session/reset", json={"width": 1280.0})
    assert response.status_code == 200
    assert client.get("/api/session/replay").json()["seed"] == 7

    client.post("/api/session/reset", json={"seed": 11})
    assert client.get("/api/session/replay").json()["seed"] == 11


def test_replay_covers_only_the_current_run(app_client):
    app_client.post("/api/session/reset", json={"seed": 1, "record_replay": True})
    _start_and_launch(app_client)
    for _ in range(20):
        snap = app_client.post("/api/session/tick", json={"ticks": 500}).json()["snapshot"]
        if snap["state"] == "gameOver":
            break
    assert snap["state"] == "gameOver"
    first = app_client.get("/api/session/replay").json()["frames"]

    app_client.post("/api/session/tick", json={"inputs": [{"kind": "primary"}], "ticks": 2})
    frames = app_client.get("/api/session/replay").json()["frames"]
    assert len(frames) == 2 < len(first)
    assert frames[0]["events"][0]["type"] == "reset"
