"""Tests for the JSON API: board RLE, state polling, control endpoints."""

import sys
import os

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rogueboard.api.app import create_app
from rogueboard.api.routes.board import rle_encode
from rogueboard.config import GameConfig
from rogueboard.core.level_config import LEVEL_PHASES


@pytest.fixture()
def client():
    app = create_app(GameConfig(realtime_clock=False, log_level="WARNING"))
    with TestClient(app) as c:
        yield c


def _rle_total(rle):
    return sum(rle[1::2])


class TestRLE:
    def test_runs(self):
        assert rle_encode([1, 1, 1, 0, 0, 2]) == [1, 3, 0, 2, 2, 1]

    def test_empty(self):
        assert rle_encode([]) == []


class TestReadEndpoints:
    def test_state_after_startup(self, client):
        resp = client.get("/api/v1/state")
        assert resp.status_code == 200
        data = resp.json()
        assert data["level"] == 1
        assert data["food"] == 20
        assert data["turn"] == 1
        assert data["game_over"] is False
        assert (data["player"]["x"], data["player"]["y"]) == (1, 1)
        assert data["player"]["world_x"] == pytest.approx(1.5)
        assert data["enemies"] == []
        assert data["events_dropped"] == 0
        assert any(e["category"] == "game" for e in data["events"])

    def test_board_covers_every_cell(self, client):
        data = client.get("/api/v1/board").json()
        assert (data["width"], data["height"]) == (8, 8)
        assert _rle_total(data["tiles"]) == 64
        assert _rle_total(data["variants"]) == 64
        kinds = [o["kind"] for o in data["occupants"]]
        assert kinds.count("exit") == 1
        assert {"x": 1, "y": 1} not in [{"x": o["x"], "y": o["y"]} for o in data["occupants"]]

    def test_config_lists_phases(self, client):
        data = client.get("/api/v1/config").json()
        assert data["starting_food"] == 20
        assert data["realtime_clock"] is False
        assert len(data["phases"]) == len(LEVEL_PHASES)
        assert [p["first_level"] for p in data["phases"]] == [first for first, _ in LEVEL_PHASES]


class TestControlEndpoints:
    def test_wait_advances_turn(self, client):
        data = client.post("/api/v1/control/wait").json()
        assert data["outcome"] == "waited"
        assert data["turn"] == 2
        assert data["food"] == 19

    def test_move_blocked_by_perimeter(self, client):
        data = client.post("/api/v1/control/move/left").json()
        assert data["outcome"] == "blocked"
        assert data["turn"] == 1
        assert (data["player_x"], data["player_y"]) == (1, 1)

    def test_move_reports_outcome(self, client):
        data = client.post("/api/v1/control/move/up").json()
        assert data["outcome"] in ("moved", "attacked", "entered_hazard")
        if data["outcome"] == "attacked":
            client.post("/api/v1/control/advance", params={"seconds": 1.0})
        state = client.get("/api/v1/state").json()
        assert state["turn"] == 2
        assert state["player"]["attacking"] is False

    def test_bad_direction_rejected(self, client):
        assert client.post("/api/v1/control/move/sideways").status_code == 422

    def test_advance_bounds(self, client):
        assert client.post("/api/v1/control/advance", params={"seconds": 0}).status_code == 422
        assert client.post("/api/v1/control/advance", params={"seconds": 11}).status_code == 422
        resp = client.post("/api/v1/control/advance", params={"seconds": 0.5})
        assert resp.status_code == 200
        assert resp.json()["message"] == "Clock advanced."

    def test_new_game_resets(self, client):
        client.post("/api/v1/control/wait")
        client.post("/api/v1/control/wait")
        resp = client.post("/api/v1/control/new-game")
        assert resp.status_code == 200
        assert resp.json()["turn"] == 1
        state = client.get("/api/v1/state").json()
        assert state["food"] == 20
        assert [e["category"] for e in state["events"]] == ["game"]
