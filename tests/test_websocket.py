"""WebSocket integration tests for live play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient

from snake_master.config import Difficulty, GameConfig
from snake_master.engine import GameEngine, Phase
from snake_master.server.app import create_app
from snake_master.server.websocket import apply_message
from snake_master.snake import Direction

# Long enough that no scheduled tick lands inside a test.
SLOW = {d: 60_000 for d in Difficulty}


@pytest.fixture()
def tc():
    """Starlette sync TestClient with the app lifespan running."""
    application = create_app(GameConfig(intervals_ms=dict(SLOW), seed=0))
    with TestClient(application) as client:
        yield client


def _frame(ws) -> dict:
    return json.loads(ws.receive_text())


class TestGameSocket:
    def test_initial_frame(self, tc):
        with tc.websocket_connect("/game/ws") as ws:
            frame = _frame(ws)
            assert frame["state"]["phase"] == "not_started"
            assert frame["scene"]["head"]["position"] == [-0.5, 0.4, -0.5]

    def test_start_action(self, tc):
        with tc.websocket_connect("/game/ws") as ws:
            _frame(ws)
            ws.send_text(json.dumps({"action": "start"}))
            assert _frame(ws)["state"]["phase"] == "running"

    def test_key_input(self, tc):
        with tc.websocket_connect("/game/ws") as ws:
            _frame(ws)
            ws.send_text(json.dumps({"action": "start"}))
            _frame(ws)
            ws.send_text(json.dumps({"key": "w"}))
            assert _frame(ws)["state"]["pending_direction"] == "UP"

    def test_malformed_messages_ignored(self, tc):
        with tc.websocket_connect("/game/ws") as ws:
            _frame(ws)
            ws.send_text("not json")
            ws.send_text(json.dumps(["start"]))
            ws.send_text(json.dumps({"action": "start"}))
            assert _frame(ws)["state"]["phase"] == "running"

    def test_rest_changes_reach_socket(self, tc):
        with tc.websocket_connect("/game/ws") as ws:
            _frame(ws)
            tc.post("/game/difficulty", json={"level": "hard"})
            assert _frame(ws)["state"]["difficulty"] == "hard"


class TestApplyMessage:
    def test_direction_message(self):
        engine = GameEngine()
        engine.start()
        assert apply_message(engine, {"direction": "Down"})
        assert engine.snapshot.pending_direction == Direction.DOWN

    def test_reverse_key_rejected(self):
        engine = GameEngine()
        engine.start()
        assert not apply_message(engine, {"key": "ArrowLeft"})

    def test_actions(self):
        engine = GameEngine()
        assert apply_message(engine, {"action": "start"})
        assert apply_message(engine, {"action": "PAUSE"})
        assert engine.phase == Phase.PAUSED
        assert apply_message(engine, {"action": "reset"})
        assert engine.phase == Phase.NOT_STARTED

    def test_unknown_messages(self):
        engine = GameEngine()
        assert not apply_message(engine, "start")
        assert not apply_message(engine, {"action": "jump"})
        assert not apply_message(engine, {"direction": 5})
        assert engine.phase == Phase.NOT_STARTED
