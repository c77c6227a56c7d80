"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from frog_snake.server.app import create_app
from frog_snake.server.session_manager import SessionManager


@pytest.fixture()
def tc():
    """Starlette sync TestClient sharing one manager across requests."""
    application = create_app()
    application.state.session_manager = SessionManager()
    return TestClient(application)


def _create_session(tc, **config):
    resp = tc.post("/sessions", json=config)
    assert resp.status_code == 201
    return resp.json()["session_id"]


def _receive(ws):
    return json.loads(ws.receive_text())


def _receive_until(ws, message_type, limit=50):
    for _ in range(limit):
        msg = _receive(ws)
        if msg["type"] == message_type:
            return msg
    raise AssertionError(f"No {message_type!r} message received.")


class TestPlayWebSocket:
    def test_opening_messages(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=1000, seed=1)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            hello = _receive(ws)
            assert hello == {
                "type": "hello",
                "session_id": session_id,
                "grid_size": 20,
                "cell_size": 20,
            }
            assert _receive(ws) == {"type": "game_over", "visible": False}
            assert _receive(ws) == {"type": "score", "score": 0}
            frame = _receive(ws)
            assert frame["type"] == "frame"
            assert frame["snake"] == [[10, 10]]
            assert frame["food"] not in frame["snake"]
            assert frame["game_over"] is False

    def test_frames_keep_arriving(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=50)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            _receive_until(ws, "frame")
            frame = _receive_until(ws, "frame")
            assert frame["tick"] >= 1

    def test_direction_changes_heading(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=300)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            _receive_until(ws, "frame")
            ws.send_text(json.dumps({"direction": "left"}))
            frame = _receive_until(ws, "frame")
            head_x, head_y = frame["snake"][0]
            assert (head_x, head_y) == (9, 10)

    def test_game_over_then_restart(self, tc):
        session_id = _create_session(
            tc, grid_size=4, initial_tick_interval_ms=50, min_tick_interval_ms=20,
        )

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            assert _receive_until(ws, "game_over", limit=100)["visible"] is False
            assert _receive_until(ws, "game_over", limit=100)["visible"] is True
            ws.send_text(json.dumps({"direction": "right"}))
            assert _receive_until(ws, "game_over")["visible"] is False
            assert _receive_until(ws, "score")["score"] == 0

    def test_malformed_messages_ignored(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=50)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            _receive_until(ws, "frame")
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"direction": "sideways"}))
            ws.send_text(json.dumps({"direction": 3}))
            ws.send_text(json.dumps({"action": "restart"}))
            assert _receive_until(ws, "frame")["type"] == "frame"

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ):
            pass

    def test_second_player_rejected(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=1000)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            _receive_until(ws, "frame")
            with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
                f"/sessions/{session_id}/play",
            ):
                pass


class TestDisconnectHandling:
    def test_disconnect_finishes_session(self, tc):
        session_id = _create_session(tc, initial_tick_interval_ms=1000)

        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            _receive_until(ws, "frame")
            assert tc.get(f"/sessions/{session_id}").json()["status"] == "active"

        instance = tc.app.state.session_manager.get_session(session_id)
        assert instance.status.value == "finished"
        assert not instance.engine.scheduler.running
        assert tc.get("/sessions").json() == []
