"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from frog_snake.server.channel import WebSocketChannel
from frog_snake.server.models import SessionStatus
from frog_snake.server.session_manager import SessionManager
from frog_snake.snake import Direction

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _parse_message(raw: str) -> dict | None:
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        return None
    return msg if isinstance(msg, dict) else None


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send directions, receive frames and score updates."""
    manager = _get_manager(websocket)
    instance = manager.get_session(session_id)
    if instance is None:
        await websocket.close(code=4004, reason="Session not found.")
        return
    if instance.status != SessionStatus.WAITING:
        await websocket.close(code=4009, reason="Session already in use.")
        return

    await websocket.accept()
    channel = WebSocketChannel(websocket)
    channel.send({
        "type": "hello",
        "session_id": session_id,
        "grid_size": instance.config.grid_size,
        "cell_size": instance.config.cell_size,
    })
    try:
        manager.attach(session_id, channel)
    except ValueError:
        await websocket.close(code=4009, reason="Session already in use.")
        return
    channel.start()
    engine = instance.engine

    try:
        while True:
            msg = _parse_message(await websocket.receive_text())
            if msg is None:
                continue

            if msg.get("action") == "restart":
                engine.request_restart()
                continue

            direction_name = msg.get("direction")
            if not isinstance(direction_name, str):
                continue
            try:
                direction = Direction.from_name(direction_name)
            except ValueError:
                logger.debug("Ignoring unknown direction %r.", direction_name)
                continue
            engine.handle_input(direction)
    except WebSocketDisconnect:
        logger.info("Player disconnected from session %s.", session_id)
    finally:
        manager.finish(instance)
        await channel.aclose()
