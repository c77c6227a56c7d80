"""REST API route handlers for session lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from frog_snake.config import GameConfig
from frog_snake.server.models import CreateSessionRequest, SessionSummary
from frog_snake.server.session_manager import SessionManager

router = APIRouter(tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.get("/config")
async def default_config() -> dict:
    """Return the default game configuration."""
    return GameConfig().to_dict()


@router.post("/sessions", status_code=201)
async def create_session(body: CreateSessionRequest, request: Request) -> SessionSummary:
    """Create a new session waiting for a player connection."""
    manager = _get_manager(request)
    overrides = body.model_dump(exclude={"seed"})
    try:
        config = GameConfig().replace(**overrides)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    instance = manager.create_session(config, seed=body.seed)
    return instance.summary()


@router.get("/sessions")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List waiting and active sessions."""
    return _get_manager(request).list_sessions()


@router.get("/sessions/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and current game state."""
    instance = _get_manager(request).get_session(session_id)
    if instance is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return {
        "session_id": instance.session_id,
        "status": instance.status.value,
        "config": instance.config.to_dict(),
        "state": instance.engine.get_state(),
    }
