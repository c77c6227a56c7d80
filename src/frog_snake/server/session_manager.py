"""In-memory session registry and lifecycle management."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

from frog_snake.config import GameConfig
from frog_snake.engine import GameEngine
from frog_snake.server.channel import WebSocketChannel
from frog_snake.server.models import SessionStatus, SessionSummary

logger = logging.getLogger(__name__)

_MAX_FINISHED_SESSIONS = 100


@dataclass
class SessionInstance:
    """All state for a single hosted game."""

    session_id: str
    config: GameConfig
    engine: GameEngine
    status: SessionStatus = SessionStatus.WAITING
    channel: WebSocketChannel | None = None
    created_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            status=self.status,
            grid_size=self.config.grid_size,
            cell_size=self.config.cell_size,
            tick_interval_ms=self.engine.session.tick_interval_ms,
            score=self.engine.session.score,
        )


class SessionManager:
    """Central registry of hosted single-player sessions.

    A session is created over REST, then played by exactly one WebSocket
    connection. The connection attaches a :class:`WebSocketChannel` as the
    engine's renderer and score sink and starts the game; dropping the
    connection stops the tick driver and finishes the session.
    """

    def __init__(self, max_finished_sessions: int = _MAX_FINISHED_SESSIONS) -> None:
        if max_finished_sessions < 0:
            raise ValueError("max_finished_sessions must be >= 0.")
        self._sessions: dict[str, SessionInstance] = {}
        self._max_finished_sessions = max_finished_sessions

    def create_session(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> SessionInstance:
        """Register a new session; the game starts when a player attaches."""
        config = config if config is not None else GameConfig()
        session_id = uuid.uuid4().hex[:12]
        instance = SessionInstance(
            session_id=session_id,
            config=config,
            engine=GameEngine(config, seed=seed),
        )
        self._sessions[session_id] = instance
        logger.info("Session %s created (grid=%d).", session_id, config.grid_size)
        return instance

    def get_session(self, session_id: str) -> SessionInstance | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        """Return summaries of non-finished sessions."""
        return [
            s.summary() for s in self._sessions.values()
            if s.status != SessionStatus.FINISHED
        ]

    def attach(self, session_id: str, channel: WebSocketChannel) -> SessionInstance:
        """Bind a player channel to a waiting session and start the game."""
        instance = self._sessions.get(session_id)
        if instance is None:
            raise KeyError(f"Session {session_id} not found.")
        if instance.status != SessionStatus.WAITING:
            raise ValueError("Session already has a player.")

        instance.channel = channel
        instance.engine.renderer = channel
        instance.engine.score_sink = channel
        instance.engine.start()
        instance.status = SessionStatus.ACTIVE
        logger.info("Session %s started.", session_id)
        return instance

    def finish(self, instance: SessionInstance) -> None:
        """Stop ticking and mark the session finished exactly once."""
        instance.engine.stop()
        if instance.status != SessionStatus.FINISHED:
            instance.status = SessionStatus.FINISHED
            instance.finished_at = time.monotonic()
            logger.info(
                "Session %s finished with score %d.",
                instance.session_id, instance.engine.session.score,
            )
        self._prune_finished_sessions()

    def _prune_finished_sessions(self) -> None:
        """Bound retained finished sessions to avoid unbounded registry growth."""
        finished = [
            s for s in self._sessions.values() if s.status == SessionStatus.FINISHED
        ]
        overflow = len(finished) - self._max_finished_sessions
        if overflow <= 0:
            return

        finished.sort(
            key=lambda s: s.finished_at if s.finished_at is not None else s.created_at,
        )
        for stale in finished[:overflow]:
            self._sessions.pop(stale.session_id, None)
        logger.info(
            "Pruned %d finished sessions (retaining up to %d).",
            overflow,
            self._max_finished_sessions,
        )

    async def cleanup(self) -> None:
        """Stop every tick driver and close every player channel."""
        for instance in self._sessions.values():
            instance.engine.stop()
            if instance.channel is not None:
                await instance.channel.aclose()
        logger.info("SessionManager cleanup complete.")
