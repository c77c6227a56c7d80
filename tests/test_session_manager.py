"""Tests for the in-memory session registry."""

from __future__ import annotations

import pytest

from frog_snake.config import GameConfig
from frog_snake.server.models import SessionStatus
from frog_snake.server.session_manager import SessionManager


class FakeChannel:
    """Stands in for a WebSocketChannel without a socket."""

    def __init__(self):
        self.messages = []
        self.closed = False

    def render(self, snapshot):
        self.messages.append(("frame", snapshot))

    def update_score(self, score):
        self.messages.append(("score", score))

    def show_game_over(self):
        self.messages.append(("game_over", True))

    def hide_game_over(self):
        self.messages.append(("game_over", False))

    async def aclose(self):
        self.closed = True


class TestSessionManagerInit:
    def test_invalid_bound(self):
        with pytest.raises(ValueError, match=">= 0"):
            SessionManager(max_finished_sessions=-1)


class TestCreateAndList:
    def test_create(self):
        manager = SessionManager()
        instance = manager.create_session(GameConfig(grid_size=8), seed=3)
        assert instance.status == SessionStatus.WAITING
        assert manager.get_session(instance.session_id) is instance
        assert instance.engine.config.grid_size == 8

    def test_list_excludes_finished(self):
        manager = SessionManager()
        a = manager.create_session()
        b = manager.create_session()
        manager.finish(a)
        ids = [s.session_id for s in manager.list_sessions()]
        assert ids == [b.session_id]


class TestAttach:
    @pytest.mark.asyncio
    async def test_attach_starts_game(self):
        manager = SessionManager()
        instance = manager.create_session()
        channel = FakeChannel()
        manager.attach(instance.session_id, channel)
        assert instance.status == SessionStatus.ACTIVE
        assert instance.engine.scheduler.running
        assert channel.messages[0] == ("game_over", False)
        assert channel.messages[-1][0] == "frame"
        await manager.cleanup()
        assert not instance.engine.scheduler.running
        assert channel.closed

    def test_attach_unknown(self):
        with pytest.raises(KeyError):
            SessionManager().attach("missing", FakeChannel())

    @pytest.mark.asyncio
    async def test_attach_twice(self):
        manager = SessionManager()
        instance = manager.create_session()
        manager.attach(instance.session_id, FakeChannel())
        with pytest.raises(ValueError, match="already"):
            manager.attach(instance.session_id, FakeChannel())
        await manager.cleanup()


class TestFinish:
    @pytest.mark.asyncio
    async def test_finish_stops_ticking(self):
        manager = SessionManager()
        instance = manager.create_session()
        manager.attach(instance.session_id, FakeChannel())
        manager.finish(instance)
        assert instance.status == SessionStatus.FINISHED
        assert instance.finished_at is not None
        assert not instance.engine.scheduler.running

    def test_prunes_oldest_finished(self):
        manager = SessionManager(max_finished_sessions=1)
        first = manager.create_session()
        second = manager.create_session()
        manager.finish(first)
        manager.finish(second)
        assert manager.get_session(first.session_id) is None
        assert manager.get_session(second.session_id) is second
