"""WebSocket-backed renderer and score sink."""

from __future__ import annotations

import asyncio
import json
import logging

from starlette.websockets import WebSocket, WebSocketState

from frog_snake.session import Snapshot

logger = logging.getLogger(__name__)


class WebSocketChannel:
    """Pushes engine output to a browser as JSON messages.

    The engine calls :meth:`render` and the score-sink methods
    synchronously from its tick; messages are queued and a pump task sends
    them in order, so the engine never awaits on the socket.
    """

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket
        self._queue: asyncio.Queue[dict] = asyncio.Queue()
        self._task: asyncio.Task | None = None
        self.closed = False

    # Renderer
    def render(self, snapshot: Snapshot) -> None:
        self.send({"type": "frame", **snapshot.to_dict()})

    # ScoreSink
    def update_score(self, score: int) -> None:
        self.send({"type": "score", "score": score})

    def show_game_over(self) -> None:
        self.send({"type": "game_over", "visible": True})

    def hide_game_over(self) -> None:
        self.send({"type": "game_over", "visible": False})

    def send(self, message: dict) -> None:
        """Queue *message* for delivery; dropped once the channel is closed."""
        if not self.closed:
            self._queue.put_nowait(message)

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self._pump())

    async def aclose(self) -> None:
        """Stop the pump task and discard undelivered messages."""
        self.closed = True
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

    async def _pump(self) -> None:
        try:
            while True:
                message = await self._queue.get()
                if self.websocket.client_state != WebSocketState.CONNECTED:
                    break
                await self.websocket.send_text(json.dumps(message, separators=(",", ":")))
        except asyncio.CancelledError:
            logger.debug("Channel pump cancelled.")
        except Exception:
            logger.warning("Failed sending to client socket; closing channel.")
        finally:
            self.closed = True
