"""Periodic tick drivers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class AsyncioTickScheduler:
    """Runs a callback every ``interval_ms`` on the running event loop.

    Only one driver task exists at a time: :meth:`start` and :meth:`restart`
    cancel the previous task before creating the next one. Stopping from
    inside the callback is allowed; the old task ends at its next await.
    """

    def __init__(self) -> None:
        self._task: asyncio.Task | None = None
        self._callback: Callable[[], object] | None = None
        self.interval_ms: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_ms: int, callback: Callable[[], object]) -> None:
        """Cancel any current driver and start ticking at *interval_ms*."""
        if interval_ms < 1:
            raise ValueError("interval_ms must be at least 1.")
        self.stop()
        self._callback = callback
        self.interval_ms = interval_ms
        self._task = asyncio.get_running_loop().create_task(
            self._run(interval_ms / 1000.0, callback),
        )
        logger.debug("Tick driver started at %d ms.", interval_ms)

    def restart(self, interval_ms: int) -> None:
        """Replace the current driver with one ticking at *interval_ms*."""
        if self._callback is None:
            raise RuntimeError("restart() called before start().")
        self.start(interval_ms, self._callback)

    def stop(self) -> None:
        """Cancel the current driver, if any."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def aclose(self) -> None:
        """Cancel the driver and wait for its task to finish."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _run(self, interval: float, callback: Callable[[], object]) -> None:
        try:
            while True:
                await asyncio.sleep(interval)
                callback()
        except asyncio.CancelledError:
            logger.debug("Tick driver cancelled.")
        except Exception:
            logger.exception("Tick callback failed; stopping driver.")
            if self._task is asyncio.current_task():
                self._task = None


class ManualTickScheduler:
    """Scheduler driven by explicit :meth:`advance` calls.

    Records every start/restart/stop so callers can inspect how the engine
    drove it. Used by the headless simulator and tests.
    """

    def __init__(self) -> None:
        self._callback: Callable[[], object] | None = None
        self._running = False
        self.interval_ms: int | None = None
        self.history: list[tuple[str, int | None]] = []

    @property
    def running(self) -> bool:
        return self._running

    def start(self, interval_ms: int, callback: Callable[[], object]) -> None:
        if self._running:
            self.stop()
        self._callback = callback
        self.interval_ms = interval_ms
        self._running = True
        self.history.append(("start", interval_ms))

    def restart(self, interval_ms: int) -> None:
        if self._callback is None:
            raise RuntimeError("restart() called before start().")
        self.stop()
        self.interval_ms = interval_ms
        self._running = True
        self.history.append(("restart", interval_ms))

    def stop(self) -> None:
        if self._running:
            self._running = False
            self.history.append(("stop", None))

    def advance(self, ticks: int = 1) -> int:
        """Fire the callback up to *ticks* times; return how many fired."""
        fired = 0
        for _ in range(ticks):
            if not self._running or self._callback is None:
                break
            self._callback()
            fired += 1
        return fired
