from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .dispatcher import Dispatcher


class PollingLoop:
    """Fires ``Dispatcher.run_cycle`` every ``interval_sec`` seconds.

    Ticks are not delayed by slow cycles; a tick that arrives while a cycle is
    still running is dropped.
    """

    def __init__(self, dispatcher: Dispatcher, interval_sec: float = 60.0):
        self.dispatcher = dispatcher
        if interval_sec <= 0:
            raise ValueError(f"interval_sec must be > 0, got {interval_sec}")
        self.interval = float(interval_sec)
        self._task: Optional[asyncio.Task] = None
        self._current: Optional[asyncio.Task] = None
        self._log = logging.getLogger(__name__)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        if not self.running:
            self._task = asyncio.get_running_loop().create_task(self._run())
            self._log.info("Polling every %.0fs", self.interval)
        return self._task  # type: ignore[return-value]

    async def stop(self) -> None:
        for t in (self._task, self._current):
            if t is not None and not t.done():
                t.cancel()
        for t in (self._task, self._current):
            if t is not None:
                try:
                    await t
                except asyncio.CancelledError:
                    pass
        self._task = None
        self._current = None

    def tick(self) -> Optional[asyncio.Task]:
        if self._current is not None and not self._current.done():
            self._log.warning("Cycle still in progress; skipping this tick")
            return None
        self._current = asyncio.get_running_loop().create_task(self._guarded_cycle())
        return self._current

    async def _guarded_cycle(self) -> None:
        try:
            report = await self.dispatcher.run_cycle()
            self._log.debug("Cycle finished: %s", report.outcome.value)
        except asyncio.CancelledError:
            raise
        except Exception:
            self._log.exception("Unexpected error in poll cycle")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_at = loop.time() + self.interval
        while True:
            await asyncio.sleep(max(0.0, next_at - loop.time()))
            next_at += self.interval
            if next_at < loop.time():
                # fell behind (e.g. suspended); resume the cadence from now
                next_at = loop.time() + self.interval
            self.tick()
