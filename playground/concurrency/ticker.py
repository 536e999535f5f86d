"""Periodic task that can be cancelled deterministically."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable

from playground.logging_config import logger


class PeriodicTask:
    """Call ``callback`` every ``interval_s`` seconds on the running event loop.

    The first call happens one interval after ``start()``. When ``max_ticks``
    is set the task finishes by itself after that many calls. ``stop()``
    cancels and awaits the task, so no callback runs once it returns.
    """

    def __init__(
        self,
        callback: Callable[[int], Awaitable[None] | None],
        interval_s: float,
        max_ticks: int | None = None,
    ):
        if interval_s < 0:
            raise ValueError("interval_s must be >= 0")
        if max_ticks is not None and max_ticks < 0:
            raise ValueError("max_ticks must be >= 0")
        self.callback = callback
        self.interval_s = interval_s
        self.max_ticks = max_ticks
        self.ticks = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError("PeriodicTask already started")
        self._task = asyncio.create_task(self._run())

    async def wait(self) -> None:
        """Wait until the task finishes on its own (requires ``max_ticks``)."""
        if self._task is None:
            raise RuntimeError("PeriodicTask not started")
        await asyncio.shield(self._task)

    async def stop(self) -> None:
        if self._task is None or self._task.done():
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        logger.debug("PERIODIC_TASK_STOPPED", ticks=self.ticks)

    async def _run(self) -> None:
        while self.max_ticks is None or self.ticks < self.max_ticks:
            await asyncio.sleep(self.interval_s)
            self.ticks += 1
            result = self.callback(self.ticks)
            if inspect.isawaitable(result):
                await result

    async def __aenter__(self) -> "PeriodicTask":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
