"""Stop signalling for duration-bounded runs."""

import asyncio
import logging
from typing import Optional


class StopTimer:
    """
    Background ticker that raises a stop signal after a number of ticks.

    The timer is the only writer of the signal; workers only read it
    between slices of work.
    """

    def __init__(self, duration: int, tick: float = 1.0):
        self.duration = duration
        self.tick = tick
        self.elapsed = 0
        self.stop_event = asyncio.Event()
        self._task: Optional[asyncio.Task] = None
        self.logger = logging.getLogger(__name__)

    @property
    def stop_requested(self) -> bool:
        return self.stop_event.is_set()

    def start(self) -> asyncio.Task:
        """Launch the ticker on the running event loop."""
        self._task = asyncio.create_task(self._run())
        return self._task

    async def _run(self) -> None:
        # Tick n is due at origin + n * tick.
        loop = asyncio.get_running_loop()
        origin = loop.time()
        while True:
            next_tick = origin + (self.elapsed + 1) * self.tick
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            self.elapsed += 1
            if self.elapsed >= self.duration:
                self.logger.info(f"Duration of {self.duration}s reached, stopping workers")
                self.stop_event.set()
                break

    async def cancel(self) -> None:
        """Tear down the ticker if it is still running."""
        if self._task is None or self._task.done():
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
