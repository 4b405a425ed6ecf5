"""Core load testing functionality."""

import asyncio
import aiohttp
import logging
import time
from datetime import datetime
from typing import Awaitable, Callable, List, Optional

from .executor import RequestExecutor
from .models import (
    LoadConfig,
    RequestDescriptor,
    RequestOutcome,
    ResultSet,
    SummaryStatistics,
)
from .param_loader import ParamLoader
from .planner import plan
from .summary import summarize
from .termination import StopTimer

# Number of descriptors a worker sends between stop-signal checks.
SLICE_SIZE = 10

ExecuteFn = Callable[[RequestDescriptor], Awaitable[RequestOutcome]]


class Dispatcher:
    """
    Fixed-size worker pool.

    Each worker keeps its outcomes in a private buffer; buffers are only
    merged once every worker has exited.
    """

    def __init__(
        self,
        concurrency: int,
        stop_timer: Optional[StopTimer] = None,
    ):
        self.concurrency = concurrency
        self.stop_timer = stop_timer
        self.logger = logging.getLogger(__name__)

    @property
    def is_duration_bounded(self) -> bool:
        return self.stop_timer is not None

    async def run(self, work: List[RequestDescriptor], execute: ExecuteFn) -> ResultSet:
        """Run all workers over the work source and collect their outcomes."""
        if self.is_duration_bounded and not work:
            raise ValueError("Duration-bounded runs need a non-empty work source")

        buffers: List[List[RequestOutcome]] = [[] for _ in range(self.concurrency)]

        started_at = datetime.now()
        start_time = time.perf_counter()

        if self.is_duration_bounded:
            workers = [
                self._run_until_stopped(i, work, execute, buffers[i])
                for i in range(self.concurrency)
            ]
        else:
            workers = [
                self._run_all(i, work, execute, buffers[i])
                for i in range(self.concurrency)
            ]
        await asyncio.gather(*workers)

        end_time = time.perf_counter()
        ended_at = datetime.now()

        outcomes: List[RequestOutcome] = []
        for buffer in buffers:
            outcomes.extend(buffer)

        return ResultSet(
            start_time=start_time,
            end_time=end_time,
            outcomes=outcomes,
            started_at=started_at,
            ended_at=ended_at,
        )

    async def _run_all(
        self,
        worker_id: int,
        work: List[RequestDescriptor],
        execute: ExecuteFn,
        buffer: List[RequestOutcome],
    ) -> None:
        # Every worker replays the whole work source.
        for descriptor in work:
            buffer.append(await execute(descriptor))
        self.logger.info(f"Worker {worker_id} finished {len(buffer)} requests")

    async def _run_until_stopped(
        self,
        worker_id: int,
        work: List[RequestDescriptor],
        execute: ExecuteFn,
        buffer: List[RequestOutcome],
    ) -> None:
        start = 0
        while not self.stop_timer.stop_requested:
            if start >= len(work):
                start = 0
            for descriptor in work[start:start + SLICE_SIZE]:
                buffer.append(await execute(descriptor))
            start += SLICE_SIZE
        self.logger.debug(f"Worker {worker_id} stopped after {len(buffer)} requests")


class LoadTester:
    """
    Load tester for an HTTP endpoint.

    Supports two modes:
    - Count-bounded: every worker sends the planned request list once
    - Duration-bounded: workers cycle through the list until time runs out
    """

    def __init__(
        self,
        config: LoadConfig,
        log_level: int = logging.INFO,
        tick: float = 1.0,
    ):
        self.config = config
        self.tick = tick
        self.param_loader = ParamLoader(config.file_path)
        self.work: List[RequestDescriptor] = []
        self.result_set: Optional[ResultSet] = None

        logging.basicConfig(
            level=log_level, format="%(asctime)s - %(levelname)s - %(message)s"
        )
        self.logger = logging.getLogger(__name__)

    async def run(self) -> SummaryStatistics:
        """Plan, dispatch and summarize a run based on config."""
        self.config.validate()

        lines = await self.param_loader.load()
        self.work = plan(self.config, lines)

        stop_timer = None
        if self.config.is_duration_bounded:
            stop_timer = StopTimer(self.config.duration, tick=self.tick)

        self.logger.info(f"Starting {self.config.mode}-bounded test:")
        self.logger.info(f"  {self.config.method} {self.config.url}")
        self.logger.info(f"  Concurrency: {self.config.concurrency}")
        if self.config.is_count_bounded:
            self.logger.info(
                f"  Planned requests per worker: {len(self.work)} "
                f"(total {len(self.work) * self.config.concurrency})"
            )
        else:
            self.logger.info(f"  Duration: {self.config.duration}s")

        dispatcher = Dispatcher(self.config.concurrency, stop_timer=stop_timer)

        connector = aiohttp.TCPConnector(
            limit=self.config.concurrency, limit_per_host=self.config.concurrency
        )
        async with aiohttp.ClientSession(connector=connector) as session:
            executor = RequestExecutor(session)
            if stop_timer is not None:
                stop_timer.start()
            try:
                self.result_set = await dispatcher.run(self.work, executor.execute)
            finally:
                if stop_timer is not None:
                    await stop_timer.cancel()

        self.logger.info(
            f"Test finished: {len(self.result_set)} requests in "
            f"{self.result_set.elapsed_seconds:.2f}s"
        )
        return summarize(
            self.result_set,
            mode=self.config.mode,
            concurrency=self.config.concurrency,
        )
