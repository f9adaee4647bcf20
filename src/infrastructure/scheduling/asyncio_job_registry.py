"""
Infrastructure adapter: asyncio tasks → IJobRegistry.

Each monitored symbol owns one timer task that fires at a fixed rate
(start + n * interval) and launches every tick as its own task, so a slow
fetch delays only its own append. Replacing a job cancels the old timer
before the new one is created, inside one synchronous call: the old timer
can never fire again, while a tick it already launched still runs to
completion.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from src.domain.entities.monitor_job import MonitorJob
from src.domain.errors import ValidationError
from src.domain.ports.job_registry_port import IJobRegistry, Tick

logger = logging.getLogger(__name__)


@dataclass
class _ScheduledJob:
    job: MonitorJob
    timer: asyncio.Task


class AsyncioJobRegistry(IJobRegistry):
    """Keeps at most one recurring asyncio timer per symbol."""

    def __init__(self) -> None:
        self._jobs: dict[str, _ScheduledJob] = {}
        self._ticks: set[asyncio.Task] = set()

    def start(self, symbol: str, interval_seconds: float, tick: Tick) -> MonitorJob:
        if interval_seconds <= 0:
            raise ValidationError(
                "Refresh interval must be greater than 0 seconds.", field="interval"
            )

        loop = asyncio.get_running_loop()
        previous = self._jobs.pop(symbol, None)
        if previous is not None:
            previous.timer.cancel()
            logger.info(
                "Replacing %s job (every %ss)", symbol, previous.job.interval_seconds
            )

        job = MonitorJob(symbol=symbol, interval_seconds=interval_seconds)
        timer = loop.create_task(
            self._run(symbol, interval_seconds, tick), name=f"monitor:{symbol}"
        )
        self._jobs[symbol] = _ScheduledJob(job=job, timer=timer)
        return job

    def get(self, symbol: str) -> Optional[MonitorJob]:
        scheduled = self._jobs.get(symbol)
        return scheduled.job if scheduled else None

    def symbols(self) -> list[str]:
        return sorted(self._jobs)

    async def shutdown(self) -> None:
        tasks = [scheduled.timer for scheduled in self._jobs.values()]
        tasks.extend(self._ticks)
        self._jobs.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            logger.info("Stopped %d monitoring task(s)", len(tasks))

    async def _run(self, symbol: str, interval_seconds: float, tick: Tick) -> None:
        loop = asyncio.get_running_loop()
        next_at = loop.time() + interval_seconds
        while True:
            await asyncio.sleep(max(0.0, next_at - loop.time()))
            next_at += interval_seconds
            task = loop.create_task(
                self._run_tick(symbol, tick), name=f"monitor-tick:{symbol}"
            )
            self._ticks.add(task)
            task.add_done_callback(self._ticks.discard)

    @staticmethod
    async def _run_tick(symbol: str, tick: Tick) -> None:
        try:
            await tick()
        except Exception:
            logger.exception("Monitoring tick for %s failed", symbol)
