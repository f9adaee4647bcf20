"""
Port (interface) for the per-symbol recurring job registry.
Infrastructure adapters (e.g. AsyncioJobRegistry) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from src.domain.entities.monitor_job import MonitorJob

Tick = Callable[[], Awaitable[None]]


class IJobRegistry(ABC):
    @abstractmethod
    def start(self, symbol: str, interval_seconds: float, tick: Tick) -> MonitorJob:
        """Install a recurring *tick* for *symbol*, replacing any existing job.

        Raises:
            ValidationError: if *interval_seconds* is not strictly positive.
        """
        ...

    @abstractmethod
    def get(self, symbol: str) -> Optional[MonitorJob]: ...

    @abstractmethod
    def symbols(self) -> list[str]: ...

    @abstractmethod
    async def shutdown(self) -> None:
        """Cancel every running job. Used when the process is stopping."""
        ...
