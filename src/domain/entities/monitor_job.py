"""
Domain entity describing an active recurring quote fetch.
The cancellable timer behind a job is owned by the IJobRegistry adapter.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonitorJob:
    symbol: str
    interval_seconds: float
