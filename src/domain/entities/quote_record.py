"""
Domain entities for captured stock quotes.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class QuoteRecord:
    """One quote snapshot as returned by the upstream provider.

    Price fields are passed through from the upstream and are None when the
    upstream omits them. *timestamp* is the capture instant (UTC), not the
    upstream's own quote time.
    """

    symbol: str
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]
    current: Optional[float]
    previous_close: Optional[float]
    timestamp: datetime
