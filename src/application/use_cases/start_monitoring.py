"""
Use-case: start (or restart) periodic quote polling for a symbol.
Depends only on Domain ports and entities: no infrastructure imports.
"""

import logging
from typing import Any

from src.application.validation import MonitoringInterval, normalize_symbol
from src.domain.errors import UpstreamError
from src.domain.ports.history_store_port import IHistoryStore
from src.domain.ports.job_registry_port import IJobRegistry, Tick
from src.domain.ports.quote_provider_port import IQuoteProvider

logger = logging.getLogger(__name__)


class StartMonitoringUseCase:
    def __init__(
        self,
        provider: IQuoteProvider,
        history: IHistoryStore,
        registry: IJobRegistry,
    ) -> None:
        self._provider = provider
        self._history = history
        self._registry = registry

    def execute(self, symbol: Any, minutes: Any, seconds: Any) -> str:
        """Schedule a recurring fetch of *symbol* every minutes*60 + seconds.

        Any job already running for the symbol is replaced. Must be called
        from inside the running event loop.

        Returns:
            A confirmation message naming the normalized symbol and interval.

        Raises:
            ValidationError: if the symbol is blank or the interval is invalid.
        """
        stock_symbol = normalize_symbol(symbol)
        interval = MonitoringInterval.from_input(minutes, seconds)

        self._history.ensure(stock_symbol)
        self._registry.start(
            stock_symbol, interval.total_seconds, self._make_tick(stock_symbol)
        )
        logger.info(
            "Monitoring %s every %s (%ds)",
            stock_symbol,
            interval.describe(),
            interval.total_seconds,
        )
        return f"Started monitoring {stock_symbol} every {interval.describe()}."

    def _make_tick(self, symbol: str) -> Tick:
        async def tick() -> None:
            try:
                record = await self._provider.fetch_quote(symbol)
            except UpstreamError as exc:
                logger.warning("Error fetching stock data for %s: %s", symbol, exc)
                return
            self._history.append(symbol, record)
            logger.info("Fetched: %s", record)

        return tick
