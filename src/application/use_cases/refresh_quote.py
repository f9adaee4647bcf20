"""
Use-case: fetch a quote immediately and record it in the history.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from typing import Any

from src.application.validation import normalize_symbol
from src.domain.entities.quote_record import QuoteRecord
from src.domain.ports.history_store_port import IHistoryStore
from src.domain.ports.quote_provider_port import IQuoteProvider


class RefreshQuoteUseCase:
    def __init__(self, provider: IQuoteProvider, history: IHistoryStore) -> None:
        self._provider = provider
        self._history = history

    async def execute(self, symbol: Any) -> QuoteRecord:
        """Fetch the current quote for *symbol* (uppercased) and append it.

        Raises:
            ValidationError: if *symbol* is blank.
            UpstreamError: if the provider call fails; nothing is appended.
        """
        stock_symbol = normalize_symbol(symbol)
        record = await self._provider.fetch_quote(stock_symbol)
        self._history.append(stock_symbol, record)
        return record
