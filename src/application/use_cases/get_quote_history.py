"""
Use-case: read the accumulated quote history for a symbol.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from typing import Any

from src.application.validation import normalize_symbol
from src.domain.entities.quote_record import QuoteRecord
from src.domain.ports.history_store_port import IHistoryStore


class GetQuoteHistoryUseCase:
    def __init__(self, history: IHistoryStore) -> None:
        self._history = history

    def execute(self, symbol: Any) -> list[QuoteRecord]:
        """Return every record captured for *symbol* (case-insensitive), oldest first.

        An unknown symbol yields an empty list.

        Raises:
            ValidationError: if *symbol* is missing or not a string.
        """
        stock_symbol = normalize_symbol(
            symbol, message="Symbol query parameter is required."
        )
        return self._history.get(stock_symbol)
