"""
Port (interface) for quote providers.
Infrastructure adapters (e.g. FinnhubQuoteProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.quote_record import QuoteRecord


class IQuoteProvider(ABC):
    @abstractmethod
    async def fetch_quote(self, symbol: str) -> QuoteRecord:
        """Fetch the latest quote for an already-normalized *symbol*.

        Raises:
            UpstreamError: on transport failure, timeout, non-success status,
                           or an unreadable payload.
        """
        ...
