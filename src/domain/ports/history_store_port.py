"""
Port (interface) for quote history stores.
Infrastructure adapters (e.g. InMemoryHistoryStore) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.quote_record import QuoteRecord


class IHistoryStore(ABC):
    @abstractmethod
    def append(self, symbol: str, record: QuoteRecord) -> None: ...

    @abstractmethod
    def get(self, symbol: str) -> list[QuoteRecord]:
        """Return the records for *symbol* in fetch order; empty if unknown."""
        ...

    @abstractmethod
    def ensure(self, symbol: str) -> None:
        """Create an empty history for *symbol* if none exists yet."""
        ...
