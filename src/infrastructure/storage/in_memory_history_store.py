"""
Infrastructure adapter: process-memory dict of lists → IHistoryStore.
History is unbounded and lives for the process lifetime. Appends are not
locked; every caller runs on the single asyncio event loop.
"""

from src.domain.entities.quote_record import QuoteRecord
from src.domain.ports.history_store_port import IHistoryStore


class InMemoryHistoryStore(IHistoryStore):
    def __init__(self) -> None:
        self._records: dict[str, list[QuoteRecord]] = {}

    def append(self, symbol: str, record: QuoteRecord) -> None:
        self._records.setdefault(symbol, []).append(record)

    def get(self, symbol: str) -> list[QuoteRecord]:
        return list(self._records.get(symbol, ()))

    def ensure(self, symbol: str) -> None:
        self._records.setdefault(symbol, [])
