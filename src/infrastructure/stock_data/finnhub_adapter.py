"""
Infrastructure adapter: Finnhub REST quote endpoint → IQuoteProvider.
All Finnhub-specific details (URL, token parameter, single-letter field names)
are confined here; the rest of the codebase depends only on IQuoteProvider.

Finnhub /quote fields: o = open, h = high, l = low, c = current,
pc = previous close.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from src.domain.entities.quote_record import QuoteRecord
from src.domain.errors import UpstreamError
from src.domain.ports.quote_provider_port import IQuoteProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"


class FinnhubQuoteProvider(IQuoteProvider):
    """Fetches real-time quotes from Finnhub over a shared async HTTP client."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            api_key:  Finnhub API token, sent as the ``token`` query parameter.
            base_url: API root; the quote endpoint is ``{base_url}/quote``.
            timeout:  Per-request timeout in seconds.
            client:   Optional pre-built AsyncClient (tests inject one backed
                      by httpx.MockTransport).
        """
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    async def fetch_quote(self, symbol: str) -> QuoteRecord:
        try:
            response = await self._client.get(
                "/quote", params={"symbol": symbol, "token": self._api_key}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(
                f"Upstream returned status {exc.response.status_code} for {symbol!r}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"Request for {symbol!r} failed: {exc.__class__.__name__}: {exc}"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Upstream returned invalid JSON for {symbol!r}") from exc
        if not isinstance(data, dict):
            raise UpstreamError(
                f"Upstream returned an unexpected payload for {symbol!r}: "
                f"{type(data).__name__}"
            )

        return QuoteRecord(
            symbol=symbol,
            open=_as_price(data, "o"),
            high=_as_price(data, "h"),
            low=_as_price(data, "l"),
            current=_as_price(data, "c"),
            previous_close=_as_price(data, "pc"),
            timestamp=datetime.now(timezone.utc),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()


def _as_price(data: dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UpstreamError(f"Upstream field {key!r} is not numeric: {value!r}")
    return float(value)
