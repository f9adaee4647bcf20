"""
FastAPI entry point and Composition Root.

create_app() wires the infrastructure adapters (Finnhub provider, in-memory
history store, asyncio job registry) into the application use cases and
exposes them over HTTP. Collaborators can be injected, which is how the tests
run the API against a fake provider.

Run locally:
    python -m src.infrastructure.entrypoints.fastapi_app
    uvicorn src.infrastructure.entrypoints.fastapi_app:create_app --factory --port 3000
"""

import dataclasses
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Optional

import uvicorn
from fastapi import Body, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from src.application.use_cases.get_quote_history import GetQuoteHistoryUseCase
from src.application.use_cases.refresh_quote import RefreshQuoteUseCase
from src.application.use_cases.start_monitoring import StartMonitoringUseCase
from src.domain.entities.quote_record import QuoteRecord
from src.domain.errors import UpstreamError, ValidationError
from src.domain.ports.history_store_port import IHistoryStore
from src.domain.ports.job_registry_port import IJobRegistry
from src.domain.ports.quote_provider_port import IQuoteProvider
from src.infrastructure.config.settings import Settings
from src.infrastructure.logging_config import setup_logging
from src.infrastructure.scheduling.asyncio_job_registry import AsyncioJobRegistry
from src.infrastructure.stock_data.finnhub_adapter import FinnhubQuoteProvider
from src.infrastructure.storage.in_memory_history_store import InMemoryHistoryStore

logger = logging.getLogger(__name__)


class QuoteRecordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    open: Optional[float]
    high: Optional[float]
    low: Optional[float]
    current: Optional[float]
    previous_close: Optional[float] = Field(alias="previousClose")
    timestamp: datetime

    @classmethod
    def from_entity(cls, record: QuoteRecord) -> "QuoteRecordResponse":
        return cls(**dataclasses.asdict(record))


class MessageResponse(BaseModel):
    message: str


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[IQuoteProvider] = None,
    history: Optional[IHistoryStore] = None,
    registry: Optional[IJobRegistry] = None,
) -> FastAPI:
    """Build the FastAPI application with its dependencies wired once.

    Args:
        settings: Runtime settings. Loaded from the environment when omitted and
                  a provider has to be constructed.
        provider: IQuoteProvider implementation. Defaults to FinnhubQuoteProvider.
        history:  IHistoryStore implementation. Defaults to InMemoryHistoryStore.
        registry: IJobRegistry implementation. Defaults to AsyncioJobRegistry.
    """
    owned_provider: Optional[FinnhubQuoteProvider] = None
    if provider is None:
        settings = settings or Settings.from_env()
        setup_logging(settings.log_level)
        owned_provider = FinnhubQuoteProvider(
            api_key=settings.finnhub_api_key,
            base_url=settings.finnhub_base_url,
            timeout=settings.finnhub_timeout_seconds,
        )
        provider = owned_provider

    history = history or InMemoryHistoryStore()
    registry = registry or AsyncioJobRegistry()

    start_uc = StartMonitoringUseCase(provider, history, registry)
    history_uc = GetQuoteHistoryUseCase(history)
    refresh_uc = RefreshQuoteUseCase(provider, history)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await registry.shutdown()
        if owned_provider is not None:
            await owned_provider.aclose()

    app = FastAPI(title="Stock Monitor API", lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        first = next(iter(exc.errors()), {})
        if tuple(first.get("loc", ()))[:1] == ("body",):
            message = "Request body must be a JSON object."
        else:
            message = first.get("msg", "Invalid request.")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError):
        logger.error("Upstream failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch stock data.", "details": str(exc)},
        )

    @app.post("/start-monitoring", response_model=MessageResponse)
    async def start_monitoring(body: Optional[dict[str, Any]] = Body(default=None)):
        """Start (or restart) polling a symbol every minutes*60 + seconds."""
        body = body or {}
        message = start_uc.execute(
            body.get("symbol"), body.get("minutes"), body.get("seconds")
        )
        return MessageResponse(message=message)

    @app.get("/history", response_model=list[QuoteRecordResponse])
    async def get_history(symbol: Optional[str] = Query(default=None)):
        """Return every quote captured for *symbol*, oldest first."""
        return [QuoteRecordResponse.from_entity(r) for r in history_uc.execute(symbol)]

    @app.post("/refresh", response_model=QuoteRecordResponse)
    async def refresh(body: Optional[dict[str, Any]] = Body(default=None)):
        """Fetch a quote immediately, record it, and return it."""
        record = await refresh_uc.execute((body or {}).get("symbol"))
        return QuoteRecordResponse.from_entity(record)

    @app.get("/health")
    async def health():
        return {"status": "ok", "monitored_symbols": registry.symbols()}

    return app


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings=settings)
    logger.info("Stock Monitor API running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
