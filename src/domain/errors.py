"""Domain exceptions shared by every layer of the service."""

from typing import Optional


class StockMonitorError(Exception):
    """Base exception for all service-specific errors."""


class ValidationError(StockMonitorError, ValueError):
    """Raised when caller input violates a constraint. Maps to HTTP 400."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class UpstreamError(StockMonitorError):
    """Raised when the upstream quote source fails or returns unusable data."""


class ConfigError(StockMonitorError):
    """Raised when environment configuration is invalid or missing."""
