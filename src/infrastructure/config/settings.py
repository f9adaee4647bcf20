"""Environment-driven service configuration."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.domain.errors import ConfigError
from src.infrastructure.stock_data.finnhub_adapter import DEFAULT_BASE_URL


@dataclass(frozen=True)
class Settings:
    """Runtime settings, fixed for the lifetime of the process."""

    finnhub_api_key: str
    finnhub_base_url: str = DEFAULT_BASE_URL
    finnhub_timeout_seconds: float = 10.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a local .env file).

        Raises:
            ConfigError: if FINNHUB_API_KEY is missing or a numeric value is invalid.
        """
        load_dotenv()

        api_key = os.getenv("FINNHUB_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("FINNHUB_API_KEY is required.")

        try:
            settings = cls(
                finnhub_api_key=api_key,
                finnhub_base_url=os.getenv("FINNHUB_BASE_URL", DEFAULT_BASE_URL).strip(),
                finnhub_timeout_seconds=float(os.getenv("FINNHUB_TIMEOUT_SECONDS", "10")),
                host=os.getenv("HOST", "0.0.0.0").strip(),
                port=int(os.getenv("PORT", "3000")),
                log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid numeric configuration: {exc}") from exc

        if settings.finnhub_timeout_seconds <= 0:
            raise ConfigError("FINNHUB_TIMEOUT_SECONDS must be > 0.")
        if not 0 < settings.port < 65536:
            raise ConfigError("PORT must be between 1 and 65535.")
        return settings
