"""Configuration settings for the FRED client."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from fred_graph.exceptions import ConfigurationError


load_dotenv()


def _env_timeout(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from e


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass
class Settings:
    """Client settings, read from the environment (and .env) by default."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    cache_series: bool = field(
        default_factory=lambda: _env_flag("FRED_CACHE_SERIES", True)
    )
    timeout: float = field(
        default_factory=lambda: _env_timeout("FRED_TIMEOUT", 30.0)
    )

    def __post_init__(self) -> None:
        self.fred_api_key = (self.fred_api_key or "").strip()

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ConfigurationError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        if self.timeout <= 0:
            raise ConfigurationError(f"FRED_TIMEOUT must be positive, got {self.timeout}")
