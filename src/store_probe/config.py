import logging
import math
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0


def _env(name: str, default: str = "") -> str:
    """Read an environment variable, treating an empty value as unset."""
    return os.getenv(name) or default


def _env_bool(name: str, default: str) -> bool:
    return _env(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout() -> float:
    """Read REQUEST_TIMEOUT, falling back to the default on a bad value."""
    raw = _env("REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not (math.isfinite(timeout) and timeout > 0):
        logger.warning(
            "Invalid REQUEST_TIMEOUT %r, using %.0f seconds", raw, DEFAULT_REQUEST_TIMEOUT
        )
        return DEFAULT_REQUEST_TIMEOUT
    return timeout


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so ``Settings()`` always
    reflects the current environment. Missing optional values fall back to
    defaults; a missing Firebase credential leaves the document store
    unavailable instead of failing startup.
    """

    # API
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))
    service_name: str = field(default_factory=lambda: _env("SERVICE_NAME", "Store Probe API"))

    # Firebase / Firestore
    firebase_service_account_json: str = field(
        default_factory=lambda: _env("FIREBASE_SERVICE_ACCOUNT_JSON")
    )

    # Redis
    redis_url: str = field(default_factory=lambda: _env("REDIS_URL", "localhost:6379"))
    redis_password: str = field(default_factory=lambda: _env("REDIS_PASSWORD"))

    # Timeout applied to every call into Firestore or Redis, in seconds
    request_timeout: float = field(default_factory=_env_timeout)

    # Logging and middleware
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    request_logging: bool = field(default_factory=lambda: _env_bool("REQUEST_LOGGING", "true"))
    cors_allow_origins: tuple[str, ...] = field(
        default_factory=lambda: tuple(
            origin.strip() for origin in _env("CORS_ALLOW_ORIGINS").split(",") if origin.strip()
        )
    )

    @property
    def cors_enabled(self) -> bool:
        return bool(self.cors_allow_origins)

    def __post_init__(self) -> None:
        """Validate settings after initialization.

        Only the port is fatal, since the listener cannot bind without it.
        """
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
