"""Configuration for the product store service.

Values come from environment variables, with a ``.env`` file loaded first
when present. Nothing here changes how the store behaves; it only controls
how the HTTP app is served and where clients find it.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv
from rich.logging import RichHandler

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """Service and client settings."""
    title: str
    host: str
    port: int
    log_level: str
    cors_origins: List[str]
    base_url: str


def _get_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    return value if value else default


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"PRODUCT_STORE_PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"PRODUCT_STORE_PORT out of range: {port}")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"PRODUCT_STORE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
        )
    return level


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Raises:
        ConfigurationError: If a value cannot be parsed.
    """
    load_dotenv()

    origins = _get_env("PRODUCT_STORE_CORS_ORIGINS", "*")
    return Settings(
        title=_get_env("PRODUCT_STORE_TITLE", "product-store (in-memory)"),
        host=_get_env("PRODUCT_STORE_HOST", "127.0.0.1"),
        port=_parse_port(_get_env("PRODUCT_STORE_PORT", "8085")),
        log_level=_parse_log_level(_get_env("PRODUCT_STORE_LOG_LEVEL", "INFO")),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        base_url=_get_env("PRODUCT_STORE_URL", "http://127.0.0.1:8085").rstrip("/"),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Lazily built settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure_logging(level: str = "INFO") -> None:
    """Send log records through rich on the root logger."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
