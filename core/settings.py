from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "Collaborative Todo List API"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class AppSettings:
    app_name: str
    app_port: int
    environment: str
    allowed_origins: tuple[str, ...]
    log_level: str
    views_dir: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def parse_port(raw_value: Optional[str]) -> int:
    """Return a usable TCP port, falling back to the default on bad input."""
    if not raw_value:
        return DEFAULT_PORT
    try:
        port = int(raw_value)
    except ValueError:
        logger.warning("Invalid APP_PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("APP_PORT %s is out of range; defaulting to %s", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def parse_allowed_origins(raw_value: Optional[str]) -> tuple[str, ...]:
    if raw_value is None:
        return ("*",)
    origins = tuple(origin.strip() for origin in raw_value.split(",") if origin.strip())
    return origins or ("*",)


@lru_cache
def get_app_settings() -> AppSettings:
    # .env values never override variables already present in the environment
    load_dotenv(override=False)

    return AppSettings(
        app_name=os.getenv("APP_NAME", DEFAULT_APP_NAME),
        app_port=parse_port(os.getenv("APP_PORT")),
        environment=os.getenv("ENVIRONMENT", "development").lower(),
        allowed_origins=parse_allowed_origins(os.getenv("ALLOWED_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        views_dir=os.getenv("VIEWS_DIR", "views"),
    )
