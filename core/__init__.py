"""Application-wide configuration and logging helpers."""

from .logging_utils import configure_logging, get_request_id, reset_request_id, set_request_id
from .settings import AppSettings, get_app_settings

__all__ = [
    "AppSettings",
    "configure_logging",
    "get_app_settings",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
]
