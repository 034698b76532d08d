#!/usr/bin/env python3
"""
Entry point for the Collaborative Todo List API.
Supports development and production launch modes.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from core.logging_utils import configure_logging
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


def log_startup(port: int) -> None:
    """Log the addresses a developer usually needs after startup."""
    settings = get_app_settings()
    logger.info("Server starting on port %s (ENVIRONMENT=%s)", port, settings.environment)
    logger.info("API available at http://localhost:%s", port)
    logger.info("Health check: http://localhost:%s/health", port)
    logger.info("API docs: http://localhost:%s/api", port)


def run_development() -> None:
    """Development mode with auto reload."""
    import uvicorn

    settings = get_app_settings()
    log_startup(settings.app_port)
    uvicorn.run(
        "todo_main:app",
        host="0.0.0.0",
        port=settings.app_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


def run_production() -> None:
    """Production mode.

    The todo store lives in process memory, so a single worker is used.
    """
    import uvicorn

    settings = get_app_settings()
    log_startup(settings.app_port)
    uvicorn.run(
        "todo_main:app",
        host="0.0.0.0",
        port=settings.app_port,
        workers=1,
        log_level=settings.log_level.lower(),
    )


def show_help() -> None:
    print("""
Collaborative Todo List API - Launch Utility

Usage:
  python run.py [command]

Commands:
  dev        - Run in development mode (auto reload)
  prod       - Run in production mode
  help       - Show this help message
    """.strip())


def main() -> None:
    configure_logging(get_app_settings().log_level)
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "prod"

    try:
        if mode == "dev":
            run_development()
        elif mode == "prod":
            run_production()
        elif mode in ["help", "-h", "--help"]:
            show_help()
        else:
            print(f"Unknown mode: {mode}")
            show_help()
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)
    except Exception as exc:
        logger.error("Server failed to start: %s", exc, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
