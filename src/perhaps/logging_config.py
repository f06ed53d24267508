from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

ENV_VERSION = "PERHAPS_VERSION"
ENV_ENVIRONMENT = "PERHAPS_ENV"
ENV_DISABLE_FILE_LOGS = "PERHAPS_DISABLE_FILE_LOGS"
ENV_LOG_DIR = "PERHAPS_LOG_DIR"

FILE_LEVELS = ("DEBUG", "INFO", "ERROR")

_CONFIGURED = False


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["level"].name == level

    return _filter


def _metadata(service: str, version: str, environment: str) -> dict:
    return {
        "service": service,
        "version": version,
        "env": environment,
        "request_id": None,
        "user_id": None,
    }


def file_logs_disabled() -> bool:
    return os.getenv(ENV_DISABLE_FILE_LOGS) == "1"


def configure_logging(
    service: str = "perhaps",
    version: Optional[str] = None,
    environment: Optional[str] = None,
    log_dir: Optional[Path] = None,
    force: bool = False,
) -> None:
    """
    Configure Loguru sinks for the library.

    With file logs enabled, one JSON-lines file per level is written under
    ``<log_dir>/YYYY-MM-DD/`` (``debug.json``, ``info.json``, ``error.json``),
    each holding only records of exactly that level. Setting
    ``PERHAPS_DISABLE_FILE_LOGS=1`` replaces them with a single INFO stderr sink.
    Every record carries the service/version/env metadata in ``extra``.

    Also re-enables the library's own records, which ``import perhaps``
    disables. Call this from the application entry point, never at import.
    Repeated calls are no-ops unless ``force`` is set.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    version = version or os.getenv(ENV_VERSION, "0.1.0")
    environment = environment or os.getenv(ENV_ENVIRONMENT, "dev")

    logger.remove()

    if file_logs_disabled():
        logger.add(sys.stderr, level="INFO", colorize=sys.stderr.isatty(), enqueue=False)
    else:
        root = Path(log_dir or os.getenv(ENV_LOG_DIR, "logs"))
        day_dir = root / datetime.now(timezone.utc).strftime("%Y-%m-%d")
        day_dir.mkdir(parents=True, exist_ok=True)

        for level in FILE_LEVELS:
            logger.add(
                day_dir / f"{level.lower()}.json",
                level=level,
                filter=_level_filter(level),
                serialize=True,
                rotation="10 MB",
                retention="30 days",
                enqueue=True,
            )

        if sys.stderr.isatty():
            logger.add(sys.stderr, level="INFO", colorize=True, enqueue=True)

    logger.configure(extra=_metadata(service, version, environment))
    logger.enable("perhaps")
    _CONFIGURED = True
