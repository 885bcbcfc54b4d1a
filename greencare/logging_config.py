"""
Logging setup shared by the API process and the provisioning scripts.

Every line reads `2026-01-06T14:05:52Z [api] INFO message`, in UTC.

LOG_LEVEL picks the verbosity:
    INFO   registration lifecycle, startup and shutdown (default)
    DEBUG  store queries and filter strings, plus the access lines for / and /health
    TRACE  payloads sent to PocketBase and Stripe

Usage:
    from greencare.logging_config import configure_logging, get_logger

    configure_logging(source="api")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Iterable

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Loggers that get chatty at DEBUG and only matter when something breaks
QUIET_LOGGERS = ("httpx", "httpcore", "stripe")

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class UTCFormatter(logging.Formatter):
    """Stamps records with a UTC ISO-8601 time and the emitting component."""

    converter = time.gmtime

    def __init__(self, source: str = "app") -> None:
        super().__init__(fmt=f"%(asctime)s [{source}] %(levelname)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%SZ")
        self.source = source


class QuietPathsFilter(logging.Filter):
    """Drops uvicorn access lines for GET requests to the liveness routes.

    uvicorn.access logs with args `(client, method, path, http_version, status)`;
    the path is compared exactly, ignoring any query string.
    """

    def __init__(self, paths: Iterable[str] = ("/", "/health")) -> None:
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        if not isinstance(args, tuple) or len(args) != 5:
            return True
        _, method, path, _, _ = args
        return not (method == "GET" and str(path).split("?", 1)[0] in self.paths)


def resolve_level(name: str | None = None, debug: bool = False) -> int:
    """Map a LOG_LEVEL name to a level; unknown names fall back to INFO, or DEBUG when `debug` is set."""
    level = LEVELS.get((name or "").strip().upper())
    if level is not None:
        return level
    return logging.DEBUG if debug else logging.INFO


def configure_logging(
    source: str = "app",
    level: int | None = None,
    debug: bool = False,
) -> logging.Logger:
    """Send the root logger and uvicorn's loggers to one stdout handler.

    Args:
        source: Component name printed in brackets (e.g., "api", "setup")
        level: Explicit level; when omitted it comes from LOG_LEVEL
        debug: Use DEBUG when LOG_LEVEL is unset

    Returns:
        The root logger
    """
    if level is None:
        level = resolve_level(os.getenv("LOG_LEVEL"), debug)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(UTCFormatter(source))
    if level > logging.DEBUG:
        handler.addFilter(QuietPathsFilter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers[:] = [handler]
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
