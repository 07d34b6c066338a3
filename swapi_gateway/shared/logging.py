"""
Logging configuration for the gateway.

One pipe-separated line per record on stdout. Upstream payloads and
request bodies are never logged; adapters log status codes and paths.
"""

import logging
import sys
from typing import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx and httpcore log every outbound SWAPI call at INFO/DEBUG
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO", quiet: Iterable[str] = NOISY_LOGGERS) -> None:
    """Install the root handler and quiet chatty third-party loggers.

    Args:
        level: Root level name. Unknown names fall back to INFO.
        quiet: Logger names held at WARNING regardless of ``level``.
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
