"""
Logging for the storefront.

Every logger handed out by `get_logger` lives under the ``boutique`` logger,
which owns the single stdout handler. Level comes from ``LOG_LEVEL``.

    from boutique.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from functools import cache

from boutique import config

PACKAGE_LOGGER = "boutique"

# Visitor input must not be able to forge extra log lines
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _setup_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    level = logging.getLevelName(config.LOG_LEVEL)
    package_logger.setLevel(level if isinstance(level, int) else logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if config.ON_VERCEL:
        # Vercel stamps each line itself
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
    package_logger.addHandler(handler)

    # Airtable and Upstash calls both go through httpx
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return package_logger


_setup_package_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, nested under ``boutique`` (e.g. ``api.index`` -> ``boutique.api.index``)."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """First 8 characters of a session or record id, escaped. "N/A" when empty."""
    if not id_value:
        return "N/A"
    return str(id_value).translate(_LOG_ESCAPES)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Customer-entered text (name, location) escaped and clipped for a log line."""
    if not value:
        return "N/A"
    text = str(value).translate(_LOG_ESCAPES)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
