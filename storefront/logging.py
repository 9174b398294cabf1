"""
Logging setup for the storefront.

The root logger gets one stdout handler the first time this module is
imported; modules then call ``get_logger(__name__)``. Values that come from
shoppers (session ids, emails, product names) go through the sanitizers
before being interpolated into a log line.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Line breaks and tabs are escaped, NUL is dropped
_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.setLevel(level)
    root.addHandler(handler)

    # Supabase talks over httpx
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _sanitize(value, max_length: int, suffix: str) -> str:
    if not value:
        return "N/A"
    safe = str(value).translate(_ESCAPES)
    return safe if len(safe) <= max_length else safe[:max_length] + suffix


def sanitize_id_for_logging(id_value: str | None) -> str:
    """First 8 characters of a session or user id, escaped."""
    return _sanitize(id_value, 8, "")


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped user-supplied string, truncated with '...' past ``max_length``."""
    return _sanitize(value, max_length, "...")
