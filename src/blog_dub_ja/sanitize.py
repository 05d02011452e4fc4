"""Filename sanitization and project name generation."""

import re
import time
from urllib.parse import urlparse

from loguru import logger

log = logger.bind(stage="sanitize")

MAX_NAME_LENGTH = 50


def sanitize_name(name: str) -> str:
    """Sanitize a project/job name for use as a directory and file stem.

    Strips filesystem-illegal characters, collapses whitespace runs to a
    single underscore, truncates to 50 characters.
    """
    log.debug(f"sanitize_name(name='{name}')")

    sanitized = re.sub(r'[<>:"/\\|?*]+', '', name)
    sanitized = re.sub(r'\s+', '_', sanitized)
    return sanitized[:MAX_NAME_LENGTH]


def default_project_name(url: str, now_ms: int | None = None) -> str:
    """Derive a project name from the URL host plus a short time suffix.

    ``https://example.com/post`` -> ``example_com_123456`` (last six digits
    of the epoch milliseconds). Unparseable URLs and URLs without a host
    fall back to
    ``job_<epoch ms>``.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000

    try:
        hostname = urlparse(url).hostname
    except ValueError:
        # e.g. an unterminated IPv6 literal
        hostname = None
    if not hostname:
        log.debug(f"No hostname in {url!r}, using job_ fallback")
        return f"job_{now_ms}"

    suffix = str(now_ms)[-6:].rjust(6, "0")
    return f"{hostname.replace('.', '_')}_{suffix}"
