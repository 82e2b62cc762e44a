"""Utilities: retry classification, backoff delay, path encoding."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx


def exponential_delay(retries: int) -> float:
    """Seconds to wait before retry number ``retries`` (1-based).

    1s, 2s, 4s, ... with no jitter and no cap. Never negative.
    """
    if retries <= 0:
        return 0.0
    return float(2 ** (retries - 1))


def should_retry(
    retries: int,
    max_retries: int,
    response: Optional[httpx.Response] = None,
    error: Optional[BaseException] = None,
) -> bool:
    """Decide whether another attempt is allowed.

    Retries 5xx responses and transport errors; 4xx is final.
    """
    if retries >= max_retries:
        return False
    if response is not None and response.status_code > 499:
        return True
    return error is not None


def encode_path(template: str, *params: Any) -> str:
    """Fill ``%s`` placeholders in ``template`` with percent-encoded values."""
    return template % tuple(quote(str(p), safe="") for p in params)
