"""Request header handling for the Manage API SDK."""

from __future__ import annotations

from typing import Dict, Optional

TOKEN_HEADER = "X-KBC-ManageApiToken"
DEFAULT_USER_AGENT = "Keboola Manage API Python Client"


def build_user_agent(suffix: Optional[str] = None) -> str:
    """Return the SDK user agent, with an optional caller-supplied suffix."""
    if suffix:
        return f"{DEFAULT_USER_AGENT} {suffix}"
    return DEFAULT_USER_AGENT


def build_auth_headers(token: str, user_agent: str = DEFAULT_USER_AGENT) -> Dict[str, str]:
    """Return the headers sent with every Manage API request."""
    return {
        TOKEN_HEADER: token,
        "Accept-Encoding": "gzip",
        "User-Agent": user_agent,
    }
