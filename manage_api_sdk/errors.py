"""Structured exceptions for the Manage API SDK."""

from __future__ import annotations

from typing import Any, Dict, Optional

APPLICATION_ERROR = "APPLICATION_ERROR"
MAINTENANCE = "MAINTENANCE"


class ManageApiError(Exception):
    """Base exception for everything raised by the SDK."""


class ConfigError(ManageApiError, ValueError):
    """Client configuration is missing or invalid."""


class ClientError(ManageApiError):
    """The Manage API answered with an error, or could not be reached.

    ``code`` mirrors the HTTP status (0 for transport failures),
    ``string_code`` is the server's machine-readable code and
    ``context_params`` holds the decoded error body.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        string_code: Optional[str] = None,
        context_params: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = int(code)
        self.string_code = str(string_code) if string_code else APPLICATION_ERROR
        self.context_params = dict(context_params) if context_params else {}
        super().__init__(f"[{self.code}] {message}")


class ValidationError(ClientError):
    """400 / 422 — the request was rejected as invalid."""
    pass


class AuthError(ClientError):
    """401 Unauthorized — missing or invalid Manage API token."""
    pass


class ForbiddenError(ClientError):
    """403 Forbidden — the token is not allowed to do this."""
    pass


class NotFoundError(ClientError):
    """404 Not Found."""
    pass


class ServerError(ClientError):
    """500+ — server-side error."""
    pass


class MaintenanceError(ServerError):
    """503 — the service is down for maintenance."""

    def __init__(
        self,
        reason: str,
        retry_after: Optional[int] = None,
        context_params: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(reason, 503, MAINTENANCE, context_params)


def error_class_for_status(status_code: int) -> type:
    """Pick the ClientError subclass matching an HTTP status."""
    if status_code in (400, 422):
        return ValidationError
    if status_code == 401:
        return AuthError
    if status_code == 403:
        return ForbiddenError
    if status_code == 404:
        return NotFoundError
    if status_code >= 500:
        return ServerError
    return ClientError
