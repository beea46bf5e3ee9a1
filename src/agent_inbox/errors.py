"""
Agent inbox error types.
"""

from typing import Any, Optional


class InboxError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class AuthExpiredError(InboxError):
    """HTTP 401: the bearer token is missing, expired or revoked."""

    def __init__(self, message: str = "Authentication expired", code: str = "auth_expired"):
        super().__init__(code, message)


class RequestFailedError(InboxError):
    """Transport error, non-2xx status other than 401, or an unreadable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: str = "request_failed",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)
        self.status_code = status_code
