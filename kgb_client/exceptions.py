"""
KGB client exception hierarchy.

All exceptions inherit from KGBError for easy catching.
"""

from typing import Any


class KGBError(Exception):
    """Base exception for all kgb_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class TransportError(KGBError):
    """Request did not produce an HTTP 200 (bad status, connection failure, timeout)."""

    def __init__(
        self, message: str, *, status_code: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message, status_code=status_code, url=url)
        self.status_code = status_code
        self.url = url


class DecodeError(KGBError):
    """Response body is not a JSON object."""

    def __init__(self, message: str, *, body: str | None = None) -> None:
        super().__init__(message, body=body)
        self.body = body


class RemoteError(KGBError):
    """Relay returned a non-null ``error`` member."""

    def __init__(self, message: str, *, error: Any) -> None:
        super().__init__(message, error=error)
        self.error = error


class ProtocolViolationError(KGBError):
    """Relay answered, but ``result`` is not a success marker for the method."""

    def __init__(self, message: str, *, method: str, result: Any) -> None:
        super().__init__(message, method=method, result=result)
        self.method = method
        self.result = result


class InvalidChangeError(KGBError):
    """Change descriptor does not follow the ``(A|M|D)[+]path`` grammar."""

    def __init__(self, message: str, *, change: str) -> None:
        super().__init__(message, change=change)
        self.change = change
