"""
Exceptions raised by the Grafana organization client.

Every error raised by the client derives from GrafanaError.
"""

from typing import Optional


class GrafanaError(Exception):
    """Base exception for all client errors."""


class EncodingError(GrafanaError):
    """Raised when a request payload cannot be serialized to JSON."""


class TransportError(GrafanaError):
    """
    Raised for network failures and non-2xx HTTP responses.

    For HTTP failures the message is the status line (e.g. "404 Not Found").
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, reason: Optional[str], body: Optional[str] = None) -> "TransportError":
        """Build the error matching an HTTP status."""
        status_line = f"{status_code} {reason}" if reason else str(status_code)
        error_class = NotFoundError if status_code == 404 else cls
        return error_class(status_line, status_code=status_code, reason=reason, body=body)


class NotFoundError(TransportError):
    """Raised when the API returns 404 Not Found."""


class ProtocolError(GrafanaError):
    """Raised when the API response body is malformed or has an unexpected shape."""
