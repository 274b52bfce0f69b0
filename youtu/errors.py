"""Exceptions raised by the Youtu client.

Service-level failures (a non-zero ``errorcode`` in a decoded response) are
returned as data and never raised.
"""

from __future__ import annotations

from typing import Any


class YoutuError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str = "Youtu client error", details: Any | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ValidationError(YoutuError):
    """Raised when a credential is built from invalid fields."""


class EncodingError(YoutuError):
    """Raised when a request model cannot be serialized."""


class NetworkError(YoutuError):
    """Raised on connection, DNS, timeout or body read failures."""


class DecodingError(YoutuError):
    """Raised when a response body is not valid JSON or has the wrong shape."""

    def __init__(self, body: bytes, cause: Exception, message: str = "Failed to decode response") -> None:
        self.body = body
        self.cause = cause
        super().__init__(message, details=f"{cause}; body={body[:200]!r}")
