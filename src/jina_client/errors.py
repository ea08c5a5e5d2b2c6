"""Exceptions raised by the Jina API client.

Transport failures (``httpx.HTTPError`` subclasses, task cancellation) and
exceptions raised by streaming callbacks are not wrapped: they reach the
caller unchanged.
"""

from __future__ import annotations

from typing import Any


class JinaError(Exception):
    """Base class for errors raised by this library."""


class RequestValidationError(JinaError, ValueError):
    """A required request field is missing. Raised before any network call."""


class EncodingError(JinaError):
    """The request payload could not be serialized to JSON."""


class DecodingError(JinaError, ValueError):
    """A response body or stream chunk does not have the expected shape."""


class RemoteError(JinaError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, detail: dict[str, Any] | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        if detail is not None:
            message = f"API error: {detail}"
        else:
            message = f"API error with status code: {status_code}"
        super().__init__(message)
