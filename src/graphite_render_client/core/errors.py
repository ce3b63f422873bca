"""Error types raised by the render client."""

from __future__ import annotations


class GraphiteApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class GraphiteRequestError(GraphiteApiError):
    """Base URL, configuration or parameters cannot form a valid request."""


class GraphiteTransportError(GraphiteApiError):
    """Network/transport-level failure, including timeout and cancellation."""


class GraphiteClientClosedError(GraphiteApiError):
    """Raised when client is used after close."""


class GraphiteUnexpectedStatusError(GraphiteApiError):
    """Render endpoint answered with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"unexpected status code {status_code}",
            http_status=status_code,
        )
        self.status_code = status_code


class GraphiteDecodeError(GraphiteApiError):
    """Response body is not valid JSON or does not have the render shape."""


class MalformedDataPointError(GraphiteDecodeError):
    """Datapoint array does not hold exactly a value and a timestamp."""

    def __init__(self, actual: int, expected: int = 2, *, location: str | None = None) -> None:
        message = f"wrong number of fields in datapoint: {actual} != {expected}"
        if location:
            message = f"{location}: {message}"
        super().__init__(message, cause="shape")
        self.actual = actual
        self.expected = expected


__all__ = [
    "GraphiteApiError",
    "GraphiteRequestError",
    "GraphiteTransportError",
    "GraphiteClientClosedError",
    "GraphiteUnexpectedStatusError",
    "GraphiteDecodeError",
    "MalformedDataPointError",
]
