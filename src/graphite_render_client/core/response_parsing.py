"""Shared response handling helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import GraphiteUnexpectedStatusError


class StatusResponse(Protocol):
    @property
    def status_code(self) -> int: ...


def ensure_ok_status(response: StatusResponse) -> int:
    """Reject anything but 200 before the body is touched."""

    http_status = response.status_code
    if http_status != 200:
        raise GraphiteUnexpectedStatusError(http_status)
    return http_status


__all__ = [
    "ensure_ok_status",
]
