"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import httpx

from ..config import GraphiteClientConfig
from .errors import GraphiteRequestError, GraphiteTransportError

RENDER_SEGMENT = "render"


def build_default_headers(config: GraphiteClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: GraphiteClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def resolve_request_timeout(
    config: GraphiteClientConfig,
    timeout: float | None,
) -> httpx.Timeout:
    """Per-call deadline overrides every phase of the configured timeout."""

    if timeout is None:
        return build_default_timeout(config)
    if timeout <= 0:
        raise GraphiteRequestError("timeout must be > 0")
    return httpx.Timeout(timeout)


def render_url(base_url: str) -> httpx.URL:
    """Return ``base_url`` with the ``render`` segment appended once."""

    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise GraphiteRequestError(f"invalid base URL: {base_url!r}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise GraphiteRequestError(f"base URL must be an absolute http(s) URL: {base_url!r}")

    path = url.path.rstrip("/")
    if path.rsplit("/", 1)[-1] != RENDER_SEGMENT:
        path = f"{path}/{RENDER_SEGMENT}"
    return url.copy_with(path=path)


def build_render_request(
    url: httpx.URL,
    params: Mapping[str, Sequence[str]],
    *,
    headers: Mapping[str, str],
    timeout: httpx.Timeout,
) -> httpx.Request:
    try:
        return httpx.Request(
            "GET",
            url,
            params={name: list(values) for name, values in params.items()},
            headers=headers,
            extensions={"timeout": timeout.as_dict()},
        )
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise GraphiteRequestError("could not construct render request") from exc


def deadline_after(timeout: float | None, *, now: float) -> float | None:
    if timeout is None:
        return None
    return now + timeout


def check_deadline(
    deadline: float | None,
    *,
    now: float,
    timeout: float | None,
    http_status: int | None = None,
) -> None:
    """Fail once the whole exchange has outlived its per-call deadline."""

    if deadline is None or now < deadline:
        return
    raise GraphiteTransportError(
        f"request exceeded deadline of {timeout}s",
        http_status=http_status,
        cause="timeout",
    ) from TimeoutError(f"render request did not complete within {timeout}s")


def transport_failure_cause(exc: BaseException) -> str:
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return "timeout"
    return "network"


__all__ = [
    "RENDER_SEGMENT",
    "build_default_headers",
    "build_default_timeout",
    "resolve_request_timeout",
    "render_url",
    "build_render_request",
    "transport_failure_cause",
    "deadline_after",
    "check_deadline",
]
