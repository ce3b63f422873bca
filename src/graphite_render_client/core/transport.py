"""Blocking HTTP transport for the render endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol

import httpx

from ..config import GraphiteClientConfig
from ..render.models import RenderResponse
from ..render.parser import decode_render_body
from .errors import GraphiteApiError, GraphiteTransportError
from .response_parsing import ensure_ok_status
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_render_request,
    check_deadline,
    deadline_after,
    render_url,
    resolve_request_timeout,
    transport_failure_cause,
)

logger = logging.getLogger("graphite_render_client")


class HttpDoer(Protocol):
    """Anything that can execute one prepared request, e.g. ``httpx.Client``."""

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...


class SyncTransport:
    """Synchronous transport for the render endpoint."""

    def __init__(
        self,
        config: GraphiteClientConfig,
        *,
        client: HttpDoer | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._url = render_url(config.base_url)
        self._headers = build_default_headers(config)
        self._clock = clock or time.monotonic
        self._closed = False

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=build_default_timeout(config))

    @property
    def url(self) -> httpx.URL:
        return self._url

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def request(
        self,
        params: Mapping[str, Sequence[str]],
        *,
        timeout: float | None = None,
    ) -> RenderResponse:
        """Run one render call.

        ``timeout`` is a deadline for the whole exchange: httpx bounds each
        network phase with it, and the body is streamed so the total elapsed
        time is checked after every chunk.
        """

        if self._closed:
            raise GraphiteTransportError("transport is already closed")

        request = build_render_request(
            self._url,
            params,
            headers=self._headers,
            timeout=resolve_request_timeout(self._config, timeout),
        )
        deadline = deadline_after(timeout, now=self._clock())
        logger.debug("request start url=%s", request.url)

        try:
            response = self._client.send(request, stream=True)
        except Exception as exc:
            logger.error(
                "request transport error url=%s error=%s",
                request.url,
                exc.__class__.__name__,
            )
            raise GraphiteTransportError(
                "network/transport error",
                cause=transport_failure_cause(exc),
            ) from exc

        try:
            http_status = ensure_ok_status(response)
            logger.debug("response received url=%s http_status=%s", request.url, http_status)
            body = self._read_body(
                response,
                deadline=deadline,
                timeout=timeout,
                http_status=http_status,
            )
            return decode_render_body(body)
        except GraphiteApiError as exc:
            logger.error("request failed url=%s error=%s", request.url, exc)
            raise
        finally:
            response.close()

    def _read_body(
        self,
        response: httpx.Response,
        *,
        deadline: float | None,
        timeout: float | None,
        http_status: int,
    ) -> bytes:
        check_deadline(deadline, now=self._clock(), timeout=timeout, http_status=http_status)
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                check_deadline(
                    deadline,
                    now=self._clock(),
                    timeout=timeout,
                    http_status=http_status,
                )
        except GraphiteTransportError:
            raise
        except Exception as exc:
            raise GraphiteTransportError(
                "failed to read response body",
                http_status=http_status,
                cause=transport_failure_cause(exc),
            ) from exc
        return b"".join(chunks)


__all__ = [
    "HttpDoer",
    "SyncTransport",
]
