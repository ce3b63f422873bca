"""Async HTTP transport for the render endpoint, with deadline and cancellation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
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
    render_url,
    resolve_request_timeout,
    transport_failure_cause,
)

logger = logging.getLogger("graphite_render_client")


class AsyncHttpDoer(Protocol):
    """Anything that can execute one prepared request, e.g. ``httpx.AsyncClient``."""

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...


class AsyncTransport:
    """Asynchronous transport for the render endpoint."""

    def __init__(
        self,
        config: GraphiteClientConfig,
        *,
        client: AsyncHttpDoer | None = None,
    ) -> None:
        self._config = config
        self._url = render_url(config.base_url)
        self._headers = build_default_headers(config)
        self._closed = False

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=build_default_timeout(config))

    @property
    def url(self) -> httpx.URL:
        return self._url

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(
        self,
        params: Mapping[str, Sequence[str]],
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> RenderResponse:
        """Run one render call.

        ``timeout`` bounds the whole exchange, body included. Setting
        ``cancel`` aborts the in-flight call. Both surface as
        :class:`GraphiteTransportError` chained to the triggering
        ``TimeoutError`` / ``asyncio.CancelledError``.
        """

        if self._closed:
            raise GraphiteTransportError("transport is already closed")

        request = build_render_request(
            self._url,
            params,
            headers=self._headers,
            timeout=resolve_request_timeout(self._config, timeout),
        )
        if cancel is not None and cancel.is_set():
            logger.debug("request cancelled before start url=%s", request.url)
            raise GraphiteTransportError(
                "request cancelled",
                cause="cancelled",
            ) from asyncio.CancelledError("cancel event was set before the request started")

        logger.debug("request start url=%s", request.url)
        exchange = asyncio.ensure_future(self._exchange(request))
        waiters: set[asyncio.Future[object]] = {exchange}
        cancel_waiter: asyncio.Future[object] | None = None
        if cancel is not None:
            cancel_waiter = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_waiter)

        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=timeout,
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            exchange.cancel()
            raise
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()

        if exchange in done:
            return exchange.result()

        await _abandon(exchange)
        if cancel_waiter is not None and cancel_waiter in done:
            logger.error("request cancelled url=%s", request.url)
            raise GraphiteTransportError(
                "request cancelled",
                cause="cancelled",
            ) from asyncio.CancelledError("cancel event was set")
        logger.error("request deadline exceeded url=%s timeout=%s", request.url, timeout)
        raise GraphiteTransportError(
            f"request exceeded deadline of {timeout}s",
            cause="timeout",
        ) from TimeoutError(f"render request did not complete within {timeout}s")

    async def _exchange(self, request: httpx.Request) -> RenderResponse:
        try:
            response = await self._client.send(request, stream=True)
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
            try:
                body = await response.aread()
            except Exception as exc:
                raise GraphiteTransportError(
                    "failed to read response body",
                    http_status=http_status,
                    cause=transport_failure_cause(exc),
                ) from exc
            return decode_render_body(body)
        except GraphiteApiError as exc:
            logger.error("request failed url=%s error=%s", request.url, exc)
            raise
        finally:
            await response.aclose()


async def _abandon(task: asyncio.Future[RenderResponse]) -> None:
    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled():
        # Finished while being cancelled; its outcome is discarded.
        task.exception()


__all__ = [
    "AsyncHttpDoer",
    "AsyncTransport",
]
