"""Public async client entrypoint."""

from __future__ import annotations

import asyncio
from types import TracebackType

import httpx

from .client_shared import (
    build_query_params,
    reject_conflicting_transport,
    validate_client_config,
)
from .config import GraphiteClientConfig
from .core.async_transport import AsyncHttpDoer, AsyncTransport
from .core.errors import GraphiteClientClosedError
from .render.models import RenderResponse
from .render.queries import RenderQuery


class AsyncGraphiteClient:
    """Public async client for the Graphite render API.

    Same construction rules as :class:`GraphiteClient`: ``http_client`` and
    ``transport`` are mutually exclusive, and a ``transport`` takes precedence
    over ``config.base_url``.
    """

    def __init__(
        self,
        *,
        config: GraphiteClientConfig | None = None,
        http_client: AsyncHttpDoer | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._config = config or GraphiteClientConfig()
        validate_client_config(self._config)
        reject_conflicting_transport(transport=transport, http_client=http_client)

        self._transport = transport or AsyncTransport(self._config, client=http_client)
        self._closed = False

    @property
    def render_url(self) -> httpx.URL:
        return self._transport.url

    async def render(
        self,
        query: RenderQuery,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> RenderResponse:
        self._ensure_open()
        params = build_query_params(query)
        return await self._transport.request(params, timeout=timeout, cancel=cancel)

    def _ensure_open(self) -> None:
        if self._closed:
            raise GraphiteClientClosedError("AsyncGraphiteClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncGraphiteClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncGraphiteClient",
]
