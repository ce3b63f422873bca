"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

import httpx

from .client_shared import (
    build_query_params,
    reject_conflicting_transport,
    validate_client_config,
)
from .config import GraphiteClientConfig
from .core.errors import GraphiteClientClosedError
from .core.transport import HttpDoer, SyncTransport
from .render.models import RenderResponse
from .render.queries import RenderQuery


class GraphiteClient:
    """Blocking client for the Graphite render API.

    ``config.base_url`` is the root of the Graphite installation: if the render
    API lives at ``https://example.com:9090/foo/render`` pass
    ``https://example.com:9090/foo``. A base URL that already ends in
    ``render`` is used as is.

    Pass either ``http_client`` (the HTTP doer used by the default transport)
    or a ready-made ``transport``, not both. A ``transport`` carries its own
    render URL, so ``config.base_url`` is then only validated.
    """

    def __init__(
        self,
        *,
        config: GraphiteClientConfig | None = None,
        http_client: HttpDoer | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config or GraphiteClientConfig()
        validate_client_config(self._config)
        reject_conflicting_transport(transport=transport, http_client=http_client)

        self._transport = transport or SyncTransport(self._config, client=http_client)
        self._closed = False

    @property
    def render_url(self) -> httpx.URL:
        return self._transport.url

    def render(
        self,
        query: RenderQuery,
        *,
        timeout: float | None = None,
    ) -> RenderResponse:
        """Fetch every target of ``query`` in one request.

        ``timeout`` is a deadline in seconds for this call only; without it
        the configured transport timeouts apply.
        """

        self._ensure_open()
        params = build_query_params(query)
        return self._transport.request(params, timeout=timeout)

    def _ensure_open(self) -> None:
        if self._closed:
            raise GraphiteClientClosedError("GraphiteClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "GraphiteClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "GraphiteClient",
]
