from __future__ import annotations

import pytest

from graphite_render_client import AsyncGraphiteClient, GraphiteClient, RenderQuery
from graphite_render_client.core.errors import GraphiteUnexpectedStatusError
from graphite_render_client.render.queries import RelativeTime
from tests.shared.transport import AsyncSequencedClient, Response, SyncSequencedClient, build_config


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fixture_name",
    ["render_three_series.json", "render_mixed_values.json"],
    ids=["three-series", "mixed-values"],
)
async def test_sync_async_success_equivalence_with_fixtures(fixture_loader, fixture_name: str):
    body = fixture_loader(fixture_name)
    query = RenderQuery(["fpi.probes.*.C"], from_time=RelativeTime("-1h"))
    sync_doer = SyncSequencedClient([Response(200, body)])
    async_doer = AsyncSequencedClient([Response(200, body)])

    with GraphiteClient(config=build_config(), http_client=sync_doer) as client:
        sync_result = client.render(query)
    async with AsyncGraphiteClient(config=build_config(), http_client=async_doer) as client:
        async_result = await client.render(query)

    assert sync_result == async_result
    assert str(sync_doer.requests[0].url) == str(async_doer.requests[0].url)


@pytest.mark.asyncio
async def test_sync_async_status_error_equivalence():
    sync_doer = SyncSequencedClient([Response(500, b"boom")])
    async_doer = AsyncSequencedClient([Response(500, b"boom")])

    with GraphiteClient(config=build_config(), http_client=sync_doer) as client:
        with pytest.raises(GraphiteUnexpectedStatusError) as sync_exc:
            client.render(RenderQuery(["a"]))
    async with AsyncGraphiteClient(config=build_config(), http_client=async_doer) as client:
        with pytest.raises(GraphiteUnexpectedStatusError) as async_exc:
            await client.render(RenderQuery(["a"]))

    assert sync_exc.value.status_code == async_exc.value.status_code == 500
