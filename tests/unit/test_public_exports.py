from __future__ import annotations

import graphite_render_client
import graphite_render_client.render as render


def test_render_package_exports_public_models_and_queries_only():
    expected = {
        "RenderQuery",
        "RelativeTime",
        "AbsoluteTime",
        "TimeBound",
        "RenderResponse",
        "Series",
        "DataPoint",
    }
    assert expected.issubset(set(render.__all__))
    assert "build_render_params" not in render.__all__
    assert "parse_render_payload" not in render.__all__


def test_top_level_package_exports_clients_and_errors():
    for name in (
        "GraphiteClient",
        "AsyncGraphiteClient",
        "GraphiteClientConfig",
        "GraphiteTransportError",
        "GraphiteUnexpectedStatusError",
        "GraphiteDecodeError",
        "MalformedDataPointError",
    ):
        assert name in graphite_render_client.__all__
        assert hasattr(graphite_render_client, name)
