from __future__ import annotations

import httpx
import pytest

from graphite_render_client.config import GraphiteClientConfig, TransportConfig
from graphite_render_client.core.errors import GraphiteRequestError
from graphite_render_client.core.transport_shared import (
    build_default_headers,
    build_render_request,
    render_url,
    resolve_request_timeout,
    transport_failure_cause,
)


@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("https://www.example.com:9090/foo", "https://www.example.com:9090/foo/render"),
        ("https://www.example.com:9090/foo/", "https://www.example.com:9090/foo/render"),
        ("https://www.example.com:9090/foo/render", "https://www.example.com:9090/foo/render"),
        ("https://www.example.com:9090/foo/render/", "https://www.example.com:9090/foo/render"),
        ("http://graphite", "http://graphite/render"),
        ("http://graphite/", "http://graphite/render"),
        ("http://graphite/renderer", "http://graphite/renderer/render"),
    ],
)
def test_render_url_appends_segment_once(base_url, expected):
    assert str(render_url(base_url)) == expected


def test_render_url_is_idempotent():
    once = render_url("https://graphite.example.com/foo")
    assert render_url(str(once)) == once


@pytest.mark.parametrize(
    "base_url",
    ["graphite.example.com", "/foo/bar", "ftp://graphite.example.com", "http://"],
)
def test_render_url_rejects_invalid_base_url(base_url):
    with pytest.raises(GraphiteRequestError, match="base URL"):
        render_url(base_url)


def test_build_render_request_encodes_repeated_targets():
    url = render_url("https://graphite.example.com")
    request = build_render_request(
        url,
        {"format": ["json"], "target": ["a.b", "sum(c.*)"], "from": ["-4h"]},
        headers=build_default_headers(GraphiteClientConfig()),
        timeout=httpx.Timeout(3.0),
    )
    assert request.method == "GET"
    assert request.url.path == "/render"
    assert request.url.params.get_list("target") == ["a.b", "sum(c.*)"]
    assert request.url.params["format"] == "json"
    assert request.url.params["from"] == "-4h"
    assert "until" not in request.url.params
    assert request.headers["User-Agent"] == "graphite-render-client/0.1.0"
    assert request.extensions["timeout"]["read"] == 3.0


def test_resolve_request_timeout_defaults_to_config():
    cfg = GraphiteClientConfig(transport=TransportConfig(timeout_read_seconds=12.0))
    timeout = resolve_request_timeout(cfg, None)
    assert timeout.read == 12.0
    assert timeout.connect == 5.0


def test_resolve_request_timeout_override_applies_to_every_phase():
    timeout = resolve_request_timeout(GraphiteClientConfig(), 1.5)
    assert timeout.as_dict() == {"connect": 1.5, "read": 1.5, "write": 1.5, "pool": 1.5}


@pytest.mark.parametrize("value", [0, -1.0])
def test_resolve_request_timeout_rejects_non_positive(value):
    with pytest.raises(GraphiteRequestError, match="timeout must be > 0"):
        resolve_request_timeout(GraphiteClientConfig(), value)


def test_transport_failure_cause():
    assert transport_failure_cause(httpx.ReadTimeout("slow")) == "timeout"
    assert transport_failure_cause(TimeoutError()) == "timeout"
    assert transport_failure_cause(httpx.ConnectError("refused")) == "network"
