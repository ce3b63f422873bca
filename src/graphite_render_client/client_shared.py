"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import GraphiteClientConfig
from .core.errors import GraphiteRequestError
from .render.params import build_render_params
from .render.queries import RenderQuery


def validate_client_config(config: GraphiteClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise GraphiteRequestError(str(exc)) from exc


def reject_conflicting_transport(*, transport: object | None, http_client: object | None) -> None:
    if transport is not None and http_client is not None:
        raise GraphiteRequestError("pass either transport or http_client, not both")


def build_query_params(query: RenderQuery) -> dict[str, list[str]]:
    if not isinstance(query, RenderQuery):
        raise GraphiteRequestError(
            f"query must be RenderQuery, got {type(query).__name__}"
        )
    return build_render_params(query)


__all__ = [
    "validate_client_config",
    "build_query_params",
    "reject_conflicting_transport",
]
