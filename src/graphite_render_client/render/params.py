"""Request parameter builder for the render endpoint."""

from __future__ import annotations

from .queries import RenderQuery, format_time_bound


def build_render_params(query: RenderQuery) -> dict[str, list[str]]:
    params: dict[str, list[str]] = {"format": ["json"]}
    if query.targets:
        params["target"] = list(query.targets)
    if query.from_time is not None:
        params["from"] = [format_time_bound(query.from_time)]
    if query.until_time is not None:
        params["until"] = [format_time_bound(query.until_time)]
    return params


__all__ = [
    "build_render_params",
]
