"""Parsers from render JSON payload into typed response objects."""

from __future__ import annotations

import json

from ..core.errors import GraphiteDecodeError, MalformedDataPointError
from .models import DataPoint, RenderResponse, Series

JsonObject = dict[str, object]
_DATAPOINT_FIELDS = 2


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode_value(raw: object, *, location: str) -> float | None:
    if raw is None:
        return None
    if not _is_number(raw):
        raise GraphiteDecodeError(
            f"{location}: value must be a number or null, got {type(raw).__name__}",
            cause="shape",
        )
    try:
        return float(raw)
    except OverflowError as exc:
        raise GraphiteDecodeError(f"{location}: value out of float range", cause="shape") from exc


def _decode_timestamp(raw: object, *, location: str) -> int:
    # JSON integers only; 1566577080.0 is rejected like any other non-integer.
    if not isinstance(raw, int) or isinstance(raw, bool):
        raise GraphiteDecodeError(
            f"{location}: timestamp must be an integer, got {type(raw).__name__}",
            cause="shape",
        )
    return raw


def parse_datapoint(raw: object, *, location: str = "datapoint") -> DataPoint:
    """Decode one ``[value, timestamp]`` pair.

    The first element is the value (``null`` means no data) and the second
    one the Unix timestamp in seconds.
    """

    if not isinstance(raw, list):
        raise GraphiteDecodeError(
            f"{location}: datapoint must be an array, got {type(raw).__name__}",
            cause="shape",
        )
    if len(raw) != _DATAPOINT_FIELDS:
        raise MalformedDataPointError(len(raw), _DATAPOINT_FIELDS, location=location)
    raw_value, raw_timestamp = raw
    return DataPoint(
        timestamp=_decode_timestamp(raw_timestamp, location=location),
        value=_decode_value(raw_value, location=location),
    )


def _series_from_item(item: object, *, index: int) -> Series:
    location = f"series[{index}]"
    if not isinstance(item, dict):
        raise GraphiteDecodeError(f"{location} must be an object", cause="shape")

    target = item.get("target")
    if target is None:
        target = ""
    if not isinstance(target, str):
        raise GraphiteDecodeError(f"{location}.target must be a string", cause="shape")

    raw_points = item.get("datapoints")
    if raw_points is None:
        raw_points = []
    if not isinstance(raw_points, list):
        raise GraphiteDecodeError(f"{location}.datapoints must be an array", cause="shape")

    points = tuple(
        parse_datapoint(raw, location=f"{location}.datapoints[{point_index}]")
        for point_index, raw in enumerate(raw_points)
    )
    return Series(target=target, datapoints=points)


def parse_render_payload(payload: object) -> RenderResponse:
    if not isinstance(payload, list):
        raise GraphiteDecodeError(
            f"response JSON root must be an array, got {type(payload).__name__}",
            cause="shape",
        )
    series = tuple(_series_from_item(item, index=index) for index, item in enumerate(payload))
    return RenderResponse(series=series)


def decode_render_body(body: bytes | str) -> RenderResponse:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise GraphiteDecodeError("response body is not valid JSON", cause="invalid_json") from exc
    return parse_render_payload(payload)


__all__ = [
    "parse_datapoint",
    "parse_render_payload",
    "decode_render_body",
]
