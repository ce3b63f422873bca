"""Public package exports for the Graphite render client."""

from .async_client import AsyncGraphiteClient
from .client import GraphiteClient
from .config import GraphiteClientConfig, TransportConfig
from .core.errors import (
    GraphiteApiError,
    GraphiteClientClosedError,
    GraphiteDecodeError,
    GraphiteRequestError,
    GraphiteTransportError,
    GraphiteUnexpectedStatusError,
    MalformedDataPointError,
)
from .render import (
    AbsoluteTime,
    DataPoint,
    RelativeTime,
    RenderQuery,
    RenderResponse,
    Series,
    TimeBound,
)

__all__ = [
    "GraphiteClient",
    "AsyncGraphiteClient",
    "GraphiteClientConfig",
    "TransportConfig",
    "RenderQuery",
    "RelativeTime",
    "AbsoluteTime",
    "TimeBound",
    "RenderResponse",
    "Series",
    "DataPoint",
    "GraphiteApiError",
    "GraphiteRequestError",
    "GraphiteTransportError",
    "GraphiteClientClosedError",
    "GraphiteUnexpectedStatusError",
    "GraphiteDecodeError",
    "MalformedDataPointError",
]
