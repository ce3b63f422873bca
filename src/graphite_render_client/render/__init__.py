"""Render endpoint package."""

from .models import DataPoint, RenderResponse, Series
from .queries import AbsoluteTime, RelativeTime, RenderQuery, TimeBound

__all__ = [
    "RenderQuery",
    "RelativeTime",
    "AbsoluteTime",
    "TimeBound",
    "RenderResponse",
    "Series",
    "DataPoint",
]
