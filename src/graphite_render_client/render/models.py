"""Render response models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class DataPoint:
    timestamp: int
    value: float | None

    @property
    def is_empty(self) -> bool:
        return self.value is None


@dataclass(slots=True, frozen=True)
class Series:
    """One target worth of datapoints, in the order the backend sent them."""

    target: str
    datapoints: tuple[DataPoint, ...] | list[DataPoint] = ()

    def __post_init__(self) -> None:
        if isinstance(self.datapoints, tuple):
            return
        object.__setattr__(self, "datapoints", tuple(self.datapoints))

    def __len__(self) -> int:
        return len(self.datapoints)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.datapoints)

    def timestamps(self) -> tuple[int, ...]:
        return tuple(point.timestamp for point in self.datapoints)

    def values(self) -> tuple[float | None, ...]:
        return tuple(point.value for point in self.datapoints)


@dataclass(slots=True, frozen=True)
class RenderResponse:
    series: tuple[Series, ...] | list[Series] = ()

    def __post_init__(self) -> None:
        if isinstance(self.series, tuple):
            return
        object.__setattr__(self, "series", tuple(self.series))

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.series)

    def targets(self) -> tuple[str, ...]:
        return tuple(item.target for item in self.series)


__all__ = [
    "DataPoint",
    "Series",
    "RenderResponse",
]
