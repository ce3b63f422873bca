"""Query models for the render endpoint."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import TypeAlias


@dataclass(slots=True, frozen=True)
class RelativeTime:
    """Backend-defined offset such as ``-4h`` or ``-6d``, sent verbatim."""

    offset: str

    def to_param(self) -> str:
        return self.offset


@dataclass(slots=True, frozen=True)
class AbsoluteTime:
    """Concrete moment, sent as whole Unix seconds."""

    moment: datetime

    @classmethod
    def from_unix(cls, seconds: int | float) -> "AbsoluteTime":
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    def to_param(self) -> str:
        return str(math.floor(self.moment.timestamp()))


TimeBound: TypeAlias = RelativeTime | AbsoluteTime


def format_time_bound(bound: TimeBound) -> str:
    return bound.to_param()


@dataclass(slots=True, frozen=True)
class RenderQuery:
    targets: Sequence[str] = ()
    from_time: TimeBound | None = field(default=None, kw_only=True)
    until_time: TimeBound | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if isinstance(self.targets, str):
            raise TypeError("targets must be a sequence of str, not str")
        if not isinstance(self.targets, Sequence):
            raise TypeError("targets must be Sequence[str]")
        normalized: list[str] = []
        for target in self.targets:
            if not isinstance(target, str):
                raise TypeError("targets entries must be str")
            normalized.append(target)
        object.__setattr__(self, "targets", tuple(normalized))
        for name in ("from_time", "until_time"):
            bound = getattr(self, name)
            if bound is not None and not isinstance(bound, (RelativeTime, AbsoluteTime)):
                raise TypeError(f"{name} must be RelativeTime | AbsoluteTime | None")

    def with_targets(self, targets: Sequence[str]) -> "RenderQuery":
        return replace(self, targets=tuple(targets))


__all__ = [
    "RelativeTime",
    "AbsoluteTime",
    "TimeBound",
    "format_time_bound",
    "RenderQuery",
]
