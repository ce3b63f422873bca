"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class GraphiteClientConfig:
    """Runtime configuration for the render client.

    ``base_url`` is the root of the Graphite installation; the ``render``
    segment is appended by the client.
    """

    base_url: str = "http://localhost:8080"
    user_agent: str = "graphite-render-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "GraphiteClientConfig",
]
