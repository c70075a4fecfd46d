"""Message bus integration."""

from .nats_publisher import ConnectionState, NatsPublisher

__all__ = ["ConnectionState", "NatsPublisher"]
