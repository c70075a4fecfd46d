"""API models for the user service."""

from datetime import datetime

from user_service.models.base_model import CamelModel, User


class UserCreateInput(CamelModel):
    # Presence is checked by the store so a missing field yields the service's own 400 message
    name: str | None = None
    email: str | None = None


class UserUpdateInput(CamelModel):
    name: str | None = None
    email: str | None = None


class UserListResponse(CamelModel):
    users: list[User]
    count: int


class HealthResponse(CamelModel):
    """Liveness response."""

    status: str = "healthy"
    timestamp: datetime
    version: str


class ReadyResponse(CamelModel):
    """Readiness response, reflecting the message bus connection."""

    status: str = "ready"
    nats_connected: bool
