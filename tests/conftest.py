"""Shared fixtures for the user service tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from user_service.app import create_app
from user_service.messaging.nats_publisher import NatsPublisher
from user_service.services.user_store import UserStore
from user_service.settings import Settings


class FakeNatsClient:
    """Stands in for ``nats.aio.client.Client``: records publishes, no network."""

    def __init__(self):
        self.is_connected = True
        self.is_closed = False
        self.published: list[tuple[str, bytes]] = []
        self.publish_error: Exception | None = None
        self.drained = False

    async def publish(self, subject: str, payload: bytes) -> None:
        if self.publish_error is not None:
            raise self.publish_error
        self.published.append((subject, payload))

    async def drain(self) -> None:
        self.drained = True
        self.is_connected = False
        self.is_closed = True

    async def close(self) -> None:
        self.is_connected = False
        self.is_closed = True


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment, with short shutdown bounds."""
    return Settings(
        _env_file=None,
        host="127.0.0.1",
        port=3000,
        nats_url="nats://localhost:4222",
        nats_enabled=False,
        nats_close_timeout=0.5,
        publish_grace_period=0.5,
        app_version="1.2.3",
        build_time="2024-05-01T12:00:00Z",
        git_commit="abc1234",
    )


@pytest.fixture
def fake_nats_client() -> FakeNatsClient:
    return FakeNatsClient()


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def client(settings: Settings, store: UserStore):
    """Test client for an app running without NATS."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def connected_app(settings: Settings, store: UserStore, fake_nats_client: FakeNatsClient):
    """App whose publisher connects to a fake NATS client at startup."""
    settings.nats_enabled = True
    publisher = NatsPublisher(settings, connector=AsyncMock(return_value=fake_nats_client))
    return create_app(settings=settings, store=store, publisher=publisher)
