"""Liveness and readiness endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from user_service.api.dependencies import service
from user_service.messaging.nats_publisher import NatsPublisher
from user_service.models.api_model import HealthResponse, ReadyResponse
from user_service.settings import Settings

router = APIRouter(tags=["System"])

settings_dependency = Depends(service(Settings))
publisher_dependency = Depends(service(NatsPublisher))


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = settings_dependency) -> HealthResponse:
    """
    Liveness endpoint.

    Always healthy once the listener is up, whatever the state of NATS.
    """
    return HealthResponse(timestamp=datetime.now(UTC), version=settings.app_version)


@router.get("/ready", response_model=ReadyResponse)
async def ready(publisher: NatsPublisher = publisher_dependency) -> ReadyResponse:
    """Readiness endpoint, reporting whether the NATS connection is up."""
    return ReadyResponse(nats_connected=publisher.is_connected)
