"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from user_service.api import api_router
from user_service.api.health_check import router as health_router
from user_service.event_bus import EventBus
from user_service.events import register_event_handlers
from user_service.exception_handlers import register_exception_handlers
from user_service.lifecycle import ServiceLifecycle
from user_service.logging import setup_logging
from user_service.messaging.nats_publisher import NatsPublisher
from user_service.services.registry import ServiceRegistry
from user_service.services.user_store import UserStore
from user_service.settings import Settings, get_settings


def _log_server_endpoints_summary(settings: Settings) -> None:
    """Log the server URL and the available endpoints.

    Args:
        settings: Application settings containing host and port
    """
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"User service listening at: {server_url}")

    endpoints = [
        ("Health", "/health"),
        ("Readiness", "/ready"),
        ("Users", "/api/users"),
        ("Version", "/api/version"),
        ("API Docs", "/docs"),
    ]

    logger.info("Available endpoints:")
    for name, path in endpoints:
        logger.info(f"   {name}: {server_url}{path}")


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Handle startup and shutdown events for the application.

    The NATS connection is only scheduled here, so the listener comes up
    without waiting for the message bus.
    """
    settings: Settings = _app.state.settings
    lifecycle: ServiceLifecycle = _app.state.lifecycle

    setup_logging(settings.log_level)
    logger.info(f"Starting user service {settings.app_version} (commit {settings.git_commit})")
    _log_server_endpoints_summary(settings)

    lifecycle.startup()

    yield

    logger.info("Shutting down gracefully")
    await lifecycle.shutdown()
    logger.info("User service stopped")


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
    publisher: NatsPublisher | None = None,
) -> FastAPI:
    """Build an isolated application instance.

    Every instance owns its store, publisher, event bus and service registry;
    nothing is shared between two apps built by this function.

    Args:
        settings: Application settings, defaults to the cached process settings
        store: User store, a new empty one by default
        publisher: NATS publisher, one built from ``settings`` by default

    Returns:
        The configured FastAPI application
    """
    settings = settings or get_settings()
    store = store or UserStore()
    publisher = publisher or NatsPublisher(settings)

    registry = ServiceRegistry()
    event_bus = EventBus(registry)
    registry.register_singleton(Settings, settings)
    registry.register_singleton(UserStore, store)
    registry.register_singleton(NatsPublisher, publisher)
    registry.register_singleton(EventBus, event_bus)
    register_event_handlers(event_bus)

    app = FastAPI(
        lifespan=app_lifespan,
        title="User service",
        description="CRUD API over an in-memory user collection, publishing creation events to NATS",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.lifecycle = ServiceLifecycle(settings, publisher, event_bus)

    register_exception_handlers(app)

    app.include_router(health_router, prefix="")
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
