"""Main entry point for the user service using Typer and Pydantic Settings."""

import asyncio

import typer
import uvicorn
from loguru import logger

from user_service.logging import setup_logging
from user_service.messaging.nats_publisher import NatsPublisher
from user_service.settings import get_settings

app = typer.Typer()


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides PORT)",
    metavar="<port>",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
NATS_URL_OPTION = typer.Option(
    None,
    help="NATS server URL (overrides NATS_URL)",
    metavar="<url>",
)  # fmt: skip


def _update_settings(
    host: str | None,
    port: int | None,
    log_level: str | None,
    nats_url: str | None,
) -> None:
    """Update settings with CLI overrides.

    Args:
        host: Host override
        port: Port override
        log_level: Log level override
        nats_url: NATS URL override
    """
    settings = get_settings()

    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if log_level is not None:
        settings.log_level = log_level.upper()
    if nats_url is not None:
        settings.nats_url = nats_url


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    nats_url: str = NATS_URL_OPTION,
) -> None:
    """Run the user service.

    SIGTERM and SIGINT stop accepting connections, let in-flight requests
    finish, close the NATS connection and exit with code 0.
    """
    _update_settings(host, port, log_level, nats_url)

    settings = get_settings()

    setup_logging(settings.log_level)

    logger.info(f"Starting user service on {settings.host}:{settings.port}")

    from user_service.app import app as fastapi_app

    uvicorn.run(
        fastapi_app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


@app.command("check-bus")
def check_bus(
    log_level: str = LOG_LEVEL_OPTION,
    nats_url: str = NATS_URL_OPTION,
) -> None:
    """Try one NATS connection with the configured settings, then exit."""
    _update_settings(None, None, log_level, nats_url)

    settings = get_settings()

    setup_logging(settings.log_level)

    async def _check() -> bool:
        publisher = NatsPublisher(settings)
        try:
            return await publisher.connect(settings.nats_url)
        finally:
            await publisher.close()

    if asyncio.run(_check()):
        logger.info(f"NATS reachable at {settings.nats_url}")
    else:
        logger.error(f"NATS not reachable at {settings.nats_url}")
        raise SystemExit(1)


if __name__ == "__main__":
    app()
