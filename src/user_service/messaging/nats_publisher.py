"""Best-effort NATS publisher.

The publisher is a side channel: nothing it does may fail or slow down a
request. Connection problems and send failures are logged and swallowed, and
publishing while not connected is silently skipped.
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any

import nats
from loguru import logger
from nats.aio.client import Client as NatsClient
from nats.errors import Error as NatsError
from pydantic import BaseModel

from user_service.exceptions import AdapterError
from user_service.settings import Settings

Connector = Callable[..., Awaitable[NatsClient]]

# Failures the NATS client surfaces while connecting or sending
NATS_FAILURES = (NatsError, OSError, TimeoutError, ValueError)


class ConnectionState(StrEnum):
    """Connection state of the publisher."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CONNECT_FAILED = "connect_failed"


class NatsPublisher:
    """Publishes notifications to NATS when a connection is available.

    State machine: ``DISCONNECTED -> CONNECTING -> CONNECTED`` or
    ``DISCONNECTED -> CONNECTING -> CONNECT_FAILED``. ``close`` returns the
    publisher to ``DISCONNECTED``.
    """

    def __init__(self, settings: Settings, connector: Connector = nats.connect):
        """Initialize the publisher.

        Args:
            settings: Application settings (URL, timeouts, reconnect policy)
            connector: Coroutine function opening a NATS connection, ``nats.connect`` by default
        """
        self._settings = settings
        self._connector = connector
        self._client: NatsClient | None = None
        self._state = ConnectionState.DISCONNECTED

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """True while connected and the underlying client still reports a live connection."""
        return self._state is ConnectionState.CONNECTED and self._client is not None and bool(self._client.is_connected)

    async def connect(self, url: str | None = None) -> bool:
        """Try to connect once; never raises.

        Args:
            url: NATS server URL, defaults to ``settings.nats_url``

        Returns:
            True if the connection was established
        """
        if self._state in (ConnectionState.CONNECTING, ConnectionState.CONNECTED):
            return self.is_connected

        url = url or self._settings.nats_url
        self._state = ConnectionState.CONNECTING
        logger.info(f"Connecting to NATS at {url}")

        try:
            self._client = await self._open(url)
        except AdapterError as e:
            self._state = ConnectionState.CONNECT_FAILED
            logger.warning(f"{e}")
            logger.warning("Continuing without NATS integration")
            return False
        except asyncio.CancelledError:
            self._state = ConnectionState.DISCONNECTED
            raise
        except Exception as e:
            self._state = ConnectionState.CONNECT_FAILED
            logger.opt(exception=e).warning(f"Unexpected error connecting to NATS: {type(e).__name__}: {e}")
            logger.warning("Continuing without NATS integration")
            return False

        self._state = ConnectionState.CONNECTED
        logger.info("Connected to NATS")
        return True

    async def publish(self, topic: str, payload: bytes | BaseModel) -> bool:
        """Send one message if connected; never raises.

        Args:
            topic: NATS subject
            payload: Raw bytes, or a model serialized as camelCase JSON

        Returns:
            True if the message was handed to the client
        """
        if not self.is_connected:
            logger.debug(f"NATS not connected, skipping publish to {topic}")
            return False

        if isinstance(payload, BaseModel):
            payload = payload.model_dump_json(by_alias=True, exclude_none=True).encode()

        try:
            await self._send(topic, payload)
        except AdapterError as e:
            logger.warning(f"{e}")
            return False

        logger.debug(f"Published {topic} event ({len(payload)} bytes)")
        return True

    async def close(self) -> None:
        """Drain and release the connection; safe to call repeatedly or when never connected."""
        client, self._client = self._client, None
        self._state = ConnectionState.DISCONNECTED
        if client is None or client.is_closed:
            return

        logger.info("Closing NATS connection")
        try:
            await asyncio.wait_for(client.drain(), timeout=self._settings.nats_close_timeout)
        except NATS_FAILURES as e:
            logger.warning(f"NATS drain failed ({type(e).__name__}: {e}), closing connection")
            if not client.is_closed:
                await client.close()

        logger.info("NATS connection closed")

    async def _open(self, url: str) -> NatsClient:
        try:
            return await self._connector(
                servers=[url],
                name="user-service",
                connect_timeout=self._settings.nats_connect_timeout,
                max_reconnect_attempts=self._settings.nats_max_reconnect_attempts,
                error_cb=self._on_error,
                disconnected_cb=self._on_disconnected,
                reconnected_cb=self._on_reconnected,
                closed_cb=self._on_closed,
            )
        except NATS_FAILURES as e:
            raise AdapterError("connect", str(e) or type(e).__name__) from e

    async def _send(self, topic: str, payload: bytes) -> None:
        try:
            await self._client.publish(topic, payload)
        except NATS_FAILURES as e:
            raise AdapterError("publish", str(e) or type(e).__name__) from e

    async def _on_error(self, e: Any) -> None:
        logger.warning(f"NATS client error: {e}")

    async def _on_disconnected(self) -> None:
        logger.warning("NATS disconnected")

    async def _on_reconnected(self) -> None:
        logger.info("NATS reconnected")

    async def _on_closed(self) -> None:
        logger.debug("NATS connection closed by client")
