"""Startup and shutdown sequencing around the message bus.

The HTTP listener must never wait for NATS: ``startup`` only schedules the
connection attempt. ``shutdown`` gives in-flight publishes a bounded grace
period and then closes the connection.
"""

import asyncio

from loguru import logger

from user_service.event_bus import EventBus
from user_service.messaging.nats_publisher import NatsPublisher
from user_service.settings import Settings


class ServiceLifecycle:
    """Owns the publisher's connection task and its teardown."""

    def __init__(self, settings: Settings, publisher: NatsPublisher, event_bus: EventBus):
        self.settings = settings
        self.publisher = publisher
        self.event_bus = event_bus
        self._connect_task: asyncio.Task | None = None

    @property
    def connect_task(self) -> asyncio.Task | None:
        """The background connection attempt, if one was started."""
        return self._connect_task

    def startup(self) -> None:
        """Schedule the NATS connection attempt and return immediately."""
        if not self.settings.nats_enabled:
            logger.info("NATS integration disabled")
            return

        self._connect_task = asyncio.create_task(self.publisher.connect(self.settings.nats_url), name="nats-connect")

    async def shutdown(self) -> None:
        """Stop the connect attempt, drain pending publishes, then close the publisher."""
        if self._connect_task is not None and not self._connect_task.done():
            logger.info("Cancelling pending NATS connection attempt")
            self._connect_task.cancel()
            await asyncio.gather(self._connect_task, return_exceptions=True)
        self._connect_task = None

        await self.event_bus.drain(self.settings.publish_grace_period)

        # Bounded by settings.nats_close_timeout inside the publisher
        await self.publisher.close()
