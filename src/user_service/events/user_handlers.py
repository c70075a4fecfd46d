"""User-related event handlers."""

from loguru import logger

from user_service.constants import SUBJECT_USER_CREATED
from user_service.event_bus.core import EventHandler
from user_service.events.types import UserCreatedEvent
from user_service.messaging.nats_publisher import NatsPublisher


class UserCreatedPublisher(EventHandler[UserCreatedEvent]):
    """Forwards newly created users to NATS on the ``user.created`` subject."""

    def __init__(self, publisher: NatsPublisher):
        self.publisher = publisher

    async def handle(self, event: UserCreatedEvent) -> bool:
        published = await self.publisher.publish(SUBJECT_USER_CREATED, event.user)
        if published:
            logger.info(f"Published {SUBJECT_USER_CREATED} event: {event.user.id}")
        return published
