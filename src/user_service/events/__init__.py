"""Event system for the user service.

This module provides event types and handlers for decoupled communication
between components in the system.
"""

from loguru import logger

from user_service.event_bus import EventBus
from user_service.events.types import UserCreatedEvent
from user_service.events.user_handlers import UserCreatedPublisher

__all__ = [
    "UserCreatedEvent",
    "UserCreatedPublisher",
    "register_event_handlers",
]


def register_event_handlers(event_bus: EventBus) -> None:
    """Register event handlers in the event bus.

    Args:
        event_bus: The application's event bus
    """
    logger.debug("Registering event handlers in event bus")

    event_bus.on(UserCreatedEvent, UserCreatedPublisher)

    logger.info("Event handlers registered successfully")
