"""Core Event Bus Components.

This module contains the fundamental abstractions for the event bus system.
These components are framework-agnostic and can be used in any async Python
application.

## Key Components

- **EventHandler**: Base class for dependency-injectable event handlers
- **EventBusError**: Base exception for all event bus related errors
- **HandlerRegistrationError**: Raised when handler registration fails
- **EventEmissionError**: Raised when event emission fails

## Usage Example with Dependency Injection

```python
from user_service.event_bus.core import EventHandler

class UserCreatedAuditor(EventHandler[UserCreatedEvent]):
    def __init__(self, store: UserStore):
        self.store = store

    async def handle(self, event: UserCreatedEvent) -> int:
        return self.store.count()

# The EventBus injects UserStore when the handler is instantiated,
# provided it is registered in the bus's ServiceRegistry.
```

"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T_Event = TypeVar("T_Event", bound=BaseModel)


class EventHandler(ABC, Generic[T_Event]):
    """Base class for dependency-injectable event handlers.

    Event handlers should inherit from this class and implement the handle method.
    The generic type parameter specifies which event type this handler processes.
    """

    @abstractmethod
    async def handle(self, event: T_Event) -> Any:
        """Handle the event.

        Args:
            event: The event to handle. Must be an instance of the generic type.

        Returns:
            Optional result from handling the event. Can be any type or None.

        Raises:
            Any exception that occurs during handling. Exceptions are caught
            by the event bus and included in the results list.
        """

    def __call__(self, event: T_Event) -> Any:
        """Make the handler callable.

        This allows handler instances to be used directly with the event bus.
        """
        return self.handle(event)


class EventBusError(Exception):
    """Base exception for all event bus related errors."""


class HandlerRegistrationError(EventBusError):
    """Raised when handler registration fails.

    This occurs when:
    - The event type is not a Pydantic BaseModel
    - The handler is not callable
    """


class EventEmissionError(EventBusError):
    """Raised when event emission fails.

    This occurs when the event is not a Pydantic BaseModel instance.
    """
