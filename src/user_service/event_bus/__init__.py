"""Event Bus System for Decoupled Component Communication.

This module provides a framework-agnostic event bus that lets request handlers
announce what happened without knowing who reacts to it. It supports:

- **Pydantic Event Models**: Type-safe event definitions using BaseModel
- **Async Handler Execution**: All handlers run asynchronously and concurrently
- **Fire-and-forget Emission**: ``emit`` schedules a task and returns at once
- **Dependency Injection**: Class handlers receive services from a ServiceRegistry
- **Error Isolation**: Handler failures don't affect other handlers or the emitter
- **Bounded Shutdown**: ``drain`` waits a grace period for pending emissions

## Quick Start

```python
from pydantic import BaseModel

from user_service.event_bus import EventBus

class UserCreatedEvent(BaseModel):
    user_id: int

async def log_user(event: UserCreatedEvent) -> None:
    print(f"created {event.user_id}")

bus = EventBus()
bus.on(UserCreatedEvent, log_user)
bus.emit(UserCreatedEvent(user_id=1))
...
await bus.drain(timeout=2.0)
```

For class-based handlers with dependency injection, see `core.py`.
"""

from .bus import EventBus
from .core import EventBusError, EventEmissionError, EventHandler, HandlerRegistrationError

__all__ = [
    "EventBus",
    "EventBusError",
    "EventEmissionError",
    "EventHandler",
    "HandlerRegistrationError",
]
