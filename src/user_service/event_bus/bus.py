"""Event Bus Implementation.

This module provides the EventBus class that handles event registration and
emission. Emission never blocks the caller: ``emit`` schedules the handlers on
the running loop and keeps track of the task so shutdown can wait for it for a
bounded time.
"""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel

from user_service.services.registry import ServiceRegistry

from .core import EventEmissionError, HandlerRegistrationError

T_Event = TypeVar("T_Event", bound=BaseModel)
T_Handler = Callable[..., Any]


class EventBus:
    """Framework-agnostic event bus for async event handling.

    Supports function and class-based handlers, uses a ServiceRegistry for
    dependency injection into class handlers, and isolates handler errors.

    Example:
        ```python
        bus = EventBus(registry)
        bus.on(UserCreatedEvent, UserCreatedPublisher)
        bus.emit(UserCreatedEvent(user=user))
        # Or wait for results:
        results = await bus.emit_and_wait(UserCreatedEvent(user=user))
        ```
    """

    def __init__(self, registry: ServiceRegistry | None = None, isolate_events: bool = False) -> None:
        """Initialize a new EventBus instance.

        Args:
            registry: Services available for injection into class handlers.
            isolate_events: If True, each handler receives a deep copy of the event.
                           Can be overridden per emit() call. Default is False.
        """
        self._handlers: dict[type[BaseModel], list[T_Handler]] = {}
        self._registry = registry or ServiceRegistry()
        self._isolate_events = isolate_events
        self._pending: set[asyncio.Task] = set()
        logger.debug(f"EventBus initialized (isolate_events={isolate_events})")

    def on(self, event_type: type[T_Event], handler: T_Handler) -> None:
        """Register a handler for an event type.

        Args:
            event_type: The Pydantic BaseModel class to handle
            handler: The handler function, class or class instance

        Raises:
            HandlerRegistrationError: If event_type is not BaseModel or handler is not callable
        """
        if not (isinstance(event_type, type) and issubclass(event_type, BaseModel)):
            raise HandlerRegistrationError(f"Event type must be a Pydantic BaseModel subclass, got: {event_type}")

        if not callable(handler):
            raise HandlerRegistrationError(f"Handler must be callable: {handler}")

        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Registered handler for {event_type.__name__}: {handler}")

    def remove_handler(self, event_type: type[T_Event], handler: T_Handler) -> bool:
        """Remove a specific handler for an event type."""
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Removed handler for {event_type.__name__}: {handler}")
                return True
            except ValueError:
                pass
        return False

    def clear_handlers(self, event_type: type[T_Event] | None = None) -> None:
        """Clear handlers for a specific event type or all events."""
        if event_type is None:
            self._handlers.clear()
            logger.debug("Cleared all handlers")
        elif event_type in self._handlers:
            del self._handlers[event_type]
            logger.debug(f"Cleared handlers for {event_type.__name__}")

    def get_handler_count(self, event_type: type[T_Event]) -> int:
        """Get the number of handlers registered for an event type."""
        return len(self._handlers.get(event_type, []))

    def get_registered_events(self) -> list[type[BaseModel]]:
        """Get all event types that have registered handlers."""
        return list(self._handlers.keys())

    @property
    def pending_count(self) -> int:
        """Number of emissions scheduled by ``emit`` that have not finished yet."""
        return len(self._pending)

    def emit(self, event: T_Event, isolate: bool | None = None) -> asyncio.Task:
        """Emit an event without waiting for completion (fire-and-forget).

        Must be called from a running event loop. The returned task never
        raises: handler failures end up in its result list.

        Args:
            event: The event to emit
            isolate: Whether to isolate events (deep copy per handler)

        Raises:
            EventEmissionError: If event is not a BaseModel instance
        """
        self._check_event(event)
        task = asyncio.create_task(self.emit_and_wait(event, isolate))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def emit_and_wait(self, event: T_Event, isolate: bool | None = None) -> list[Any]:
        """Emit an event and wait for all handlers to complete.

        Args:
            event: The event instance to emit
            isolate: If True, each handler receives a deep copy of the event.
                    If None (default), uses the bus-level setting.

        Returns:
            List of results from all handlers (including exceptions)

        Raises:
            EventEmissionError: If event is not a BaseModel instance
        """
        self._check_event(event)

        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers registered for {event_type.__name__}")
            return []

        logger.debug(f"Emitting {event_type.__name__} to {len(handlers)} handlers")

        should_isolate = isolate if isolate is not None else self._isolate_events

        tasks = []
        for handler in handlers:
            handler_event = event.model_copy(deep=True) if should_isolate else event
            tasks.append(self._execute_handler(handler, handler_event))

        results = await asyncio.gather(*tasks, return_exceptions=True)

        successful = sum(1 for r in results if not isinstance(r, BaseException))
        failed = len(results) - successful
        if failed > 0:
            logger.warning(f"Event {event_type.__name__}: {successful} successful, {failed} failed handlers")
        logger.trace(f"Event {event_type.__name__} results: {results}")

        return results

    async def drain(self, timeout: float) -> int:
        """Wait for pending emissions, abandoning the ones still running after ``timeout``.

        Args:
            timeout: Grace period in seconds

        Returns:
            Number of emissions that were cancelled
        """
        pending = set(self._pending)
        if not pending:
            return 0

        logger.debug(f"Waiting up to {timeout}s for {len(pending)} pending event emissions")
        _, not_done = await asyncio.wait(pending, timeout=timeout)

        for task in not_done:
            task.cancel()
        if not_done:
            await asyncio.gather(*not_done, return_exceptions=True)
            logger.warning(f"Abandoned {len(not_done)} pending event emissions after {timeout}s")

        return len(not_done)

    @staticmethod
    def _check_event(event: Any) -> None:
        if not isinstance(event, BaseModel):
            raise EventEmissionError(f"Event must be a BaseModel instance, got: {type(event).__name__}")

    async def _execute_handler(self, handler: T_Handler, event: T_Event) -> Any:
        """Execute a single handler, instantiating class handlers with their dependencies.

        Args:
            handler: The handler to execute (function, class or instance)
            event: The event to pass to the handler

        Returns:
            The handler's result or the exception it raised
        """
        try:
            if inspect.isclass(handler):
                handler_instance = self._instantiate_handler_class(handler)
                handler_method = getattr(handler_instance, "handle", None)
                if handler_method is None:
                    raise AttributeError(f"Handler class {handler.__name__} must have a 'handle' method")
                result = handler_method(event)
            else:
                result = handler(event)

            if inspect.isawaitable(result):
                result = await result
            return result

        except Exception as e:
            logger.error(f"Handler {handler} failed: {type(e).__name__}: {e}")
            return e

    def _instantiate_handler_class(self, handler_class: type) -> Any:
        """Instantiate a handler class, injecting constructor arguments by type annotation.

        Args:
            handler_class: The handler class to instantiate

        Returns:
            An instance of the handler class with dependencies injected
        """
        parameters = list(inspect.signature(handler_class.__init__).parameters.values())[1:]  # Skip 'self'

        kwargs = {}
        for param in parameters:
            if param.annotation is inspect.Parameter.empty:
                continue
            try:
                kwargs[param.name] = self._registry.get(param.annotation)
                logger.trace(f"Injected service '{param.annotation.__name__}' into handler class {handler_class.__name__}")
            except (KeyError, AttributeError):
                logger.trace(f"Service '{param.annotation}' not found for handler class {handler_class.__name__}")

        return handler_class(**kwargs)
