"""API dependencies for FastAPI endpoints."""

from collections.abc import Callable
from typing import TypeVar

from fastapi import Request

T = TypeVar("T")


def service(service_type: type[T]) -> Callable[[Request], T]:
    """FastAPI dependency that provides a service by type.

    Services are looked up in the registry of the application serving the
    request, so every app built by ``create_app`` uses its own instances.

    Args:
        service_type: The type of service to retrieve from the registry

    Returns:
        A callable that returns the requested service instance

    Example:
        ```python
        @router.get("/endpoint")
        def endpoint(store: UserStore = Depends(service(UserStore))):
            return store.list()
        ```
    """

    def get_service(request: Request) -> T:
        return request.app.state.registry.get(service_type)

    return get_service
