"""
User API - CRUD operations over the in-memory user store.

All endpoints delegate to UserStore. Errors raised by the store
(NotFoundError, ValidationError) are turned into JSON responses by the
application's exception handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from user_service.api.dependencies import service
from user_service.event_bus import EventBus
from user_service.events.types import UserCreatedEvent
from user_service.exceptions import NotFoundError
from user_service.models.api_model import UserCreateInput, UserListResponse, UserUpdateInput
from user_service.models.base_model import User
from user_service.services.user_store import UserStore

router = APIRouter()

store_dependency = Depends(service(UserStore))
event_bus_dependency = Depends(service(EventBus))


def parse_user_id(raw: str) -> int:
    """Parse a path segment into a user id.

    Anything that is not a plain decimal number cannot match a stored user,
    so it is reported the same way as an unknown id.

    Raises:
        NotFoundError: If the segment is not a decimal number
    """
    if not raw.isascii() or not raw.isdigit():
        raise NotFoundError(raw)
    try:
        return int(raw)
    except ValueError:
        # Longer than the interpreter allows for int conversion
        raise NotFoundError(raw) from None


@router.get("/users", response_model=UserListResponse, response_model_exclude_none=True)
async def list_users(store: UserStore = store_dependency) -> UserListResponse:
    """List all users in creation order."""
    users = store.list()
    return UserListResponse(users=users, count=len(users))


@router.get("/users/{user_id}", response_model=User, response_model_exclude_none=True)
async def get_user(user_id: str, store: UserStore = store_dependency) -> User:
    """Get a user by id.

    Raises:
        NotFoundError: If the user does not exist
    """
    return store.get(parse_user_id(user_id))


@router.post("/users", response_model=User, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreateInput | None = None,
    store: UserStore = store_dependency,
    event_bus: EventBus = event_bus_dependency,
) -> User:
    """Create a user and announce it on the event bus.

    The event is emitted fire-and-forget; the response never waits for it.

    Raises:
        ValidationError: If name or email is missing or empty
    """
    payload = payload or UserCreateInput()
    user = store.create(payload.name, payload.email)
    event_bus.emit(UserCreatedEvent(user=user))
    return user


@router.put("/users/{user_id}", response_model=User, response_model_exclude_none=True)
async def update_user(
    user_id: str,
    payload: UserUpdateInput | None = None,
    store: UserStore = store_dependency,
) -> User:
    """Update a user's name and/or email; omitted fields keep their value.

    Raises:
        NotFoundError: If the user does not exist
    """
    payload = payload or UserUpdateInput()
    return store.update(parse_user_id(user_id), name=payload.name, email=payload.email)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, store: UserStore = store_dependency) -> Response:
    """Delete a user.

    Raises:
        NotFoundError: If the user does not exist
    """
    store.delete(parse_user_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
