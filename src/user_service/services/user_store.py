"""In-memory store for user records."""

import threading
from datetime import UTC, datetime

from loguru import logger

from user_service.exceptions import NotFoundError, ValidationError
from user_service.models.base_model import User


class UserStore:
    """Owns the user collection and the id counter.

    Ids start at 1 and only ever grow; a deleted id is never handed out again.
    Every operation holds the store lock, so the store stays consistent when
    called from thread-pool workers as well as from the event loop. Records
    are returned as copies so callers cannot change stored state behind the
    store's back.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._next_id = 1

    def list(self) -> list[User]:
        """Return all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def count(self) -> int:
        """Return the number of stored users."""
        with self._lock:
            return len(self._users)

    def get(self, user_id: int) -> User:
        """Get a user by id.

        Raises:
            NotFoundError: If no user has this id
        """
        with self._lock:
            return self._find(user_id).model_copy()

    def create(self, name: str | None, email: str | None) -> User:
        """Create a user with the next id.

        Args:
            name: User name, required and non-empty
            email: User email, required and non-empty

        Returns:
            The created user

        Raises:
            ValidationError: If name or email is missing or empty
        """
        if not name or not email:
            raise ValidationError()

        with self._lock:
            user = User(id=self._next_id, name=name, email=email, created_at=datetime.now(UTC))
            self._next_id += 1
            self._users.append(user)

        logger.debug(f"Store: created user {user.id}")
        return user.model_copy()

    def update(self, user_id: int, name: str | None = None, email: str | None = None) -> User:
        """Update a user's name and/or email.

        Fields that are missing or empty keep their previous value. ``id`` and
        ``created_at`` never change; ``updated_at`` is stamped on every call.

        Raises:
            NotFoundError: If no user has this id
        """
        with self._lock:
            user = self._find(user_id)
            user.name = name or user.name
            user.email = email or user.email
            user.updated_at = datetime.now(UTC)
            updated = user.model_copy()

        logger.debug(f"Store: updated user {user_id}")
        return updated

    def delete(self, user_id: int) -> None:
        """Remove a user.

        Raises:
            NotFoundError: If no user has this id
        """
        with self._lock:
            self._users.remove(self._find(user_id))

        logger.debug(f"Store: deleted user {user_id}")

    def reset(self) -> None:
        """Drop all users and restart ids at 1."""
        with self._lock:
            self._users.clear()
            self._next_id = 1

    def _find(self, user_id: int) -> User:
        for user in self._users:
            if user.id == user_id:
                return user
        raise NotFoundError(user_id)
