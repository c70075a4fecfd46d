"""Event type definitions for the user service.

Events are the way request handlers announce what happened without depending
on who reacts to it.
"""

from pydantic import BaseModel

from user_service.models.base_model import User


class UserCreatedEvent(BaseModel):
    """Event emitted after a user has been stored."""

    user: User
