"""Pydantic models for the user service."""

from .api_model import HealthResponse, ReadyResponse, UserCreateInput, UserListResponse, UserUpdateInput
from .base_model import CamelModel, User

__all__ = [
    "CamelModel",
    "HealthResponse",
    "ReadyResponse",
    "User",
    "UserCreateInput",
    "UserListResponse",
    "UserUpdateInput",
]
