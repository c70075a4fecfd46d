"""Tests for the service registry."""

import pytest

from user_service.services.registry import ServiceRegistry
from user_service.services.user_store import UserStore
from user_service.settings import Settings


def test_register_and_get_singleton():
    registry = ServiceRegistry()
    store = UserStore()
    registry.register_singleton(UserStore, store)

    assert registry.get(UserStore) is store
    assert registry.get(UserStore) is store


def test_register_and_get_factory():
    """Factories are called on every lookup."""
    registry = ServiceRegistry()
    calls = 0

    def factory() -> UserStore:
        nonlocal calls
        calls += 1
        return UserStore()

    registry.register_factory(UserStore, factory)
    first = registry.get(UserStore)
    second = registry.get(UserStore)

    assert calls == 2
    assert first is not second


def test_settings_instance_is_returned_as_is():
    registry = ServiceRegistry()
    settings = Settings(_env_file=None)
    registry.register_singleton(Settings, settings)
    assert registry.get(Settings) is settings


def test_get_unregistered_service():
    registry = ServiceRegistry()
    with pytest.raises(KeyError, match="Service UserStore not registered"):
        registry.get(UserStore)


def test_contains():
    registry = ServiceRegistry()
    assert UserStore not in registry
    registry.register_singleton(UserStore, UserStore())
    assert UserStore in registry


def test_registries_are_independent():
    first, second = ServiceRegistry(), ServiceRegistry()
    first.register_singleton(UserStore, UserStore())
    assert UserStore not in second


def test_override_service():
    registry = ServiceRegistry()
    original, replacement = UserStore(), UserStore()
    registry.register_singleton(UserStore, original)
    registry.register_singleton(UserStore, replacement)
    assert registry.get(UserStore) is replacement
