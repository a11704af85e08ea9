"""Pytest fixtures for eventchannel tests."""
import pytest

from eventchannel import EventChannel


@pytest.fixture
def channel():
    """Returns a fresh channel with default settings."""
    return EventChannel()


@pytest.fixture
def calls():
    """Shared list listeners append to, in call order."""
    return []


@pytest.fixture
def make_listener(calls):
    """Factory for listeners that record (name, args, kwargs) into calls."""
    def factory(name):
        def listener(*args, **kwargs):
            calls.append((name, args, kwargs))
        listener.__name__ = name
        return listener
    return factory
