"""
Custom exceptions for event channel operations.

This module defines exception classes raised by EventChannel.
"""
from typing import Any, Optional


class ChannelException(Exception):
    """Base exception for all event channel errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidListenerError(ChannelException, TypeError):
    """Exception raised when a listener argument is not callable."""

    def __init__(self, message: str = 'argument "listener" must be callable.') -> None:
        super().__init__(message, error_code=1)


class ListenerLimitError(ChannelException):
    """Exception raised when an event already holds max_listeners listeners."""

    def __init__(self, event_name: Any, count: int, limit: int) -> None:
        """
        Initialize the exception.

        Args:
            event_name: Event whose listener list is full
            count: Number of listeners already registered
            limit: The max_listeners value in effect
        """
        self.event_name = event_name
        self.count = count
        self.limit = limit
        super().__init__(
            f'{count} "{event_name}" listeners added. Please increase max_listeners.',
            error_code=2
        )


class InvalidMaxListenersError(ChannelException, ValueError):
    """Exception raised for a non-positive or non-integer max_listeners."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        super().__init__(
            'property "max_listeners" must be a positive integer.',
            error_code=3
        )


class ReadOnlyPropertyError(ChannelException, AttributeError):
    """Exception raised when assigning to a read-only channel property."""

    def __init__(self, name: str) -> None:
        super().__init__(f'can not set property "{name}".', error_code=4)
        # AttributeError.__init__ resets name
        self.name = name
