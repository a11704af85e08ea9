"""
Synchronous event channel.

Usage:
    >>> channel = EventChannel().on('ready', print).once('ready', print)
    >>> channel.emit('ready', 'hello')
    hello
    hello
    True
"""
from typing import Any, Callable, Dict, Hashable, List, Optional

from .core.config import ChannelConfig, check_max_listeners
from .core.events import OnceListener, is_once
from .core.exceptions import (
    InvalidListenerError,
    ListenerLimitError,
    ReadOnlyPropertyError
)
from .core.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[..., Any]


def _check_listener(listener: Any) -> None:
    if not callable(listener):
        raise InvalidListenerError()


class EventChannel:
    """
    Registry of event listeners with synchronous dispatch.

    Listeners are kept per event in registration order. Every mutating
    method returns the channel so calls can be chained.
    """

    def __init__(self, config: Optional[ChannelConfig] = None):
        """
        Initialize the channel.

        Args:
            config: Channel configuration (defaults to ChannelConfig.default())
        """
        config = (config or ChannelConfig.default()).validate()
        self._max_listeners: int = config.max_listeners
        self._events: Dict[Hashable, List[Listener]] = {}

    @property
    def max_listeners(self) -> int:
        """Per-event listener limit."""
        return self._max_listeners

    @max_listeners.setter
    def max_listeners(self, value: int) -> None:
        self._max_listeners = check_max_listeners(value)

    @property
    def events(self) -> Dict[Hashable, List[Listener]]:
        """Live mapping of event name to its listener list."""
        return self._events

    @events.setter
    def events(self, value) -> None:
        raise ReadOnlyPropertyError('events')

    def on(self, event_name: Hashable, listener: Listener) -> 'EventChannel':
        """
        Append a listener to the end of the event's listener list.

        The same listener may be added several times; it is then called
        once per registration.

        Args:
            event_name: Event name (any hashable value)
            listener: Callable invoked with the arguments passed to emit()

        Returns:
            The channel, for chaining

        Raises:
            InvalidListenerError: listener is not callable
            ListenerLimitError: the event already has max_listeners listeners
        """
        _check_listener(listener)

        listeners = self._events.setdefault(event_name, [])
        if len(listeners) >= self._max_listeners:
            raise ListenerLimitError(event_name, len(listeners), self._max_listeners)

        listeners.append(listener)
        logger.debug("Added listener %r to '%s' (%d total)", listener, event_name, len(listeners))
        return self

    def once(self, event_name: Hashable, listener: Listener) -> 'EventChannel':
        """
        Add a listener that is removed right after its next invocation.

        The registered entry is an OnceListener wrapping ``listener``, so
        off(event_name, listener) will not find it.

        Raises:
            InvalidListenerError: listener is not callable
            ListenerLimitError: the event already has max_listeners listeners
        """
        _check_listener(listener)
        return self.on(event_name, OnceListener(listener))

    def off(self, event_name: Hashable, listener: Listener) -> 'EventChannel':
        """
        Remove the most recently added instance of listener.

        At most one entry is removed per call. Unknown events and
        listeners are ignored.

        Raises:
            InvalidListenerError: listener is not callable
        """
        _check_listener(listener)

        listeners = self._events.get(event_name)
        if listeners:
            for i in range(len(listeners) - 1, -1, -1):
                if listeners[i] is listener:
                    del listeners[i]
                    logger.debug("Removed listener %r from '%s'", listener, event_name)
                    break

        return self

    def all_off(self, event_name: Hashable) -> 'EventChannel':
        """Drop every listener of the event, leaving no entry in events."""
        if self._events.pop(event_name, None) is not None:
            logger.debug("Removed all listeners from '%s'", event_name)
        return self

    def emit(self, event_name: Hashable, /, *args, **kwargs) -> bool:
        """
        Call each listener of the event in registration order.

        Once-listeners are removed after they return. The list is walked
        by index, so listeners added or removed by a listener during the
        pass are seen by the rest of the pass. Listener exceptions
        propagate and stop the pass.

        Returns:
            True if the event has a listener list (even an empty one)
        """
        listeners = self._events.get(event_name)
        if listeners is None:
            return False

        logger.debug("Emitting '%s' to %d listeners", event_name, len(listeners))
        i = 0
        while i < len(listeners):
            listener = listeners[i]
            listener(*args, **kwargs)
            if is_once(listener):
                del listeners[i:i + 1]
            else:
                i += 1

        return True

    # camelCase aliases
    allOff = all_off
    maxListeners = max_listeners

    def __repr__(self) -> str:
        return f"<EventChannel events={len(self._events)} max_listeners={self._max_listeners}>"
