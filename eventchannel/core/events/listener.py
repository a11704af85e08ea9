"""Listener wrappers used by EventChannel."""
from typing import Any, Callable


class OnceListener:
    """Callable wrapper registered by EventChannel.once().

    Calls the wrapped listener with the same arguments. The channel removes
    the wrapper from its list right after invoking it, because ``once`` is True.
    """

    once = True

    __slots__ = ('listener',)

    def __init__(self, listener: Callable[..., Any]):
        self.listener = listener

    def __call__(self, /, *args, **kwargs):
        return self.listener(*args, **kwargs)

    def __repr__(self) -> str:
        return f"OnceListener({self.listener!r})"


def is_once(listener: Callable[..., Any]) -> bool:
    """Returns True if the listener is flagged for removal after one call.

    The flag must be exactly True, so truthy values and auto-created Mock
    attributes do not make a listener one-shot.
    """
    return getattr(listener, 'once', False) is True
