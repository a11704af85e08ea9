"""Core building blocks: config, errors, logging and listener helpers."""
from .config import ChannelConfig
from .events import OnceListener, is_once
from .exceptions import (
    ChannelException,
    InvalidListenerError,
    ListenerLimitError,
    InvalidMaxListenersError,
    ReadOnlyPropertyError
)

__all__ = [
    'ChannelConfig',
    'OnceListener',
    'is_once',
    'ChannelException',
    'InvalidListenerError',
    'ListenerLimitError',
    'InvalidMaxListenersError',
    'ReadOnlyPropertyError',
]
