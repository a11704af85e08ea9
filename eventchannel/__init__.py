"""
eventchannel - Minimal synchronous event emitter.

Usage:
    >>> from eventchannel import EventChannel
    >>>
    >>> channel = EventChannel()
    >>> channel.on('data', handle).once('end', finish)
    >>> channel.emit('data', chunk)
"""
import logging
from .channel import EventChannel

# Configuration
from .core.config import ChannelConfig

# Listener helpers
from .core.events import OnceListener, is_once

# Errors
from .core.exceptions import (
    ChannelException,
    InvalidListenerError,
    ListenerLimitError,
    InvalidMaxListenersError,
    ReadOnlyPropertyError
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for eventchannel modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'eventchannel',
        'eventchannel.channel',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'EventChannel',
    'ChannelConfig',
    'OnceListener',
    'is_once',
    'ChannelException',
    'InvalidListenerError',
    'ListenerLimitError',
    'InvalidMaxListenersError',
    'ReadOnlyPropertyError',
    'setup_logging',
    '__version__',
]
