"""
Channel configuration module.

Holds construction-time settings for EventChannel.
"""
from dataclasses import dataclass

from .exceptions import InvalidMaxListenersError


def check_max_listeners(value) -> int:
    """Validate a max_listeners value and return it."""
    # bool is an int subclass but never a valid capacity
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidMaxListenersError(value)
    return value


@dataclass
class ChannelConfig:
    """
    EventChannel configuration.

    max_listeners is the per-event listener limit applied by on() and once().
    """
    max_listeners: int = 10

    @classmethod
    def default(cls) -> 'ChannelConfig':
        """Create default configuration."""
        return cls()

    def validate(self) -> 'ChannelConfig':
        """Raise InvalidMaxListenersError if the settings are unusable."""
        check_max_listeners(self.max_listeners)
        return self
