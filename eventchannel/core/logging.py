"""Logging utilities for eventchannel modules."""

import logging

PACKAGE_LOGGER = 'eventchannel'

# Library default: stay silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the eventchannel namespace.

    Names outside the package are nested below ``eventchannel``. The logger
    propagates to the root logger and only gets a default level when the
    root logger has no handlers yet.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f"{PACKAGE_LOGGER}.{name}"

    logger = logging.getLogger(name)
    logger.propagate = True

    # basicConfig() not called yet
    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger
