"""Listener helpers."""
from .listener import OnceListener, is_once

__all__ = [
    'OnceListener',
    'is_once',
]
