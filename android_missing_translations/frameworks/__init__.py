"""Resource format adapters."""

from .base import BaseAdapter, StringEntry, DEFAULT_LOCALE
from .android import AndroidAdapter

__all__ = [
    'BaseAdapter',
    'StringEntry',
    'DEFAULT_LOCALE',
    'AndroidAdapter',
]
