"""Key-value storage port and adapters."""

from .base import KeyValueStore, StorageError
from .file import JsonFileKeyValueStore
from .memory import InMemoryKeyValueStore

__all__ = [
    "KeyValueStore",
    "StorageError",
    "JsonFileKeyValueStore",
    "InMemoryKeyValueStore",
]
