from __future__ import annotations

from typing import Protocol


class StorageError(RuntimeError):
    """Raised when a key-value store cannot complete a read or write."""


class KeyValueStore(Protocol):
    """String-valued key-value store used to persist the ticket collection."""

    async def get_string(self, key: str) -> str | None:
        ...

    async def set_string(self, key: str, value: str) -> None:
        ...
