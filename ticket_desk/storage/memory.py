from __future__ import annotations

from typing import Mapping


class InMemoryKeyValueStore:
    """Process-local store; contents vanish with the instance."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get_string(self, key: str) -> str | None:
        return self._data.get(key)

    async def set_string(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
