"""Key-value store kept as a single JSON object file on local disk."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from .base import StorageError

logger = logging.getLogger(__name__)


def read_store_file(path: Path) -> dict[str, str]:
    """Return the key/value mapping stored at ``path`` (empty when missing)."""

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise StorageError(f"Could not read store file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise StorageError(f"Store file {path} is not valid UTF-8: {exc}") from exc

    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Store file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict) or not all(isinstance(value, str) for value in data.values()):
        raise StorageError(f"Store file {path} must contain a JSON object of strings")
    return data


def write_store_file(path: Path, data: dict[str, str]) -> None:
    """Replace the store file atomically with ``data``."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise StorageError(f"Could not write store file {path}: {exc}") from exc


class JsonFileKeyValueStore:
    """Persist string values under keys in one JSON file.

    Every write rewrites the whole file through a temporary file and an atomic
    rename, so readers never observe a partially written store.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def get_string(self, key: str) -> str | None:
        data = await asyncio.to_thread(read_store_file, self._path)
        return data.get(key)

    async def set_string(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    def _update(self, key: str, value: str) -> None:
        data = read_store_file(self._path)
        data[key] = value
        write_store_file(self._path, data)
        logger.debug("Wrote key %s to %s", key, self._path)
