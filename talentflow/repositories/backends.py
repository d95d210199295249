"""
Storage Backends - TalentFlow
talentflow/repositories/backends.py

Key-value persistence for repository collections. Every backend stores a
collection (e.g. "evaluations") as a JSON-compatible list of dicts.

    memory  - process-local dict, used by tests and demos
    json    - single JSON document on disk, one key per collection
    redis   - one Redis string key per collection (prefix + collection)
"""

import copy
import json
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import redis

from talentflow.config import Settings
from talentflow.core.exceptions import StorageBackendException

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class StorageBackend(ABC):
    """Persistence interface used by BaseRepository."""

    name: str = "abstract"

    @abstractmethod
    def load(self, collection: str) -> List[Record]:
        """Return every stored record of a collection ([] when absent)."""

    @abstractmethod
    def save(self, collection: str, items: List[Record]) -> None:
        """Replace the whole collection."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every collection."""

    @abstractmethod
    def ping(self) -> bool:
        """True when the backend is reachable."""


class InMemoryBackend(StorageBackend):
    name = "memory"

    def __init__(self):
        self._data: Dict[str, List[Record]] = {}
        self._lock = threading.Lock()

    def load(self, collection: str) -> List[Record]:
        with self._lock:
            return copy.deepcopy(self._data.get(collection, []))

    def save(self, collection: str, items: List[Record]) -> None:
        with self._lock:
            self._data[collection] = copy.deepcopy(items)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def ping(self) -> bool:
        return True


class JsonFileBackend(StorageBackend):
    name = "json"

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, List[Record]]:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StorageBackendException(f"Failed to read {self.path}: {e}")

    def _write(self, data: Dict[str, List[Record]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            raise StorageBackendException(f"Failed to write {self.path}: {e}")

    def load(self, collection: str) -> List[Record]:
        with self._lock:
            return self._read().get(collection, [])

    def save(self, collection: str, items: List[Record]) -> None:
        with self._lock:
            data = self._read()
            data[collection] = items
            self._write(data)

    def clear(self) -> None:
        with self._lock:
            self._write({})

    def ping(self) -> bool:
        try:
            with self._lock:
                self._read()
            return True
        except StorageBackendException:
            return False


class RedisBackend(StorageBackend):
    name = "redis"

    def __init__(self, url: str, key_prefix: str = "talentflow:"):
        self.key_prefix = key_prefix
        self.client = redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=5,
        )

    def _key(self, collection: str) -> str:
        return f"{self.key_prefix}{collection}"

    def load(self, collection: str) -> List[Record]:
        try:
            data = self.client.get(self._key(collection))
            return json.loads(data) if data else []
        except redis.RedisError as e:
            raise StorageBackendException(f"Redis read failed: {e}")
        except json.JSONDecodeError as e:
            raise StorageBackendException(f"Corrupt data under {self._key(collection)}: {e}")

    def save(self, collection: str, items: List[Record]) -> None:
        try:
            self.client.set(self._key(collection), json.dumps(items, ensure_ascii=False))
        except redis.RedisError as e:
            raise StorageBackendException(f"Redis write failed: {e}")

    def clear(self) -> None:
        try:
            for key in self.client.scan_iter(match=f"{self.key_prefix}*"):
                self.client.delete(key)
        except redis.RedisError as e:
            raise StorageBackendException(f"Redis clear failed: {e}")

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except (redis.RedisError, ConnectionError):
            return False


def create_backend(settings: Settings) -> StorageBackend:
    """Build the backend selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "json":
        backend = JsonFileBackend(settings.DATA_FILE)
    elif settings.STORAGE_BACKEND == "redis":
        backend = RedisBackend(settings.REDIS_URL, settings.REDIS_KEY_PREFIX)
    else:
        backend = InMemoryBackend()
    logger.info(f"Storage backend: {backend.name}")
    return backend
