"""
src/data/storage.py
───────────────────
Key-value storage for user preferences.

Provides:
  - KeyValueStorage : protocol with get() / set() / remove()
  - MemoryStorage   : dict-backed store; wraps the payload of a browser's
                      localStorage-persisted dcc.Store for one request, and
                      can simulate an unavailable backend

No backend raises: every operation returns a StorageResult, and a missing
key is a successful read with value None.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from src.data.models import StorageResult


class KeyValueStorage(Protocol):
    def get(self, key: str) -> StorageResult: ...

    def set(self, key: str, value: str) -> StorageResult: ...

    def remove(self, key: str) -> StorageResult: ...


class MemoryStorage:
    """Dict-backed storage. `available=False` makes every call fail."""

    def __init__(self, initial: Mapping[str, str] | None = None, available: bool = True) -> None:
        self.available = available
        self._data: dict[str, str] = dict(initial or {})

    @classmethod
    def from_client(cls, payload) -> "MemoryStorage":
        """
        Wrap a dcc.Store payload read from the browser.

        Anything other than a JSON object (never written, cleared, or
        tampered with) is treated as empty storage.
        """
        if not isinstance(payload, Mapping):
            return cls()
        return cls({k: v for k, v in payload.items() if isinstance(k, str) and isinstance(v, str)})

    def snapshot(self) -> dict[str, str]:
        """Copy of the stored entries, ready to send back to the browser."""
        return dict(self._data)

    def _unavailable(self, op: str, key: str) -> StorageResult:
        return StorageResult.failure(f"{op} {key!r}: storage unavailable")

    def get(self, key: str) -> StorageResult:
        if not self.available:
            return self._unavailable("read", key)
        return StorageResult.success(self._data.get(key))

    def set(self, key: str, value: str) -> StorageResult:
        if not self.available:
            return self._unavailable("write", key)
        self._data[key] = value
        return StorageResult.success(value)

    def remove(self, key: str) -> StorageResult:
        if not self.available:
            return self._unavailable("remove", key)
        self._data.pop(key, None)
        return StorageResult.success()
