"""
Key-value storage for Aimo Pulse.

Every entity is a JSON document stored under a string key. The store only
guarantees single-key atomicity; multi-key invariants are maintained by the
services through careful write ordering.

Two implementations are provided:
- InMemoryKeyValueStore: dict-backed, for tests and local development
- SupabaseKeyValueStore: a two-column ``kv_store`` table in Supabase
"""

import copy
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from supabase import Client

from .repository import BaseRepository

logger = logging.getLogger(__name__)


@runtime_checkable
class IKeyValueStore(Protocol):
    """Interface for the durable key-value map."""

    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under key, or None."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        ...

    def get_by_prefix(self, prefix: str) -> list[Any]:
        """Return the values of every key starting with prefix."""
        ...

    def get_many(self, keys: list[str]) -> list[Optional[Any]]:
        """Return values for keys in order, None for missing keys."""
        ...


class InMemoryKeyValueStore:
    """
    Key-value store held in a process-local dict.

    Values are deep-copied on write and read, so a caller mutating a
    returned document never changes what is stored.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def get_by_prefix(self, prefix: str) -> list[Any]:
        return [
            copy.deepcopy(value)
            for key, value in self._data.items()
            if key.startswith(prefix)
        ]

    def get_many(self, keys: list[str]) -> list[Optional[Any]]:
        return [self.get(key) for key in keys]

    def keys(self) -> list[str]:
        """All stored keys (useful in tests)."""
        return list(self._data.keys())

    def clear(self) -> None:
        self._data.clear()


def _escape_like(prefix: str) -> str:
    """Escape LIKE wildcards so the prefix is matched literally."""
    return prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SupabaseKeyValueStore(BaseRepository[Any]):
    """
    Key-value store backed by a Supabase table.

    Expected schema:
        create table kv_store (key text primary key, value jsonb not null);
    """

    def __init__(self, db: Client, table_name: str = "kv_store") -> None:
        super().__init__(db)
        self._table_name = table_name

    def _table(self):
        return self._db.table(self._table_name)

    def get(self, key: str) -> Optional[Any]:
        result = self._table().select("value").eq("key", key).limit(1).execute()
        if not result.data:
            return None
        return result.data[0]["value"]

    def set(self, key: str, value: Any) -> None:
        self._table().upsert({"key": key, "value": value}).execute()

    def delete(self, key: str) -> None:
        self._table().delete().eq("key", key).execute()

    def get_by_prefix(self, prefix: str) -> list[Any]:
        result = (
            self._table()
            .select("key, value")
            .like("key", f"{_escape_like(prefix)}%")
            .execute()
        )
        return [row["value"] for row in result.data or []]

    def get_many(self, keys: list[str]) -> list[Optional[Any]]:
        if not keys:
            return []
        result = self._table().select("key, value").in_("key", keys).execute()
        by_key = {row["key"]: row["value"] for row in result.data or []}
        return [by_key.get(key) for key in keys]
