"""Key-value storage backends.

Repositories only need two operations: read a text value by key and
write one. `set` reports failure by returning False instead of raising,
so callers decide how to surface it.
"""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiosqlite

from .engine import get_db_path

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when a write to the key-value store fails."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for text key-value storage."""

    async def get(self, key: str) -> str | None:
        """Read the value stored under key, or None."""
        ...

    async def set(self, key: str, value: str) -> bool:
        """Store value under key. Returns False on failure."""
        ...


class SqliteKeyValueStore:
    """Key-value store backed by the kv_store SQLite table."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str) -> str | None:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row[0]

    async def set(self, key: str, value: str) -> bool:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, value),
                )
                await db.commit()
        except aiosqlite.Error as e:
            logger.error("Failed to write key %r: %s", key, e)
            return False
        return True


class MemoryKeyValueStore:
    """In-process key-value store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True
