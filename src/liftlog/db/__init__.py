"""Database layer for liftlog."""

from .engine import get_db_path, init_db
from .repositories import WeightRepository, WorkoutRepository
from .storage import (
    KeyValueStore,
    MemoryKeyValueStore,
    SqliteKeyValueStore,
    StorageError,
)

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqliteKeyValueStore",
    "StorageError",
    "WeightRepository",
    "WorkoutRepository",
]
