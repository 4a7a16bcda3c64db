"""SQLite storage implementations."""

from .kv_storage import SqliteKeyValueStorage
from .sync_kv_storage import SyncSqliteKeyValueStorage

__all__ = [
    "SqliteKeyValueStorage",
    "SyncSqliteKeyValueStorage",
]
