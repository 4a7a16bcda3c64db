"""
SQLite storage plugin.

This package provides SQLite-based implementations of the key/value storage
engine contract:
- SqliteKeyValueStorage: aiosqlite engine with a WAL checkpoint policy
- SyncSqliteKeyValueStorage: sqlite3 engine for synchronous hosts

Both store every record in a single ``kv`` table and share configuration,
key prefixing and value encoding.
"""

from .config import SqliteStorageConfig
from .constants import BACKUPDB, MEMORY_DATABASE
from .storage import SqliteKeyValueStorage, SyncSqliteKeyValueStorage

__all__ = [
    "SqliteKeyValueStorage",
    "SyncSqliteKeyValueStorage",
    "SqliteStorageConfig",
    "BACKUPDB",
    "MEMORY_DATABASE",
]
