"""Storage layer: key/value engine plugins."""

from .plugins import (
    KeyValueStoragePlugin,
    SqliteKeyValueStorage,
    SqliteStorageConfig,
    SyncKeyValueStoragePlugin,
    SyncSqliteKeyValueStorage,
)

__all__ = [
    "KeyValueStoragePlugin",
    "SyncKeyValueStoragePlugin",
    "SqliteKeyValueStorage",
    "SyncSqliteKeyValueStorage",
    "SqliteStorageConfig",
]
