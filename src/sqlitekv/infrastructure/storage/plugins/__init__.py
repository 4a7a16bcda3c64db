"""
Storage plugins package.

This package provides the key/value storage engine implementations:
- SQLite storage (asynchronous and synchronous engines)

Each plugin implements the base interfaces defined in the base package:
- StoragePlugin: Shared base with key namespacing and classification
- KeyValueStoragePlugin: Interface for asynchronous engines
- SyncKeyValueStoragePlugin: Interface for synchronous engines

The plugins package also provides common utilities used across implementations:
- Key prefixing and binary key classification
- Stored value encoding
- Single-chunk stream emulation
"""

from .base import KeyValueStoragePlugin, StoragePlugin, SyncKeyValueStoragePlugin
from .sqlite import SqliteKeyValueStorage, SqliteStorageConfig, SyncSqliteKeyValueStorage
from .utils import is_binary_key, prep_key

__all__ = [
    # Base interfaces
    "StoragePlugin",
    "KeyValueStoragePlugin",
    "SyncKeyValueStoragePlugin",
    # SQLite implementation
    "SqliteKeyValueStorage",
    "SyncSqliteKeyValueStorage",
    "SqliteStorageConfig",
    # Utilities
    "prep_key",
    "is_binary_key",
]
