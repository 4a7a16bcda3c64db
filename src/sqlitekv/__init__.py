"""
sqlitekv - SQLite key/value storage engine

This package adapts an embedded SQLite database into a key/value blob store
for pluggable storage frameworks. It includes:

- Asynchronous (aiosqlite) and synchronous (sqlite3) engines
- Binary and JSON value storage with size and modification metadata
- Key prefixing so several logical stores can share one table
- Time-based WAL checkpointing

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "sqlitekv Team"
__license__ = "MIT"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("sqlitekv requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.exceptions import KeyNotFoundError, StorageError
from .core.models import BinaryValue, KeyMetadata, StructuredValue
from .infrastructure.storage import (
    SqliteKeyValueStorage,
    SqliteStorageConfig,
    SyncSqliteKeyValueStorage,
)

__all__ = [
    "SqliteKeyValueStorage",
    "SyncSqliteKeyValueStorage",
    "SqliteStorageConfig",
    "BinaryValue",
    "StructuredValue",
    "KeyMetadata",
    "KeyNotFoundError",
    "StorageError",
]
