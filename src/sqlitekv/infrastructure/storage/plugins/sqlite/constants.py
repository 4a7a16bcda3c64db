"""
Constants for SQLite storage plugin.

This module defines constants used by the SQLite storage implementation:
- Database targets and backup file names
- SQL schema definition
- Statements issued by the key/value engines
"""

# Database targets
MEMORY_DATABASE = ":memory:"
BACKUPDB = "kv.db"

# Minutes between WAL checkpoints when not configured
DEFAULT_FLUSH_WAL_MINUTES = 1

# SQL Schema Definitions

KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key TEXT NOT NULL,
    val BLOB,
    lastmod INTEGER,
    size INTEGER,
    PRIMARY KEY (key)
)
"""

# Key/value statements

UPSERT_RECORD = "INSERT OR REPLACE INTO kv (key, val, lastmod, size) VALUES (?, ?, ?, ?)"

# JSON rows carry no size; their length is the byte length of the stored text
SELECT_HEAD = "SELECT lastmod, coalesce(size, length(CAST(val AS BLOB))) FROM kv WHERE key = ?"

SELECT_VALUE = "SELECT val, size FROM kv WHERE key = ?"

DELETE_RECORD = "DELETE FROM kv WHERE key = ?"

# Durability

ENABLE_WAL = "PRAGMA journal_mode=WAL"
WAL_CHECKPOINT = "PRAGMA wal_checkpoint(TRUNCATE)"
