"""Utilities for SQLite storage plugin."""

from .checkpoint import CheckpointPolicy, parse_flush_minutes
from .persistence import (
    backup_connection,
    backup_database,
    current_millis,
    initialize_table,
    initialize_table_sync,
    restore_connection,
    restore_database,
)

__all__ = [
    "CheckpointPolicy",
    "parse_flush_minutes",
    "current_millis",
    "initialize_table",
    "initialize_table_sync",
    "backup_connection",
    "restore_connection",
    "backup_database",
    "restore_database",
]
