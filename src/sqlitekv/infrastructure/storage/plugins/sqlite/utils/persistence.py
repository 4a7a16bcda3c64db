"""Utilities for SQLite database operations."""

import logging
import os
import sqlite3
import time

import aiosqlite

from sqlitekv.core.exceptions import StorageError

from ..constants import ENABLE_WAL

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """Current time in milliseconds since epoch."""
    return int(time.time() * 1000)


async def initialize_table(db: aiosqlite.Connection, schema: str, wal: bool = False) -> None:
    """
    Initialize a table on an open connection.

    Args:
        db: Open aiosqlite connection
        schema: SQL schema for table creation
        wal: Switch the database to WAL journal mode first

    Raises:
        StorageError: If initialization fails
    """
    try:
        if wal:
            await db.execute(ENABLE_WAL)
        await db.execute(schema)
        await db.commit()
    except sqlite3.Error as e:
        logger.error(f"Failed to initialize table: {str(e)}")
        raise StorageError(f"Failed to initialize table: {str(e)}") from e


def initialize_table_sync(conn: sqlite3.Connection, schema: str) -> None:
    """
    Synchronous counterpart of ``initialize_table``.

    Raises:
        StorageError: If initialization fails
    """
    try:
        conn.execute(schema)
        conn.commit()
    except sqlite3.Error as e:
        logger.error(f"Failed to initialize table: {str(e)}")
        raise StorageError(f"Failed to initialize table: {str(e)}") from e


async def backup_connection(db: aiosqlite.Connection, backup_dir: str, filename: str) -> None:
    """
    Create a backup of an open SQLite database.

    Uses SQLite's online backup API, so in-memory databases can be backed up
    and the copy is consistent while the connection stays in use.

    Args:
        db: Open aiosqlite connection
        backup_dir: Directory to store backup
        filename: Name of backup file

    Raises:
        StorageError: If backup fails
    """
    try:
        os.makedirs(backup_dir, exist_ok=True)
        backup_path = os.path.join(backup_dir, filename)
        async with aiosqlite.connect(backup_path) as dst:
            await db.backup(dst)
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Failed to backup database: {str(e)}")
        raise StorageError(f"Failed to backup database: {str(e)}") from e


async def restore_connection(backup_dir: str, db: aiosqlite.Connection, filename: str) -> bool:
    """
    Restore an open SQLite database from backup.

    Args:
        backup_dir: Directory containing backup
        db: Open aiosqlite connection to overwrite
        filename: Name of backup file

    Returns:
        True if a backup was restored, False if none exists

    Raises:
        StorageError: If restore fails
    """
    try:
        backup_path = os.path.join(backup_dir, filename)
        if not os.path.exists(backup_path):
            return False
        async with aiosqlite.connect(backup_path) as src:
            await src.backup(db)
        return True
    except sqlite3.Error as e:
        logger.error(f"Failed to restore database: {str(e)}")
        raise StorageError(f"Failed to restore database: {str(e)}") from e


def backup_database(conn: sqlite3.Connection, backup_dir: str, filename: str) -> None:
    """
    Synchronous counterpart of ``backup_connection``.

    Raises:
        StorageError: If backup fails
    """
    try:
        os.makedirs(backup_dir, exist_ok=True)
        backup_path = os.path.join(backup_dir, filename)
        dst = sqlite3.connect(backup_path)
        try:
            conn.backup(dst)
        finally:
            dst.close()
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Failed to backup database: {str(e)}")
        raise StorageError(f"Failed to backup database: {str(e)}") from e


def restore_database(backup_dir: str, conn: sqlite3.Connection, filename: str) -> bool:
    """
    Synchronous counterpart of ``restore_connection``.

    Raises:
        StorageError: If restore fails
    """
    try:
        backup_path = os.path.join(backup_dir, filename)
        if not os.path.exists(backup_path):
            return False
        src = sqlite3.connect(backup_path)
        try:
            src.backup(conn)
        finally:
            src.close()
        return True
    except sqlite3.Error as e:
        logger.error(f"Failed to restore database: {str(e)}")
        raise StorageError(f"Failed to restore database: {str(e)}") from e
