"""SQLite implementation of the asynchronous key/value engine."""

import logging
import sqlite3
import time
from typing import Any, AsyncIterable, AsyncIterator, Callable, Iterable, Optional, Union

import aiosqlite

from ......core.exceptions import CheckpointError, KeyNotFoundError, StorageError
from ......core.models import BinaryValue, KeyMetadata
from ...base import KeyValueStoragePlugin
from ...utils import classify_value, collect_chunks, decode_value, encode_value, single_chunk_stream
from ..config import SqliteStorageConfig
from ..constants import (
    BACKUPDB,
    DELETE_RECORD,
    KV_SCHEMA,
    SELECT_HEAD,
    SELECT_VALUE,
    UPSERT_RECORD,
    WAL_CHECKPOINT,
)
from ..utils import (
    CheckpointPolicy,
    backup_connection,
    current_millis,
    initialize_table,
    restore_connection,
)

logger = logging.getLogger(__name__)


class SqliteKeyValueStorage(KeyValueStoragePlugin):
    """
    SQLite implementation of the asynchronous key/value engine.

    All records live in a single ``kv`` table on one long-lived aiosqlite
    connection, whose worker thread serializes statements. File-backed
    databases run in WAL mode and are checkpointed after writes and deletes
    according to the configured flush interval.

    Attributes:
        config (SqliteStorageConfig): Engine settings
        checkpoints (CheckpointPolicy): WAL checkpoint schedule
    """

    def __init__(
        self,
        config: Optional[SqliteStorageConfig] = None,
        is_binary_key: Optional[Callable[[str], bool]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize SQLite key/value storage.

        Args:
            config: Engine settings, defaults to an in-memory database
            is_binary_key: Host classifier for binary keys
            clock: Monotonic clock used by the checkpoint policy
        """
        self.config = config or SqliteStorageConfig()
        super().__init__(self.config.key_prefix, is_binary_key)
        self.checkpoints = CheckpointPolicy(
            self.config.flush_wal_minutes, clock=clock or time.monotonic
        )
        self._db: Optional[aiosqlite.Connection] = None

    @property
    def db(self) -> aiosqlite.Connection:
        if self._db is None:
            raise StorageError("Storage engine is not started")
        return self._db

    async def startup(self) -> None:
        """Open the database and create the kv table. See base class for details."""
        database = self.config.database
        logger.debug(f"connectString value => {self.config.connect_string}")
        try:
            self._db = await aiosqlite.connect(database)
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {database}: {str(e)}")
            raise StorageError(f"Failed to open database {database}: {str(e)}") from e

        await initialize_table(self._db, KV_SCHEMA, wal=not self.config.in_memory)
        logger.debug("setup completed")

    async def put(self, key: str, value: Any) -> None:
        """Store a value. See base class for details."""
        db = self.db
        storage_key = self.prep_key(key)
        stored, size = encode_value(classify_value(key, value, self.is_binary_key))

        try:
            await db.execute(UPSERT_RECORD, (storage_key, stored, current_millis(), size))
            await db.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to put key {storage_key}: {str(e)}")
            raise StorageError(f"Failed to put key: {storage_key}: {str(e)}") from e

        await self._flush_wal(f"put {storage_key}")

    async def put_stream(self, key: str, source: Union[AsyncIterable[Any], Iterable[Any]]) -> None:
        """Store a chunk stream as one binary value. See base class for details."""
        buf = await collect_chunks(source)
        await self.put(key, BinaryValue(buf))

    async def head(self, key: str) -> KeyMetadata:
        """Get value metadata. See base class for details."""
        storage_key = self.prep_key(key)
        row = await self._fetch_one(SELECT_HEAD, storage_key, "head")
        if row is None:
            raise KeyNotFoundError(f"Failed to head key: {storage_key}: Not found", key)

        lastmod, length = row
        return KeyMetadata(modified_time=lastmod // 1000, length=length)

    async def get(self, key: str) -> Any:
        """Fetch a value. See base class for details."""
        logger.debug(f"Fetching Object: {key}")
        storage_key = self.prep_key(key)
        row = await self._fetch_one(SELECT_VALUE, storage_key, "get")
        if row is None:
            raise KeyNotFoundError(f"Failed to get key: {storage_key}: Not found", key)

        stored, size = row
        try:
            return decode_value(stored, size)
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to decode key {storage_key}: {str(e)}")
            raise StorageError(f"Failed to decode key: {storage_key}: {str(e)}") from e

    async def get_stream(self, key: str) -> AsyncIterator[Any]:
        """Fetch a value as a single-chunk stream. See base class for details."""
        try:
            value = await self.get(key)
        except KeyNotFoundError:
            raise KeyNotFoundError(f"Failed to fetch key: {key}: Not found", key) from None
        except StorageError as e:
            message = f"Failed to fetch key: {key}: {str(e)}"
            logger.error(message)
            raise StorageError(message) from e

        return single_chunk_stream(value)

    async def delete(self, key: str) -> None:
        """Delete a value. See base class for details."""
        logger.debug(f"Deleting Object: {key}")
        db = self.db
        storage_key = self.prep_key(key)

        if await self._fetch_one(SELECT_HEAD, storage_key, "delete") is None:
            raise KeyNotFoundError(f"Failed to delete key: {storage_key}: Not found", key)

        try:
            await db.execute(DELETE_RECORD, (storage_key,))
            await db.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to delete key {storage_key}: {str(e)}")
            raise StorageError(f"Failed to delete key: {storage_key}: {str(e)}") from e

        await self._flush_wal(f"delete {storage_key}")

    async def run_maintenance(self) -> None:
        """Nothing to maintain; checkpoints run inline with writes."""
        pass

    async def shutdown(self) -> None:
        """Close the database. See base class for details."""
        if self._db is None:
            return
        logger.info("Closing database")
        db, self._db = self._db, None
        try:
            await db.close()
        except Exception as e:
            logger.warning(f"Error while closing database: {str(e)}")

    async def backup(self, backup_dir: str) -> None:
        """Create a backup of the database. See base class for details."""
        await backup_connection(self.db, backup_dir, BACKUPDB)
        logger.info(f"Created backup in directory: {backup_dir}")

    async def restore_from_backup(self, backup_dir: str) -> None:
        """Restore the database from a backup. See base class for details."""
        if await restore_connection(backup_dir, self.db, BACKUPDB):
            logger.info(f"Successfully restored from backup: {backup_dir}")

    async def _fetch_one(self, query: str, storage_key: str, operation: str) -> Optional[tuple]:
        db = self.db
        try:
            async with db.execute(query, (storage_key,)) as cursor:
                return await cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to {operation} key {storage_key}: {str(e)}")
            raise StorageError(f"Failed to {operation} key: {storage_key}: {str(e)}") from e

    async def _flush_wal(self, operation: str) -> None:
        """
        Checkpoint the WAL if the flush policy says one is due.

        Raises:
            CheckpointError: If the checkpoint fails; the mutation is committed
        """
        if not self.checkpoints.due():
            return

        try:
            async with self.db.execute(WAL_CHECKPOINT) as cursor:
                await cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"WAL checkpoint failed after {operation}: {str(e)}")
            raise CheckpointError(
                f"WAL checkpoint failed after committed {operation}: {str(e)}"
            ) from e

        self.checkpoints.record()
        logger.debug(f"WAL checkpoint completed after {operation}")
