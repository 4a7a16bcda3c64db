"""SQLite implementation of the synchronous key/value engine."""

import logging
import sqlite3
import threading
from typing import Any, Callable, Iterable, Iterator, Optional

from ......core.exceptions import KeyNotFoundError, StorageError
from ......core.models import BinaryValue, KeyMetadata
from ...base import SyncKeyValueStoragePlugin
from ...utils import classify_value, collect_chunks_sync, decode_value, encode_value, iter_single_chunk
from ..config import SqliteStorageConfig
from ..constants import BACKUPDB, DELETE_RECORD, KV_SCHEMA, SELECT_HEAD, SELECT_VALUE, UPSERT_RECORD
from ..utils import backup_database, current_millis, initialize_table_sync, restore_database

logger = logging.getLogger(__name__)


class SyncSqliteKeyValueStorage(SyncKeyValueStoragePlugin):
    """
    SQLite implementation of the synchronous key/value engine.

    Uses the standard ``sqlite3`` module in autocommit mode on one connection.
    Calls run to completion before returning and are serialized by a lock, so
    the engine can be shared between threads. No WAL checkpoint policy is
    applied; SQLite's automatic checkpointing is left in charge.

    Attributes:
        config (SqliteStorageConfig): Engine settings
    """

    def __init__(
        self,
        config: Optional[SqliteStorageConfig] = None,
        is_binary_key: Optional[Callable[[str], bool]] = None,
    ):
        self.config = config or SqliteStorageConfig()
        super().__init__(self.config.key_prefix, is_binary_key)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Storage engine is not started")
        return self._conn

    def startup(self) -> None:
        database = self.config.database
        logger.debug(f"connectString value => {self.config.connect_string}")
        try:
            self._conn = sqlite3.connect(database, isolation_level=None, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {database}: {str(e)}")
            raise StorageError(f"Failed to open database {database}: {str(e)}") from e

        initialize_table_sync(self._conn, KV_SCHEMA)
        logger.debug("setup completed")

    def put(self, key: str, value: Any) -> None:
        storage_key = self.prep_key(key)
        stored, size = encode_value(classify_value(key, value, self.is_binary_key))
        self._execute(UPSERT_RECORD, (storage_key, stored, current_millis(), size), "put")

    def put_stream(self, key: str, source: Iterable[Any]) -> None:
        self.put(key, BinaryValue(collect_chunks_sync(source)))

    def head(self, key: str) -> KeyMetadata:
        storage_key = self.prep_key(key)
        row = self._fetch_one(SELECT_HEAD, storage_key, "head")
        if row is None:
            raise KeyNotFoundError(f"Failed to head key: {storage_key}: Not found", key)

        lastmod, length = row
        return KeyMetadata(modified_time=lastmod // 1000, length=length)

    def get(self, key: str) -> Any:
        logger.debug(f"Fetching Object: {key}")
        storage_key = self.prep_key(key)
        row = self._fetch_one(SELECT_VALUE, storage_key, "get")
        if row is None:
            raise KeyNotFoundError(f"Failed to get key: {storage_key}: Not found", key)

        stored, size = row
        try:
            return decode_value(stored, size)
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to decode key {storage_key}: {str(e)}")
            raise StorageError(f"Failed to decode key: {storage_key}: {str(e)}") from e

    def get_stream(self, key: str) -> Iterator[Any]:
        try:
            value = self.get(key)
        except KeyNotFoundError:
            raise KeyNotFoundError(f"Failed to fetch key: {key}: Not found", key) from None
        except StorageError as e:
            message = f"Failed to fetch key: {key}: {str(e)}"
            logger.error(message)
            raise StorageError(message) from e

        return iter_single_chunk(value)

    def delete(self, key: str) -> None:
        logger.debug(f"Deleting Object: {key}")
        storage_key = self.prep_key(key)
        with self._lock:
            if self._fetch_one(SELECT_HEAD, storage_key, "delete") is None:
                raise KeyNotFoundError(f"Failed to delete key: {storage_key}: Not found", key)
            self._execute(DELETE_RECORD, (storage_key,), "delete")

    def run_maintenance(self) -> None:
        pass

    def shutdown(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            logger.info("Closing database")
            conn, self._conn = self._conn, None
            try:
                conn.close()
            except Exception as e:
                logger.warning(f"Error while closing database: {str(e)}")

    def backup(self, backup_dir: str) -> None:
        with self._lock:
            backup_database(self.conn, backup_dir, BACKUPDB)
        logger.info(f"Created backup in directory: {backup_dir}")

    def restore_from_backup(self, backup_dir: str) -> None:
        with self._lock:
            restored = restore_database(backup_dir, self.conn, BACKUPDB)
        if restored:
            logger.info(f"Successfully restored from backup: {backup_dir}")

    def _execute(self, query: str, params: tuple, operation: str) -> None:
        storage_key = params[0]
        with self._lock:
            try:
                self.conn.execute(query, params)
            except sqlite3.Error as e:
                logger.error(f"Failed to {operation} key {storage_key}: {str(e)}")
                raise StorageError(f"Failed to {operation} key: {storage_key}: {str(e)}") from e

    def _fetch_one(self, query: str, storage_key: str, operation: str) -> Optional[tuple]:
        with self._lock:
            try:
                return self.conn.execute(query, (storage_key,)).fetchone()
            except sqlite3.Error as e:
                logger.error(f"Failed to {operation} key {storage_key}: {str(e)}")
                raise StorageError(f"Failed to {operation} key: {storage_key}: {str(e)}") from e
