"""
Core interfaces for storage plugins.

This module defines the storage engine contract that plugins must implement:
- StoragePlugin: Shared base with key namespacing and value classification
- KeyValueStoragePlugin: Asynchronous key/value engine contract
- SyncKeyValueStoragePlugin: Synchronous key/value engine contract

Both contracts expose the same operations; they differ only in whether results
are awaited or returned directly.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterable, AsyncIterator, Callable, Iterable, Iterator, Optional, Union

from .....core.models import KeyMetadata
from ..utils import is_binary_key as default_is_binary_key
from ..utils import prep_key


class StoragePlugin(ABC):
    """
    Abstract base class for key/value storage plugins.

    Attributes:
        key_prefix (str): Namespace prepended to every key before storage
        is_binary_key (Callable[[str], bool]): Classifier deciding whether a
            key holds raw bytes or a JSON document
    """

    def __init__(
        self,
        key_prefix: str = "",
        is_binary_key: Optional[Callable[[str], bool]] = None,
    ):
        """
        Initialize the storage plugin.

        Args:
            key_prefix: Namespace prepended to every key
            is_binary_key: Host classifier; defaults to the extension-based rule
        """
        self.key_prefix = key_prefix or ""
        self.is_binary_key = is_binary_key or default_is_binary_key

    def prep_key(self, key: str) -> str:
        """Return ``key`` as stored, with the configured prefix applied."""
        return prep_key(key, self.key_prefix)


class KeyValueStoragePlugin(StoragePlugin):
    """
    Asynchronous storage engine contract.

    Every failing operation raises; ``KeyNotFoundError`` signals a missing
    key and ``StorageError`` any database failure.
    """

    @abstractmethod
    async def startup(self) -> None:
        """
        Open the database and ensure the backing table exists.

        Raises:
            StorageError: If the database cannot be opened or initialized
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: Any) -> None:
        """
        Store a value, replacing any existing record for the key.

        Args:
            key: Key to store under
            value: Bytes for binary keys, JSON-serializable data otherwise,
                or an explicitly tagged BinaryValue/StructuredValue

        Raises:
            ValidationError: If the value cannot be encoded
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def put_stream(self, key: str, source: Union[AsyncIterable[Any], Iterable[Any]]) -> None:
        """
        Drain a stream of byte chunks and store it as one binary value.

        Raises:
            ValidationError: If a chunk is not bytes-like
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def head(self, key: str) -> KeyMetadata:
        """
        Get modification time and length of a stored value.

        Raises:
            KeyNotFoundError: If the key does not exist
            StorageError: If the lookup fails
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Any:
        """
        Fetch a stored value.

        Returns:
            Raw bytes for binary records, the parsed structure otherwise

        Raises:
            KeyNotFoundError: If the key does not exist
            StorageError: If the lookup or JSON parsing fails
        """
        pass

    @abstractmethod
    async def get_stream(self, key: str) -> AsyncIterator[Any]:
        """
        Fetch a stored value as a stream yielding the whole value once.

        Raises:
            KeyNotFoundError: If the key does not exist
            StorageError: If the fetch fails
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Delete a stored value.

        Raises:
            KeyNotFoundError: If the key does not exist
            StorageError: If the deletion fails
        """
        pass

    @abstractmethod
    async def run_maintenance(self) -> None:
        """Run periodic housekeeping."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Close the database. Never raises."""
        pass

    @abstractmethod
    async def backup(self, backup_dir: str) -> None:
        """
        Create a backup of the whole database.

        Raises:
            StorageError: If backup operation fails
        """
        pass

    @abstractmethod
    async def restore_from_backup(self, backup_dir: str) -> None:
        """
        Replace the database contents with a backup.

        Raises:
            StorageError: If restore operation fails
        """
        pass


class SyncKeyValueStoragePlugin(StoragePlugin):
    """
    Synchronous storage engine contract.

    Mirrors KeyValueStoragePlugin; see its methods for details.
    """

    @abstractmethod
    def startup(self) -> None:
        pass

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def put_stream(self, key: str, source: Iterable[Any]) -> None:
        pass

    @abstractmethod
    def head(self, key: str) -> KeyMetadata:
        pass

    @abstractmethod
    def get(self, key: str) -> Any:
        pass

    @abstractmethod
    def get_stream(self, key: str) -> Iterator[Any]:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def run_maintenance(self) -> None:
        pass

    @abstractmethod
    def shutdown(self) -> None:
        pass

    @abstractmethod
    def backup(self, backup_dir: str) -> None:
        pass

    @abstractmethod
    def restore_from_backup(self, backup_dir: str) -> None:
        pass
