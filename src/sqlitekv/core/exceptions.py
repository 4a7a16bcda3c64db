"""
Custom exceptions for the key/value storage engine.

This module defines the hierarchy of exceptions raised by the storage plugins.
Callers are expected to branch on exception types (or on the ``code`` attribute
of ``KeyNotFoundError``) rather than on message text.
"""


class ValidationError(Exception):
    """
    Raised when a value cannot be encoded for storage.

    This exception is raised when a value does not match the representation
    its key is classified for.

    Examples:
        * Non bytes-like value stored under a binary key
        * Structured value that JSON cannot represent (NaN, arbitrary objects)
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class StorageError(Exception):
    """
    Raised when storage operations fail.

    This exception is raised when the underlying database reports an error,
    such as I/O failures, locking problems or constraint violations. The
    original database error is chained as ``__cause__``.

    Examples:
        * Database file cannot be opened
        * Disk full or read-only database
        * Stored JSON text that no longer parses
    """


class CheckpointError(StorageError):
    """
    Raised when a WAL checkpoint fails after a write or delete.

    The mutation that triggered the checkpoint has already been committed
    when this exception is raised; only the durability flush failed.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-string connect string
        * Non-string key prefix
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the store.
    """


class KeyNotFoundError(ResourceNotFoundError):
    """
    Raised when a key has no stored record.

    This is the "not found" sentinel of the storage engine contract. It is
    raised by ``head``, ``get``, ``delete`` and ``get_stream`` and is never
    wrapped into a ``StorageError``.

    Attributes:
        code (str): Stable error code shared with the host framework
        key (str): The key as given by the caller, without prefix
    """

    code = "NoSuchKey"

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key
