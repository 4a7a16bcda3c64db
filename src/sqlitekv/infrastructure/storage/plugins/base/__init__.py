"""
Base plugin interfaces for storage implementations.

This package provides the core interfaces that all storage plugins must implement:
- StoragePlugin: Base class with key namespacing and classification
- KeyValueStoragePlugin: Interface for asynchronous engines
- SyncKeyValueStoragePlugin: Interface for synchronous engines
"""

from .interfaces import KeyValueStoragePlugin, StoragePlugin, SyncKeyValueStoragePlugin

__all__ = [
    "StoragePlugin",
    "KeyValueStoragePlugin",
    "SyncKeyValueStoragePlugin",
]
