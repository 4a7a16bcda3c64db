"""
Core package for the key/value storage engine.

This package provides the exception hierarchy and the value models shared by
all storage plugins.
"""

from .exceptions import (
    CheckpointError,
    ConfigurationError,
    KeyNotFoundError,
    ResourceNotFoundError,
    StorageError,
    ValidationError,
)
from .models import BinaryValue, KeyMetadata, StructuredValue, Value

__all__ = [
    # Exceptions
    "StorageError",
    "CheckpointError",
    "ConfigurationError",
    "ResourceNotFoundError",
    "KeyNotFoundError",
    "ValidationError",
    # Models
    "BinaryValue",
    "StructuredValue",
    "Value",
    "KeyMetadata",
]
