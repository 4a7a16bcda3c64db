"""
Core data models for the key/value storage engine.

This module provides the value types handed to and returned by the storage
plugins:
- BinaryValue / StructuredValue: explicit tagging of how a value is stored
- KeyMetadata: result of a ``head`` lookup
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class BinaryValue:
    """
    A value stored as raw bytes.

    Attributes:
        data (bytes): Raw payload, stored unchanged
    """

    data: bytes


@dataclass(frozen=True)
class StructuredValue:
    """
    A value stored as JSON text.

    Attributes:
        data (Any): JSON-serializable structure
    """

    data: Any


Value = Union[BinaryValue, StructuredValue]


@dataclass(frozen=True)
class KeyMetadata:
    """
    Metadata reported for a stored key.

    Attributes:
        modified_time (int): Last modification time in whole seconds since epoch
        length (int): Byte length of the stored representation
    """

    modified_time: int
    length: int
