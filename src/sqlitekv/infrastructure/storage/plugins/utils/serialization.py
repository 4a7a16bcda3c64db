"""
Serialization utilities for storage plugins.

This module converts caller values into the representation stored in the
``val`` column and back:
- binary values are stored as raw bytes with their length
- structured values are stored as compact JSON text without a length
"""

import json
from typing import Any, Callable, Optional, Tuple, Union

from .....core.exceptions import ValidationError
from .....core.models import BinaryValue, StructuredValue, Value

BYTES_LIKE = (bytes, bytearray, memoryview)


def classify_value(key: str, value: Any, is_binary_key: Callable[[str], bool]) -> Value:
    """
    Tag a value as binary or structured.

    Already tagged values are returned unchanged; untagged values are
    classified with ``is_binary_key``.

    Args:
        key: Key the value is stored under (without prefix)
        value: Tagged or untagged value
        is_binary_key: Host classifier for keys

    Returns:
        BinaryValue or StructuredValue
    """
    if isinstance(value, (BinaryValue, StructuredValue)):
        return value
    if is_binary_key(key):
        return BinaryValue(value)
    return StructuredValue(value)


def to_bytes(data: Any) -> bytes:
    """
    Convert a bytes-like object to bytes.

    Raises:
        ValidationError: If data is not bytes-like
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, BYTES_LIKE):
        return bytes(data)
    raise ValidationError(f"Binary value must be bytes-like, got {type(data).__name__}")


def encode_value(value: Value) -> Tuple[Union[bytes, str], Optional[int]]:
    """
    Encode a tagged value for the ``val`` and ``size`` columns.

    Args:
        value: Tagged value

    Returns:
        Tuple of (stored value, size); size is None for JSON text

    Raises:
        ValidationError: If the value cannot be represented
    """
    if isinstance(value, BinaryValue):
        data = to_bytes(value.data)
        return data, len(data)

    try:
        text = json.dumps(value.data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Value is not JSON serializable: {str(e)}") from e
    return text, None


def decode_value(stored: Union[bytes, str, None], size: Optional[int]) -> Any:
    """
    Decode a stored ``val`` column.

    Rows with a recorded size hold raw bytes and are returned unchanged;
    other rows hold JSON text and are parsed.

    Raises:
        json.JSONDecodeError: If JSON text does not parse
    """
    if size is not None:
        if isinstance(stored, str):
            return stored.encode("utf-8")
        return bytes(stored) if stored is not None else b""
    return json.loads(stored)
