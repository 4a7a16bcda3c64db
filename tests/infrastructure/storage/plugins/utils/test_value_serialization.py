"""Tests for stored value encoding."""

import json

import pytest

from sqlitekv.core.exceptions import ValidationError
from sqlitekv.core.models import BinaryValue, StructuredValue
from sqlitekv.infrastructure.storage.plugins.utils import (
    classify_value,
    decode_value,
    encode_value,
    is_binary_key,
)


def test_classify_untagged_values():
    """Test untagged values are classified by key."""
    assert classify_value("a.bin", b"x", is_binary_key) == BinaryValue(b"x")
    assert classify_value("doc", {"a": 1}, is_binary_key) == StructuredValue({"a": 1})


def test_classify_keeps_tags():
    """Test tagged values are not reclassified."""
    value = StructuredValue([1])
    assert classify_value("a.bin", value, is_binary_key) is value


def test_encode_binary_records_size():
    """Test binary values are stored raw with their length."""
    assert encode_value(BinaryValue(bytearray(b"\x00\x01\x02"))) == (b"\x00\x01\x02", 3)


def test_encode_structured_is_compact_json():
    """Test structured values are stored as compact JSON without size."""
    stored, size = encode_value(StructuredValue({"a": [1, 2], "b": "é"}))

    assert stored == '{"a":[1,2],"b":"é"}'
    assert size is None


@pytest.mark.parametrize("data", ["text", 12, None, {"a": 1}])
def test_encode_binary_rejects_non_bytes(data):
    """Test binary values must be bytes-like."""
    with pytest.raises(ValidationError, match="bytes-like"):
        encode_value(BinaryValue(data))


def test_encode_structured_rejects_nan():
    """Test NaN is rejected instead of producing invalid JSON."""
    with pytest.raises(ValidationError):
        encode_value(StructuredValue({"x": float("inf")}))


def test_decode_binary_row():
    """Test rows with a size are returned as bytes."""
    assert decode_value(b"\x01", 1) == b"\x01"
    assert decode_value("ab", 2) == b"ab"


def test_decode_json_row():
    """Test rows without a size are parsed as JSON."""
    assert decode_value('{"x":1}', None) == {"x": 1}
    assert decode_value(b"[true,null]", None) == [True, None]


def test_decode_invalid_json():
    """Test parse failures are not swallowed."""
    with pytest.raises(json.JSONDecodeError):
        decode_value("{oops", None)
