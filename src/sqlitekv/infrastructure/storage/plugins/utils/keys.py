"""Utilities for preparing and classifying storage keys."""

import re

_EXTENSION = re.compile(r"\.\w+$")
_JSON_EXTENSION = re.compile(r"\.json$", re.IGNORECASE)


def prep_key(key: str, prefix: str) -> str:
    """
    Apply the configured namespace prefix to a key.

    Args:
        key: Key as given by the caller
        prefix: Configured key prefix, may be empty

    Returns:
        Key as stored in the database
    """
    if prefix:
        return prefix + key
    return key


def is_binary_key(key: str) -> bool:
    """
    Default binary key classifier.

    A key ending in a file extension other than ``.json`` holds raw bytes;
    every other key holds a JSON document.

    Example:
        >>> is_binary_key("avatars/joe.png")
        True
        >>> is_binary_key("users/joe")
        False
    """
    return bool(_EXTENSION.search(key)) and not _JSON_EXTENSION.search(key)
