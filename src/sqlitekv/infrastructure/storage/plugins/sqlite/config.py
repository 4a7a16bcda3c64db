"""
Configuration for the SQLite storage plugin.

The host framework hands each engine a flat mapping. ``SqliteStorageConfig``
reads the keys the SQLite engines understand:
- connectString: database file path; empty means an in-memory database
- keyPrefix: namespace prepended to every key
- flushWalMinutes: minutes between WAL checkpoints (asynchronous engine)
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .....core.exceptions import ConfigurationError
from .constants import DEFAULT_FLUSH_WAL_MINUTES, MEMORY_DATABASE
from .utils.checkpoint import parse_flush_minutes

_ALIASES = {
    "connectString": "connect_string",
    "keyPrefix": "key_prefix",
    "flushWalMinutes": "flush_wal_minutes",
}


@dataclass
class SqliteStorageConfig:
    """
    Settings for SQLite key/value engines.

    Attributes:
        connect_string (Optional[str]): Database file path, None for in-memory
        key_prefix (str): Namespace prepended to every key
        flush_wal_minutes (float): Minutes between WAL checkpoints;
            non-positive flushes after every write
    """

    connect_string: Optional[str] = None
    key_prefix: str = ""
    flush_wal_minutes: float = DEFAULT_FLUSH_WAL_MINUTES

    def __post_init__(self):
        """Validate and normalize settings."""
        if self.connect_string is not None and not isinstance(self.connect_string, str):
            raise ConfigurationError(
                f"connectString must be a string, got {type(self.connect_string).__name__}"
            )
        if self.key_prefix is None:
            self.key_prefix = ""
        if not isinstance(self.key_prefix, str):
            raise ConfigurationError(
                f"keyPrefix must be a string, got {type(self.key_prefix).__name__}"
            )
        self.flush_wal_minutes = parse_flush_minutes(self.flush_wal_minutes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SqliteStorageConfig":
        """
        Build settings from a host configuration mapping.

        Both the host's camelCase keys and snake_case keys are accepted;
        unknown keys are ignored.

        Args:
            data: Configuration mapping

        Returns:
            Validated settings
        """
        values = {}
        for name, value in data.items():
            field_name = _ALIASES.get(name, name)
            if field_name in ("connect_string", "key_prefix", "flush_wal_minutes"):
                values[field_name] = value
        return cls(**values)

    @property
    def in_memory(self) -> bool:
        return not self.connect_string or self.connect_string == MEMORY_DATABASE

    @property
    def database(self) -> str:
        """Connection target handed to sqlite."""
        if self.in_memory:
            return MEMORY_DATABASE
        return self.connect_string
