"""
WAL checkpoint policy for the asynchronous SQLite engine.

Writes land in the write-ahead log and are folded into the main database file
by a checkpoint. Running one after every write costs latency; running them on
a timer bounds how much committed data lives only in the WAL.
"""

import math
import time
from typing import Any, Callable

from ..constants import DEFAULT_FLUSH_WAL_MINUTES


def parse_flush_minutes(raw: Any) -> float:
    """
    Normalize a configured checkpoint interval.

    Args:
        raw: Configured value (number, numeric string or None)

    Returns:
        Interval in minutes; the default when unset, 0 when unparsable
    """
    if raw is None:
        return float(DEFAULT_FLUSH_WAL_MINUTES)
    if isinstance(raw, bool):
        return 0.0
    try:
        minutes = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(minutes):
        return 0.0
    return minutes


class CheckpointPolicy:
    """
    Time-based decision of when to checkpoint the WAL.

    A non-positive interval means every mutation is followed by a checkpoint.

    Attributes:
        interval_minutes (float): Minimum time between checkpoints
        last_flush (float): Clock reading of the last checkpoint
    """

    def __init__(self, interval_minutes: float, clock: Callable[[], float] = time.monotonic):
        self.interval_minutes = interval_minutes
        self._clock = clock
        self.last_flush = clock()

    @property
    def flush_every_write(self) -> bool:
        return self.interval_minutes <= 0

    def due(self) -> bool:
        """Return True when a checkpoint should run now."""
        if self.flush_every_write:
            return True
        return self._clock() - self.last_flush > self.interval_minutes * 60

    def record(self) -> None:
        """Mark a checkpoint as completed now."""
        self.last_flush = self._clock()
