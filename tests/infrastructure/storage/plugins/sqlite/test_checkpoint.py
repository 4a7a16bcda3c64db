"""Tests for the WAL checkpoint policy."""

import pytest

from sqlitekv.infrastructure.storage.plugins.sqlite.utils import CheckpointPolicy, parse_flush_minutes


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 1.0),
        (5, 5.0),
        (2.5, 2.5),
        ("10", 10.0),
        ("0", 0.0),
        (-3, -3.0),
        ("soon", 0.0),
        ("nan", 0.0),
        ([1], 0.0),
        (True, 0.0),
    ],
)
def test_parse_flush_minutes(raw, expected):
    """Test interval parsing falls back to flushing every write."""
    assert parse_flush_minutes(raw) == expected


def test_policy_waits_for_interval(clock):
    """Test a positive interval delays the next checkpoint."""
    policy = CheckpointPolicy(1, clock=clock)

    assert not policy.due()
    clock.advance(60)
    assert not policy.due()
    clock.advance(0.5)
    assert policy.due()


def test_policy_record_resets_interval(clock):
    """Test recording a checkpoint restarts the interval."""
    policy = CheckpointPolicy(2, clock=clock)
    clock.advance(121)
    assert policy.due()

    policy.record()
    assert policy.last_flush == 121
    assert not policy.due()


@pytest.mark.parametrize("minutes", [0, -1])
def test_policy_non_positive_interval_always_due(clock, minutes):
    """Test non-positive intervals flush on every write."""
    policy = CheckpointPolicy(minutes, clock=clock)

    assert policy.flush_every_write
    assert policy.due()
    policy.record()
    assert policy.due()
