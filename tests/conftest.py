"""Shared test fixtures."""

import pytest
import pytest_asyncio

from sqlitekv.infrastructure.storage.plugins.sqlite import (
    SqliteKeyValueStorage,
    SqliteStorageConfig,
    SyncSqliteKeyValueStorage,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Fixture providing a controllable clock."""
    return FakeClock()


@pytest.fixture
def db_file(tmp_path) -> str:
    """Fixture providing a path for a file-backed database."""
    return str(tmp_path / "storage.db")


@pytest_asyncio.fixture
async def storage():
    """Fixture providing a started in-memory asynchronous engine."""
    engine = SqliteKeyValueStorage(SqliteStorageConfig())
    await engine.startup()
    yield engine
    await engine.shutdown()


@pytest_asyncio.fixture
async def file_storage(db_file, clock):
    """Fixture providing a started file-backed engine with a one minute flush interval."""
    engine = SqliteKeyValueStorage(
        SqliteStorageConfig(connect_string=db_file, flush_wal_minutes=1),
        clock=clock,
    )
    await engine.startup()
    yield engine
    await engine.shutdown()


@pytest.fixture
def sync_storage():
    """Fixture providing a started in-memory synchronous engine."""
    engine = SyncSqliteKeyValueStorage(SqliteStorageConfig())
    engine.startup()
    yield engine
    engine.shutdown()
