"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from forgefit.config import Settings
from forgefit.context import AppContext
from forgefit.db.engine import init_db
from forgefit.db.repositories import PersonalRecordRepository, WorkoutHistoryRepository
from forgefit.db.store import KeyValueStore
from forgefit.errors import StorageError
from forgefit.models.exercises import BUILTIN_EXERCISES
from forgefit.services.session import WorkoutSession


class FailingStore(KeyValueStore):
    """Store whose writes always fail, as with a full disk."""

    async def set(self, key, value):
        raise StorageError(key, "write", OSError("No space left on device"))

    async def delete(self, *keys):
        raise StorageError(",".join(keys), "delete", OSError("No space left on device"))


def builtin(exercise_id: str):
    """Look up a built-in exercise by id."""
    for exercise in BUILTIN_EXERCISES:
        if exercise.id == exercise_id:
            return exercise
    raise LookupError(exercise_id)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def settings(temp_db_path):
    """Settings pointing at the temporary database."""
    return Settings(data_dir=temp_db_path.parent, db_filename=temp_db_path.name)


@pytest.fixture
async def store(temp_db_path):
    """An initialized key-value store."""
    await init_db(temp_db_path)
    return KeyValueStore(temp_db_path)


@pytest.fixture
async def failing_store(temp_db_path):
    """An initialized store that refuses every write."""
    await init_db(temp_db_path)
    return FailingStore(temp_db_path)


@pytest.fixture
def session(store):
    """A workout session backed by the temporary store."""
    return WorkoutSession(WorkoutHistoryRepository(store), PersonalRecordRepository(store))


@pytest.fixture
async def context(settings):
    """A started application context."""
    app = AppContext(settings)
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def bench_press():
    return builtin("bench_press")


@pytest.fixture
def squat():
    return builtin("low_bar_squat")


@pytest.fixture
def pull_up():
    return builtin("pull_up")
