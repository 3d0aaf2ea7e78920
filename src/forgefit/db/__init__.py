"""Database layer for forgefit."""

from .engine import get_db_path, init_db
from .repositories import (
    AppSettingsRepository,
    CustomExerciseRepository,
    GoalRepository,
    PersonalRecordRepository,
    UserProfileRepository,
    WorkoutHistoryRepository,
)
from .store import KeyValueStore

__all__ = [
    "AppSettingsRepository",
    "CustomExerciseRepository",
    "get_db_path",
    "GoalRepository",
    "init_db",
    "KeyValueStore",
    "PersonalRecordRepository",
    "UserProfileRepository",
    "WorkoutHistoryRepository",
]
