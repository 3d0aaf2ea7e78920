"""Data access layer for forgefit.

Each repository owns one logical key in the key-value store. Reads raise
``StorageError`` when the store is unreachable; malformed stored data is
logged and treated as absent.
"""

import logging
from typing import Callable, TypeVar

from ..models.exercises import Exercise
from ..models.goal import Goal
from ..models.settings import AppSettings
from ..models.user import UserProfile, UserStats
from ..models.workout import CompletedWorkout
from .store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Logical keys
GOALS_KEY = "user_goals"
PERSONAL_RECORDS_KEY = "personal_records"
COMPLETED_WORKOUTS_KEY = "completed_workouts"
CUSTOM_EXERCISES_KEY = "custom_exercises"
USER_PROFILE_KEY = "user_profile"
USER_STATS_KEY = "user_stats"
APP_SETTINGS_KEY = "app_settings"

DEFAULT_HISTORY_LIMIT = 100


def _load_list(key: str, raw, from_dict: Callable[[dict], T]) -> list[T]:
    """Decode a stored array, skipping entries that fail to parse."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Expected a list under %s, got %s", key, type(raw).__name__)
        return []

    items = []
    for entry in raw:
        try:
            items.append(from_dict(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed entry in %s: %s", key, e)
    return items


def _load_object(key: str, raw, from_dict: Callable[[dict], T]) -> T | None:
    """Decode a stored object, or None if absent or malformed."""
    if raw is None:
        return None
    try:
        return from_dict(raw)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Ignoring malformed %s: %s", key, e)
        return None


class WorkoutHistoryRepository:
    """Repository for completed workouts, newest first, capped in size."""

    def __init__(self, store: KeyValueStore, limit: int = DEFAULT_HISTORY_LIMIT):
        self.store = store
        self.limit = limit

    async def list_all(self) -> list[CompletedWorkout]:
        """List stored workouts, newest first."""
        raw = await self.store.get(COMPLETED_WORKOUTS_KEY)
        return _load_list(COMPLETED_WORKOUTS_KEY, raw, CompletedWorkout.from_dict)

    async def add(self, workout: CompletedWorkout) -> None:
        """Prepend a workout, evicting the oldest beyond the limit."""
        workouts = await self.list_all()
        workouts.insert(0, workout)
        await self.store.set(
            COMPLETED_WORKOUTS_KEY,
            [w.to_dict() for w in workouts[: self.limit]],
        )


class PersonalRecordRepository:
    """Repository for the exercise id -> best weight map."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_all(self) -> dict[str, float]:
        """Get all personal records."""
        raw = await self.store.get(PERSONAL_RECORDS_KEY)
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning("Expected a map under %s", PERSONAL_RECORDS_KEY)
            return {}

        records = {}
        for exercise_id, weight in raw.items():
            if isinstance(weight, (int, float)) and not isinstance(weight, bool):
                records[exercise_id] = weight
            else:
                logger.warning("Skipping non-numeric record for %s", exercise_id)
        return records

    async def save_all(self, records: dict[str, float]) -> None:
        """Replace the stored record map."""
        await self.store.set(PERSONAL_RECORDS_KEY, dict(records))


class GoalRepository:
    """Repository for weight goals."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def list_all(self) -> list[Goal]:
        raw = await self.store.get(GOALS_KEY)
        return _load_list(GOALS_KEY, raw, Goal.from_dict)

    async def save_all(self, goals: list[Goal]) -> None:
        await self.store.set(GOALS_KEY, [g.to_dict() for g in goals])


class CustomExerciseRepository:
    """Repository for user-defined exercises."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def list_all(self) -> list[Exercise]:
        raw = await self.store.get(CUSTOM_EXERCISES_KEY)
        return _load_list(CUSTOM_EXERCISES_KEY, raw, Exercise.from_dict)

    async def save_all(self, exercises: list[Exercise]) -> None:
        await self.store.set(CUSTOM_EXERCISES_KEY, [e.to_dict() for e in exercises])


class UserProfileRepository:
    """Repository for the single user profile and its stats."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get_profile(self) -> UserProfile | None:
        raw = await self.store.get(USER_PROFILE_KEY)
        return _load_object(USER_PROFILE_KEY, raw, UserProfile.from_dict)

    async def save_profile(self, profile: UserProfile) -> None:
        await self.store.set(USER_PROFILE_KEY, profile.to_dict())

    async def get_stats(self) -> UserStats | None:
        raw = await self.store.get(USER_STATS_KEY)
        return _load_object(USER_STATS_KEY, raw, UserStats.from_dict)

    async def save_stats(self, stats: UserStats) -> None:
        await self.store.set(USER_STATS_KEY, stats.to_dict())

    async def delete(self) -> None:
        """Remove both the profile and the stats."""
        await self.store.delete(USER_PROFILE_KEY, USER_STATS_KEY)


class AppSettingsRepository:
    """Repository for display preferences."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def get(self) -> AppSettings:
        """Get stored settings, or defaults if none are stored."""
        raw = await self.store.get(APP_SETTINGS_KEY)
        if not isinstance(raw, dict):
            return AppSettings()
        return AppSettings.from_dict(raw)

    async def save(self, settings: AppSettings) -> None:
        await self.store.set(APP_SETTINGS_KEY, settings.to_dict())
