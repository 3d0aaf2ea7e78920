"""Application context: the services shared by the CLI and the web API.

One context is built when the application starts and handed to whatever
needs it; nothing in forgefit reaches for global state.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import AsyncIterator

from .config import Settings, get_settings
from .db.engine import init_db
from .db.repositories import (
    AppSettingsRepository,
    CustomExerciseRepository,
    GoalRepository,
    PersonalRecordRepository,
    UserProfileRepository,
    WorkoutHistoryRepository,
)
from .db.store import KeyValueStore
from .errors import StorageError
from .models.workout import CompletedWorkout
from .services.app_settings import AppSettingsService
from .services.exercises import ExerciseCatalog
from .services.goals import GoalAchieved, GoalService
from .services.session import WorkoutSession
from .services.user import UserService

logger = logging.getLogger(__name__)


@dataclass
class WorkoutSummary:
    """Everything that happened when a workout was finished."""

    workout: CompletedWorkout
    new_records: dict[str, float] = field(default_factory=dict)
    xp_gained: int = 0
    achieved_goals: list[GoalAchieved] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "workout": self.workout.to_dict(),
            "newRecords": self.new_records,
            "xpGained": self.xp_gained,
            "achievedGoals": [g.to_dict() for g in self.achieved_goals],
        }


class AppContext:
    """Holds the store, repositories and services for one running app."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.store = KeyValueStore(settings.db_path)

        self.history = WorkoutHistoryRepository(self.store, limit=settings.history_limit)
        self.records = PersonalRecordRepository(self.store)

        self.session = WorkoutSession(self.history, self.records)
        self.exercises = ExerciseCatalog(CustomExerciseRepository(self.store))
        self.goals = GoalService(GoalRepository(self.store), self.records)
        self.user = UserService(UserProfileRepository(self.store))
        self.app_settings = AppSettingsService(AppSettingsRepository(self.store))

    async def start(self) -> None:
        """Create the schema and load cached state."""
        await init_db(self.settings.db_path)
        await self.exercises.load()
        await self.user.load()
        await self.app_settings.load()
        logger.debug("Context started with database %s", self.settings.db_path)

    async def stop(self) -> None:
        """Drop in-memory state. An unfinished workout is lost."""
        if self.session.is_active:
            logger.warning("Discarding unfinished workout on shutdown")
        self.session.cancel()

    async def finish_workout(self, now: datetime | None = None) -> WorkoutSummary:
        """Finish the active session, award XP and update goals."""
        result = await self.session.finish(now)
        workout = result.workout

        xp_gained = await self.user.add_workout_xp(
            workout.trained_exercise_count, workout.set_count, workout.rep_count
        )
        achieved = await self.goals.reconcile(result.new_records)

        return WorkoutSummary(
            workout=workout,
            new_records=result.new_records,
            xp_gained=xp_gained,
            achieved_goals=achieved,
        )

    async def load_history(self) -> list[CompletedWorkout]:
        try:
            return await self.history.list_all()
        except StorageError as e:
            logger.error("Error loading workout history: %s", e)
            return []

    async def load_records(self) -> dict[str, float]:
        try:
            return await self.records.get_all()
        except StorageError as e:
            logger.error("Error loading personal records: %s", e)
            return {}


@asynccontextmanager
async def app_context(settings: Settings | None = None) -> AsyncIterator[AppContext]:
    """Run an ``AppContext`` for the duration of the block."""
    context = AppContext(settings or get_settings())
    await context.start()
    try:
        yield context
    finally:
        await context.stop()
