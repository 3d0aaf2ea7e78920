"""Exercise catalog: built-in exercises plus user-defined ones."""

import logging
from datetime import datetime, timezone

from ..db.repositories import CustomExerciseRepository
from ..errors import StorageError, ValidationError
from ..models.exercises import (
    BUILTIN_EXERCISES,
    Difficulty,
    Exercise,
    ExerciseCategory,
    MuscleGroup,
)
from ..utils.exercise_utils import find_matching_exercise, search_exercises
from ..utils.ids import timestamp_id

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Combined view over the built-in and custom exercise lists."""

    def __init__(self, custom: CustomExerciseRepository):
        self.custom = custom
        self.builtin = list(BUILTIN_EXERCISES)
        self.custom_exercises: list[Exercise] = []

    async def load(self) -> None:
        try:
            self.custom_exercises = await self.custom.list_all()
        except StorageError as e:
            logger.error("Failed to load custom exercises: %s", e)

    def all_exercises(self) -> list[Exercise]:
        return self.builtin + self.custom_exercises

    def get(self, exercise_id: str) -> Exercise | None:
        for exercise in self.all_exercises():
            if exercise.id == exercise_id:
                return exercise
        return None

    def find(self, name: str) -> Exercise | None:
        """Resolve an id or a (possibly abbreviated) name."""
        return find_matching_exercise(name, self.all_exercises())

    def search(
        self, query: str = "", category: ExerciseCategory | None = None
    ) -> list[Exercise]:
        exercises = self.all_exercises()
        if category is not None:
            exercises = [e for e in exercises if e.category == category]
        if query:
            exercises = search_exercises(query, exercises)
        return exercises

    async def add_custom(
        self,
        name: str,
        category: ExerciseCategory = ExerciseCategory.EXTRAS,
        muscle_group: MuscleGroup = MuscleGroup.FULL_BODY,
        primary_muscle: str = "",
        equipment: str | None = None,
        difficulty: Difficulty | None = None,
        now: datetime | None = None,
    ) -> Exercise:
        """Append a user-defined exercise."""
        name = name.strip()
        if not name:
            raise ValidationError("Exercise name is required")

        now = now or datetime.now(timezone.utc)
        exercise = Exercise(
            id=timestamp_id("custom", now, {e.id for e in self.custom_exercises}),
            name=name,
            category=category,
            muscle_group=muscle_group,
            primary_muscle=primary_muscle or muscle_group.value,
            equipment=equipment or None,
            difficulty=difficulty,
        )
        updated = self.custom_exercises + [exercise]
        try:
            await self.custom.save_all(updated)
        except StorageError as e:
            logger.error("Failed to save custom exercises: %s", e)
            return exercise

        self.custom_exercises = updated
        logger.info("Added custom exercise %s (%s)", exercise.name, exercise.id)
        return exercise

    async def delete_custom(self, exercise_id: str) -> bool:
        """Delete a user-defined exercise. Built-in exercises cannot be deleted."""
        updated = [e for e in self.custom_exercises if e.id != exercise_id]
        if len(updated) == len(self.custom_exercises):
            return False
        try:
            await self.custom.save_all(updated)
        except StorageError as e:
            logger.error("Failed to save custom exercises: %s", e)
            return False

        self.custom_exercises = updated
        return True
