"""In-progress workout session state machine."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ..db.repositories import PersonalRecordRepository, WorkoutHistoryRepository
from ..errors import StorageError, ValidationError
from ..models.exercises import Exercise
from ..models.workout import (
    CompletedWorkout,
    CompletedWorkoutExercise,
    WorkoutExerciseSession,
    WorkoutSet,
    round_half_up,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle state of the workout session."""

    IDLE = "idle"  # nothing selected
    BUILDING = "building"  # exercises selected, timer not running
    ACTIVE = "active"  # timer running, sets can be checked off


@dataclass
class FinishResult:
    """Outcome of finishing a session."""

    workout: CompletedWorkout
    new_records: dict[str, float] = field(default_factory=dict)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutSession:
    """Tracks the exercises and sets of the single in-progress workout.

    Editing operations are synchronous and purely in memory. ``finish`` is the
    only operation that touches storage, and it does so best-effort: a
    storage failure is logged and the session still returns to idle.
    """

    def __init__(
        self,
        history: WorkoutHistoryRepository,
        records: PersonalRecordRepository,
    ):
        self.history = history
        self.records = records
        self.exercises: list[WorkoutExerciseSession] = []
        self.started_at: datetime | None = None

    @property
    def state(self) -> SessionState:
        if self.started_at is not None:
            return SessionState.ACTIVE
        if self.exercises:
            return SessionState.BUILDING
        return SessionState.IDLE

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def _find(self, exercise_id: str) -> WorkoutExerciseSession:
        for entry in self.exercises:
            if entry.exercise.id == exercise_id:
                return entry
        raise ValidationError(f"Exercise '{exercise_id}' is not in the current workout")

    def _set_at(self, exercise_id: str, index: int) -> WorkoutSet:
        entry = self._find(exercise_id)
        if not 0 <= index < len(entry.sets):
            raise ValidationError(
                f"Set {index} does not exist for '{exercise_id}' "
                f"({len(entry.sets)} set(s))"
            )
        return entry.sets[index]

    def add_exercise(self, exercise: Exercise) -> bool:
        """Add an exercise with one blank set.

        Returns:
            False if the exercise was already selected
        """
        if any(e.exercise.id == exercise.id for e in self.exercises):
            return False
        logger.info("Adding exercise: %s", exercise.name)
        self.exercises.append(WorkoutExerciseSession(exercise=exercise))
        return True

    def remove_exercise(self, exercise_id: str) -> None:
        """Remove an exercise. Removing the last one returns the session to idle."""
        entry = self._find(exercise_id)
        logger.info("Removing exercise: %s", exercise_id)
        self.exercises.remove(entry)
        if not self.exercises:
            self.started_at = None

    def add_set(self, exercise_id: str) -> WorkoutSet:
        """Append a blank set."""
        entry = self._find(exercise_id)
        new_set = WorkoutSet()
        entry.sets.append(new_set)
        logger.debug("Added set %d for %s", len(entry.sets) - 1, exercise_id)
        return new_set

    def duplicate_set(self, exercise_id: str) -> WorkoutSet:
        """Append a copy of the last set's weight and reps, not yet completed."""
        entry = self._find(exercise_id)
        new_set = entry.sets[-1].copy(completed=False)
        entry.sets.append(new_set)
        logger.debug("Duplicated last set for %s", exercise_id)
        return new_set

    def remove_set(self, exercise_id: str, index: int) -> None:
        """Remove a set. An exercise always keeps at least one set."""
        self._set_at(exercise_id, index)
        entry = self._find(exercise_id)
        del entry.sets[index]
        if not entry.sets:
            entry.sets.append(WorkoutSet())
        logger.debug("Removed set %d for %s", index, exercise_id)

    def update_set(
        self,
        exercise_id: str,
        index: int,
        reps: int | None = None,
        weight: float | None = None,
    ) -> WorkoutSet:
        """Change the reps and/or weight of a set. Completion is left untouched."""
        target = self._set_at(exercise_id, index)
        if reps is not None and (isinstance(reps, bool) or int(reps) != reps or reps < 0):
            raise ValidationError(f"Reps must be a whole number >= 0, got {reps}")
        if weight is not None and weight < 0:
            raise ValidationError(f"Weight must be >= 0, got {weight}")

        if reps is not None:
            target.reps = int(reps)
        if weight is not None:
            target.weight = float(weight)
        return target

    def toggle_set_completed(self, exercise_id: str, index: int) -> bool:
        """Flip the completed flag of a set while the workout is running.

        Returns:
            The new completed value
        """
        if not self.is_active:
            raise ValidationError("Sets can only be checked off during an active workout")
        target = self._set_at(exercise_id, index)
        target.completed = not target.completed
        return target.completed

    def start(self, now: datetime | None = None) -> None:
        """Start the workout timer."""
        if self.is_active:
            raise ValidationError("A workout is already in progress")
        if not self.exercises:
            raise ValidationError("Add at least one exercise before starting")
        self.started_at = now or _utcnow()
        logger.info("Starting workout with %d exercise(s)", len(self.exercises))

    def cancel(self) -> None:
        """Discard the session without saving anything."""
        logger.info("Cancelling workout")
        self._reset()

    def clear(self) -> None:
        """Drop the selected exercises, keeping the timer if one is running."""
        self.exercises = []

    def _reset(self) -> None:
        self.exercises = []
        self.started_at = None

    def build_workout(self, now: datetime | None = None) -> CompletedWorkout:
        """Snapshot the session as a completed workout (completed sets only)."""
        end = now or _utcnow()
        duration = 0
        if self.started_at is not None:
            elapsed = (end - self.started_at).total_seconds()
            duration = max(0, round_half_up(elapsed / 60))

        exercises = [CompletedWorkoutExercise.from_session(e) for e in self.exercises]
        return CompletedWorkout(
            id=f"workout_{int(end.timestamp() * 1000)}",
            date=end,
            duration=duration,
            exercises=exercises,
            total_volume=sum(e.volume for e in exercises),
        )

    def find_new_records(self, records: dict[str, float]) -> dict[str, float]:
        """Best completed weights that beat ``records``.

        Exercises without a completed set are skipped, and a best of 0 is
        never a record.
        """
        new_records = {}
        for entry in self.exercises:
            best = entry.max_completed_weight()
            if best is None or best <= 0:
                continue
            if best > records.get(entry.exercise.id, 0):
                new_records[entry.exercise.id] = best
                logger.info("New PR for %s: %s", entry.exercise.name, best)
        return new_records

    async def finish(self, now: datetime | None = None) -> FinishResult:
        """Save the workout and update personal records, then go idle."""
        if not self.is_active:
            raise ValidationError("No workout in progress")

        logger.info("Finishing workout")
        workout = self.build_workout(now)

        try:
            await self.history.add(workout)
            logger.info("Saved completed workout %s", workout.id)
        except StorageError as e:
            logger.error("Error saving workout: %s", e)

        new_records: dict[str, float] = {}
        try:
            records = await self.records.get_all()
            new_records = self.find_new_records(records)
            if new_records:
                records.update(new_records)
                await self.records.save_all(records)
        except StorageError as e:
            logger.error("Error updating personal records: %s", e)

        self._reset()
        return FinishResult(workout=workout, new_records=new_records)

    def to_dict(self) -> dict:
        """Snapshot of the session for display."""
        return {
            "state": self.state.value,
            "startedAt": self.started_at.isoformat() if self.started_at else None,
            "exercises": [e.to_dict() for e in self.exercises],
        }
