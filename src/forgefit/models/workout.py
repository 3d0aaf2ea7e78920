"""Workout set, in-progress session and completed workout models."""

import math
from dataclasses import dataclass, field
from datetime import datetime

from .exercises import Exercise, MuscleGroup


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


@dataclass
class WorkoutSet:
    """A single set. Mutable while its session is in progress."""

    reps: int = 0
    weight: float = 0.0
    completed: bool = False

    @property
    def volume(self) -> float:
        return self.weight * self.reps

    def copy(self, completed: bool | None = None) -> "WorkoutSet":
        """Return a copy, optionally overriding the completed flag."""
        return WorkoutSet(
            reps=self.reps,
            weight=self.weight,
            completed=self.completed if completed is None else completed,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"reps": self.reps, "weight": self.weight, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        return cls(
            reps=int(data.get("reps", 0)),
            weight=float(data.get("weight", 0)),
            completed=bool(data.get("completed", False)),
        )


@dataclass
class WorkoutExerciseSession:
    """An exercise and its ordered sets within the in-progress session."""

    exercise: Exercise
    sets: list[WorkoutSet] = field(default_factory=lambda: [WorkoutSet()])

    def completed_sets(self) -> list[WorkoutSet]:
        return [s.copy() for s in self.sets if s.completed]

    def max_completed_weight(self) -> float | None:
        """Heaviest completed set, or None when nothing was completed."""
        weights = [s.weight for s in self.sets if s.completed]
        if not weights:
            return None
        return max(weights)

    def to_dict(self) -> dict:
        return {
            "exercise": self.exercise.to_dict(),
            "sets": [s.to_dict() for s in self.sets],
        }


@dataclass
class CompletedWorkoutExercise:
    """An exercise as persisted in the history (completed sets only)."""

    exercise_id: str
    exercise_name: str
    muscle_group: MuscleGroup
    sets: list[WorkoutSet] = field(default_factory=list)

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sets)

    @property
    def max_weight(self) -> float:
        """Heaviest set weight, 0 when there are no sets."""
        return max((s.weight for s in self.sets), default=0)

    @classmethod
    def from_session(cls, entry: WorkoutExerciseSession) -> "CompletedWorkoutExercise":
        return cls(
            exercise_id=entry.exercise.id,
            exercise_name=entry.exercise.name,
            muscle_group=entry.exercise.muscle_group,
            sets=entry.completed_sets(),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "muscleGroup": self.muscle_group.value,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedWorkoutExercise":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exerciseId"],
            exercise_name=data["exerciseName"],
            muscle_group=MuscleGroup(data["muscleGroup"]),
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", [])],
        )


@dataclass
class CompletedWorkout:
    """A finished workout. Immutable once written to the history."""

    id: str
    date: datetime
    duration: int  # minutes
    exercises: list[CompletedWorkoutExercise]
    total_volume: float

    @property
    def set_count(self) -> int:
        return sum(len(e.sets) for e in self.exercises)

    @property
    def rep_count(self) -> int:
        return sum(s.reps for e in self.exercises for s in e.sets)

    @property
    def trained_exercise_count(self) -> int:
        """Exercises with at least one completed set."""
        return sum(1 for e in self.exercises if e.sets)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "duration": self.duration,
            "exercises": [e.to_dict() for e in self.exercises],
            "totalVolume": self.total_volume,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedWorkout":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            date=datetime.fromisoformat(data["date"]),
            duration=int(data.get("duration", 0)),
            exercises=[
                CompletedWorkoutExercise.from_dict(e) for e in data.get("exercises", [])
            ],
            total_volume=data.get("totalVolume", 0),
        )

    def get_summary(self) -> str:
        """One-line summary for display."""
        return (
            f"{self.date.strftime('%Y-%m-%d %H:%M')} - {len(self.exercises)} exercises, "
            f"{self.set_count} sets, {self.total_volume:g} volume, {self.duration} min"
        )
