"""Data models for forgefit."""

from .exercises import BUILTIN_EXERCISES, Difficulty, Exercise, ExerciseCategory, MuscleGroup
from .goal import Goal, compute_progress
from .settings import AppSettings
from .user import AuthMethod, UserProfile, UserStats
from .workout import (
    CompletedWorkout,
    CompletedWorkoutExercise,
    WorkoutExerciseSession,
    WorkoutSet,
)

__all__ = [
    "AppSettings",
    "AuthMethod",
    "BUILTIN_EXERCISES",
    "compute_progress",
    "CompletedWorkout",
    "CompletedWorkoutExercise",
    "Difficulty",
    "Exercise",
    "ExerciseCategory",
    "Goal",
    "MuscleGroup",
    "UserProfile",
    "UserStats",
    "WorkoutExerciseSession",
    "WorkoutSet",
]
