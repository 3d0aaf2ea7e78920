"""Utilities for exercise name matching and set parsing."""

import re
from difflib import SequenceMatcher

from ..errors import ValidationError
from ..models.exercises import BUILTIN_EXERCISES, Exercise
from ..models.workout import WorkoutSet

# Common gym abbreviations, expanded anywhere in a name
ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
}

# Shorthands only expanded when they are the whole name
NAME_ALIASES = {
    "bench": "bench press",
    "squat": "low bar squat",
    "ohp": "overhead press",
}

_SET_PATTERN = re.compile(
    r"^\s*(?P<weight>\d+(?:\.\d+)?)\s*[x*]\s*(?P<reps>\d+)\s*$", re.IGNORECASE
)


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, removes extra whitespace and punctuation, and
    expands common abbreviations.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"[-_]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized)

    if normalized in NAME_ALIASES:
        return NAME_ALIASES[normalized]

    for abbrev, full in ABBREVIATIONS.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def find_matching_exercise(
    name: str,
    exercises: list[Exercise] | None = None,
    threshold: float = 0.8,
) -> Exercise | None:
    """Find the best matching exercise by id or name.

    Args:
        name: Exercise id or name as typed by the user
        exercises: Exercises to search (defaults to the built-in catalog)
        threshold: Minimum similarity ratio (0-1) for a fuzzy match

    Returns:
        The best matching Exercise or None if nothing is close enough
    """
    if exercises is None:
        exercises = BUILTIN_EXERCISES

    for exercise in exercises:
        if exercise.id == name:
            return exercise

    normalized_name = normalize_exercise_name(name)

    best_match: Exercise | None = None
    best_score = 0.0

    for exercise in exercises:
        candidate = normalize_exercise_name(exercise.name)
        if candidate == normalized_name:
            return exercise

        score = SequenceMatcher(None, normalized_name, candidate).ratio()
        if score > best_score:
            best_score = score
            best_match = exercise

    if best_score >= threshold:
        return best_match
    return None


def search_exercises(query: str, exercises: list[Exercise]) -> list[Exercise]:
    """Exercises whose name, muscle or equipment contains ``query``."""
    needle = normalize_exercise_name(query)
    results = []
    for exercise in exercises:
        haystack = " ".join(
            filter(None, [exercise.name, exercise.primary_muscle, exercise.equipment])
        )
        if needle in normalize_exercise_name(haystack):
            results.append(exercise)
    return results


def parse_set_spec(spec: str) -> WorkoutSet:
    """Parse ``WEIGHTxREPS`` (e.g. ``100x5`` or ``62.5 x 8``) into a set."""
    match = _SET_PATTERN.match(spec)
    if not match:
        raise ValidationError(f"Invalid set '{spec}', expected WEIGHTxREPS like 100x5")
    return WorkoutSet(reps=int(match["reps"]), weight=float(match["weight"]))


def parse_exercise_spec(spec: str) -> tuple[str, list[WorkoutSet]]:
    """Parse ``NAME:WEIGHTxREPS,WEIGHTxREPS`` into a name and its sets."""
    name, sep, sets_part = spec.rpartition(":")
    if not sep or not name.strip():
        raise ValidationError(
            f"Invalid exercise '{spec}', expected NAME:WEIGHTxREPS[,WEIGHTxREPS...]"
        )
    sets = [parse_set_spec(part) for part in sets_part.split(",") if part.strip()]
    if not sets:
        raise ValidationError(f"No sets given for '{name.strip()}'")
    return name.strip(), sets
