"""XP and level calculation.

XP is never stored on its own. It is derived from the cumulative exercise,
set and rep counters, and the level is derived from the XP, so the numbers
shown to the user cannot drift away from the counters.
"""

import math
from dataclasses import dataclass

from ..models.user import UserStats

XP_PER_EXERCISE = 50
XP_PER_SET = 10
XP_PER_REP = 1
BASE_XP_PER_LEVEL = 500
XP_STEP_PER_LEVEL = 100


@dataclass(frozen=True)
class LevelInfo:
    """Level reached for a total XP amount."""

    level: int
    current_xp: int  # XP earned inside the current level
    xp_to_next_level: int  # size of the current level


def threshold_for_level(level: int) -> int:
    """XP needed to go from ``level`` to ``level + 1``."""
    return BASE_XP_PER_LEVEL + level * XP_STEP_PER_LEVEL


def cumulative_xp_for_level(level: int) -> int:
    """Total XP needed to reach ``level`` from zero."""
    return level * BASE_XP_PER_LEVEL + XP_STEP_PER_LEVEL * level * (level - 1) // 2


def calculate_level(total_xp: int) -> LevelInfo:
    """Derive level information from a total XP amount.

    Equivalent to repeatedly subtracting ``threshold_for_level(level)`` while
    the remainder covers it. The level is found from the quadratic first and
    then nudged so the result is exact for every non-negative integer.
    """
    if total_xp < 0:
        raise ValueError(f"total_xp must be non-negative, got {total_xp}")

    # Largest n with 50n^2 + 450n <= total_xp, i.e. (100n + 450)^2 <= 200 * total_xp + 450^2
    step = XP_STEP_PER_LEVEL
    b = (2 * BASE_XP_PER_LEVEL - step) // 2
    level = max((math.isqrt(b * b + 2 * step * total_xp) - b) // step, 0)

    while cumulative_xp_for_level(level + 1) <= total_xp:
        level += 1
    while level > 0 and cumulative_xp_for_level(level) > total_xp:
        level -= 1

    return LevelInfo(
        level=level,
        current_xp=total_xp - cumulative_xp_for_level(level),
        xp_to_next_level=threshold_for_level(level),
    )


def total_xp_for(exercises: int, sets: int, reps: int) -> int:
    """XP worth of the given exercise, set and rep counts."""
    return exercises * XP_PER_EXERCISE + sets * XP_PER_SET + reps * XP_PER_REP


def stats_from_counters(total_exercises: int, total_sets: int, total_reps: int) -> UserStats:
    """Build stats whose derived fields come straight from the counters."""
    info = calculate_level(total_xp_for(total_exercises, total_sets, total_reps))
    return UserStats(
        total_exercises=total_exercises,
        total_sets=total_sets,
        total_reps=total_reps,
        level=info.level,
        current_xp=info.current_xp,
        xp_to_next_level=info.xp_to_next_level,
    )


def apply_workout(
    stats: UserStats, exercise_count: int, set_count: int, rep_count: int
) -> tuple[UserStats, int]:
    """Add one workout's counts to ``stats``.

    Returns:
        The recomputed stats and the XP gained by this workout
    """
    if min(exercise_count, set_count, rep_count) < 0:
        raise ValueError("Workout counts must be non-negative")

    updated = stats_from_counters(
        stats.total_exercises + exercise_count,
        stats.total_sets + set_count,
        stats.total_reps + rep_count,
    )
    return updated, total_xp_for(exercise_count, set_count, rep_count)
