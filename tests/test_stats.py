"""Tests for history statistics."""

from datetime import datetime, timezone

import pytest

from forgefit.models.exercises import MuscleGroup
from forgefit.models.workout import CompletedWorkout, CompletedWorkoutExercise, WorkoutSet
from forgefit.services.stats import (
    monthly_summary,
    muscle_volumes,
    recent_records,
    relative_day_label,
    strength_progress,
    weekly_volume,
    workouts_this_month,
)

# Wednesday
NOW = datetime(2026, 3, 11, 12, 0, tzinfo=timezone.utc)


def _workout(when: datetime, exercise_id: str, name: str, group: MuscleGroup, weight: float, reps: int):
    exercise = CompletedWorkoutExercise(
        exercise_id=exercise_id,
        exercise_name=name,
        muscle_group=group,
        sets=[WorkoutSet(reps=reps, weight=weight, completed=True)],
    )
    return CompletedWorkout(
        id=f"workout_{int(when.timestamp() * 1000)}",
        date=when,
        duration=40,
        exercises=[exercise],
        total_volume=exercise.volume,
    )


@pytest.fixture
def workouts():
    """Newest first, as stored."""
    return [
        _workout(datetime(2026, 3, 11, 9, 0, tzinfo=timezone.utc),
                 "low_bar_squat", "Low Bar Squat", MuscleGroup.LEGS, 120, 5),
        _workout(datetime(2026, 3, 9, 10, 0, tzinfo=timezone.utc),
                 "bench_press", "Bench Press", MuscleGroup.CHEST, 100, 5),
        _workout(datetime(2026, 2, 20, 18, 0, tzinfo=timezone.utc),
                 "bench_press", "Bench Press", MuscleGroup.CHEST, 90, 5),
    ]


@pytest.fixture
def records():
    return {"bench_press": 100, "low_bar_squat": 120}


class TestMonthly:
    """Tests for the monthly summary."""

    def test_workouts_this_month(self, workouts):
        assert len(workouts_this_month(workouts, NOW)) == 2

    def test_monthly_summary(self, workouts, records):
        summary = monthly_summary(workouts, records, NOW)

        assert summary.workout_count == 2
        assert summary.total_volume == 1100
        assert summary.record_count == 2

    def test_empty_history(self):
        summary = monthly_summary([], {}, NOW)
        assert (summary.workout_count, summary.total_volume, summary.record_count) == (0, 0, 0)


class TestWeeklyVolume:
    """Tests for weekly_volume."""

    def test_monday_to_sunday(self, workouts):
        week = weekly_volume(workouts, NOW)

        assert [d.day for d in week] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert week[0].date.isoformat() == "2026-03-09"
        assert [d.volume for d in week] == [500, 0, 600, 0, 0, 0, 0]


class TestMuscleVolumes:
    """Tests for muscle_volumes."""

    def test_sorted_with_percentages(self, workouts):
        volumes = muscle_volumes(workouts)

        assert [v.muscle_group for v in volumes] == [MuscleGroup.CHEST, MuscleGroup.LEGS]
        chest, legs = volumes
        assert (chest.volume, chest.sessions, chest.percentage) == (950, 2, 100)
        assert (legs.volume, legs.sessions, legs.percentage) == (600, 1, 63)

    def test_empty_history(self):
        assert muscle_volumes([]) == []


class TestProgressAndRecords:
    """Tests for strength_progress and recent_records."""

    def test_strength_progress(self, workouts):
        progress = strength_progress(workouts)

        assert len(progress) == 1
        assert progress[0].exercise_id == "bench_press"
        assert progress[0].start_weight == 90
        assert progress[0].current_weight == 100
        assert progress[0].gain == 10

    def test_recent_records(self, workouts, records):
        recent = recent_records(workouts, records, NOW)

        assert [(r.exercise_id, r.weight, r.when) for r in recent] == [
            ("low_bar_squat", 120, "Today"),
            ("bench_press", 100, "2 days ago"),
        ]

    @pytest.mark.parametrize(
        "days,label",
        [(0, "Today"), (1, "1 day ago"), (6, "6 days ago"), (7, "1 week ago"), (15, "2 weeks ago")],
    )
    def test_relative_day_label(self, days, label):
        assert relative_day_label(days) == label
