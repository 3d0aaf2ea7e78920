"""Tests for the workout session state machine."""

from datetime import datetime, timedelta, timezone

import pytest

from forgefit.db.repositories import PersonalRecordRepository, WorkoutHistoryRepository
from forgefit.errors import ValidationError
from forgefit.models.workout import WorkoutSet
from forgefit.services.session import SessionState, WorkoutSession

T0 = datetime(2026, 3, 9, 18, 0, tzinfo=timezone.utc)


def _log_set(session, exercise_id, index, reps, weight, completed=True):
    session.update_set(exercise_id, index, reps=reps, weight=weight)
    if completed:
        session.toggle_set_completed(exercise_id, index)


class TestSessionEditing:
    """Tests for building up a session before it starts."""

    def test_starts_idle(self, session):
        assert session.state == SessionState.IDLE
        assert session.exercises == []
        assert session.started_at is None

    def test_add_exercise_moves_to_building(self, session, bench_press):
        assert session.add_exercise(bench_press) is True

        assert session.state == SessionState.BUILDING
        assert session.exercises[0].sets == [WorkoutSet()]

    def test_add_exercise_twice_is_noop(self, session, bench_press):
        session.add_exercise(bench_press)
        assert session.add_exercise(bench_press) is False
        assert len(session.exercises) == 1

    def test_remove_last_exercise_returns_to_idle(self, session, bench_press):
        session.add_exercise(bench_press)
        session.remove_exercise(bench_press.id)
        assert session.state == SessionState.IDLE

    def test_remove_unknown_exercise_rejected(self, session):
        with pytest.raises(ValidationError):
            session.remove_exercise("deadlift")

    def test_add_set_appends_blank(self, session, bench_press):
        session.add_exercise(bench_press)
        session.update_set(bench_press.id, 0, reps=5, weight=80)
        session.add_set(bench_press.id)

        assert session.exercises[0].sets[1] == WorkoutSet()

    def test_duplicate_set_copies_last_but_not_completion(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=80)

        new_set = session.duplicate_set(bench_press.id)

        assert (new_set.reps, new_set.weight, new_set.completed) == (5, 80, False)
        assert len(session.exercises[0].sets) == 2

    def test_remove_only_set_leaves_blank_set(self, session, bench_press):
        session.add_exercise(bench_press)
        session.update_set(bench_press.id, 0, reps=5, weight=80)
        session.remove_set(bench_press.id, 0)

        assert session.exercises[0].sets == [WorkoutSet()]

    def test_remove_set_out_of_range_rejected(self, session, bench_press):
        session.add_exercise(bench_press)
        with pytest.raises(ValidationError):
            session.remove_set(bench_press.id, 3)

    def test_update_set_partial(self, session, bench_press):
        session.add_exercise(bench_press)
        session.update_set(bench_press.id, 0, reps=5, weight=80)
        session.update_set(bench_press.id, 0, weight=85)

        assert session.exercises[0].sets[0] == WorkoutSet(reps=5, weight=85)

    @pytest.mark.parametrize(
        "changes",
        [{"reps": -1}, {"reps": 2.5}, {"weight": -10}],
    )
    def test_update_set_rejects_invalid_values(self, session, bench_press, changes):
        session.add_exercise(bench_press)
        with pytest.raises(ValidationError):
            session.update_set(bench_press.id, 0, **changes)
        assert session.exercises[0].sets[0] == WorkoutSet()

    def test_toggle_requires_active_session(self, session, bench_press):
        session.add_exercise(bench_press)
        with pytest.raises(ValidationError):
            session.toggle_set_completed(bench_press.id, 0)

    def test_clear_keeps_timer(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        session.clear()

        assert session.exercises == []
        assert session.started_at == T0


class TestSessionLifecycle:
    """Tests for start, cancel and finish."""

    def test_start_requires_exercises(self, session):
        with pytest.raises(ValidationError):
            session.start(T0)

    def test_start_twice_rejected(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        with pytest.raises(ValidationError):
            session.start(T0)

    def test_toggle_flips_back(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)

        assert session.toggle_set_completed(bench_press.id, 0) is True
        assert session.toggle_set_completed(bench_press.id, 0) is False

    def test_remove_last_exercise_while_active_goes_idle(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        session.remove_exercise(bench_press.id)

        assert session.state == SessionState.IDLE
        assert session.started_at is None

    async def test_cancel_saves_nothing(self, session, store, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)
        session.cancel()

        assert session.state == SessionState.IDLE
        assert await WorkoutHistoryRepository(store).list_all() == []

    async def test_finish_requires_active_session(self, session, bench_press):
        session.add_exercise(bench_press)
        with pytest.raises(ValidationError):
            await session.finish(T0)

    async def test_finish_saves_workout_and_records(self, session, store, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)

        result = await session.finish(T0 + timedelta(minutes=30))

        assert session.state == SessionState.IDLE
        assert result.workout.duration == 30
        assert result.workout.total_volume == 500
        assert result.new_records == {"bench_press": 100}

        history = await WorkoutHistoryRepository(store).list_all()
        assert [w.id for w in history] == [result.workout.id]
        assert await PersonalRecordRepository(store).get_all() == {"bench_press": 100}

    async def test_duration_rounds_to_nearest_minute(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        result = await session.finish(T0 + timedelta(minutes=44, seconds=30))
        assert result.workout.duration == 45

    async def test_only_completed_sets_are_saved(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)
        session.add_set(bench_press.id)
        _log_set(session, bench_press.id, 1, reps=3, weight=140, completed=False)

        result = await session.finish(T0)

        sets = result.workout.exercises[0].sets
        assert sets == [WorkoutSet(reps=5, weight=100, completed=True)]
        assert result.new_records == {"bench_press": 100}

    async def test_record_beaten(self, session, store, bench_press):
        records = PersonalRecordRepository(store)
        await records.save_all({"bench_press": 80, "deadlift": 180})

        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=1, weight=100)
        result = await session.finish(T0)

        assert result.new_records == {"bench_press": 100}
        assert await records.get_all() == {"bench_press": 100, "deadlift": 180}

    async def test_record_not_beaten(self, session, store, bench_press):
        records = PersonalRecordRepository(store)
        await records.save_all({"bench_press": 120})

        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)
        result = await session.finish(T0)

        assert result.new_records == {}
        assert await records.get_all() == {"bench_press": 120}

    async def test_exercise_without_completed_sets(self, session, bench_press, pull_up):
        """Kept in the workout with no sets, and never a record."""
        session.add_exercise(bench_press)
        session.add_exercise(pull_up)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)

        result = await session.finish(T0)

        pull_ups = result.workout.exercises[1]
        assert pull_ups.exercise_id == "pull_up"
        assert pull_ups.sets == []
        assert pull_ups.volume == 0
        assert result.workout.trained_exercise_count == 1
        assert "pull_up" not in result.new_records

    async def test_bodyweight_sets_do_not_set_records(self, session, pull_up):
        session.add_exercise(pull_up)
        session.start(T0)
        _log_set(session, pull_up.id, 0, reps=10, weight=0)

        result = await session.finish(T0)

        assert result.workout.total_volume == 0
        assert result.new_records == {}

    async def test_storage_failure_still_finishes(self, failing_store, bench_press):
        session = WorkoutSession(
            WorkoutHistoryRepository(failing_store),
            PersonalRecordRepository(failing_store),
        )
        session.add_exercise(bench_press)
        session.start(T0)
        _log_set(session, bench_press.id, 0, reps=5, weight=100)

        result = await session.finish(T0)

        assert session.state == SessionState.IDLE
        assert result.workout.total_volume == 500
        assert await WorkoutHistoryRepository(failing_store).list_all() == []

    def test_to_dict(self, session, bench_press):
        session.add_exercise(bench_press)
        session.start(T0)
        data = session.to_dict()

        assert data["state"] == "active"
        assert data["startedAt"] == T0.isoformat()
        assert data["exercises"][0]["exercise"]["id"] == "bench_press"
