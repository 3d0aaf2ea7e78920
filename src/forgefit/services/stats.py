"""Statistics derived from the workout history."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..models.exercises import MuscleGroup
from ..models.workout import CompletedWorkout, round_half_up

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass
class MonthlySummary:
    workout_count: int
    total_volume: float
    record_count: int


@dataclass
class DayVolume:
    day: str
    date: date
    volume: float


@dataclass
class MuscleVolume:
    muscle_group: MuscleGroup
    volume: float
    sessions: int
    percentage: int  # relative to the most trained group


@dataclass
class StrengthProgress:
    exercise_id: str
    name: str
    start_weight: float
    current_weight: float

    @property
    def gain(self) -> float:
        return self.current_weight - self.start_weight


@dataclass
class RecentRecord:
    exercise_id: str
    name: str
    weight: float
    when: str


def _local_date(moment: datetime, now: datetime) -> date:
    """Calendar date of ``moment`` in the timezone of ``now``."""
    if moment.tzinfo is not None and now.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)
    return moment.date()


def _days_between(earlier: datetime, later: datetime) -> int:
    if (earlier.tzinfo is None) != (later.tzinfo is None):
        earlier = earlier.replace(tzinfo=later.tzinfo)
    return (later - earlier).days


def relative_day_label(days: int) -> str:
    """``Today``, ``1 day ago``, ``3 days ago``, ``2 weeks ago``..."""
    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    weeks = days // 7
    return f"{weeks} week{'s' if weeks > 1 else ''} ago"


def workouts_this_month(workouts: list[CompletedWorkout], now: datetime) -> list[CompletedWorkout]:
    today = now.date()
    month = []
    for workout in workouts:
        day = _local_date(workout.date, now)
        if day.year == today.year and day.month == today.month:
            month.append(workout)
    return month


def monthly_summary(
    workouts: list[CompletedWorkout], records: dict[str, float], now: datetime
) -> MonthlySummary:
    month = workouts_this_month(workouts, now)
    return MonthlySummary(
        workout_count=len(month),
        total_volume=sum(w.total_volume for w in month),
        record_count=len(records),
    )


def weekly_volume(workouts: list[CompletedWorkout], now: datetime) -> list[DayVolume]:
    """Volume per day for the current Monday-to-Sunday week."""
    today = now.date()
    monday = today - timedelta(days=today.weekday())
    days = [
        DayVolume(day=label, date=monday + timedelta(days=i), volume=0)
        for i, label in enumerate(WEEKDAYS)
    ]
    by_date = {d.date: d for d in days}
    for workout in workouts:
        slot = by_date.get(_local_date(workout.date, now))
        if slot is not None:
            slot.volume += workout.total_volume
    return days


def muscle_volumes(workouts: list[CompletedWorkout]) -> list[MuscleVolume]:
    """Volume and session count per muscle group, most trained first.

    Groups with no volume are left out.
    """
    volumes = {group: 0.0 for group in MuscleGroup}
    sessions: dict[MuscleGroup, set[str]] = {group: set() for group in MuscleGroup}

    for workout in workouts:
        for exercise in workout.exercises:
            volumes[exercise.muscle_group] += exercise.volume
            sessions[exercise.muscle_group].add(workout.id)

    top = max(max(volumes.values()), 1)
    result = [
        MuscleVolume(
            muscle_group=group,
            volume=volume,
            sessions=len(sessions[group]),
            percentage=round_half_up(volume / top * 100),
        )
        for group, volume in volumes.items()
        if volume > 0
    ]
    result.sort(key=lambda m: m.volume, reverse=True)
    return result


def strength_progress(workouts: list[CompletedWorkout], limit: int = 3) -> list[StrengthProgress]:
    """Exercises whose best weight grew since their first logged session."""
    progress: dict[str, StrengthProgress] = {}
    for workout in sorted(workouts, key=lambda w: w.date):
        for exercise in workout.exercises:
            best = exercise.max_weight
            if best <= 0:
                continue
            entry = progress.get(exercise.exercise_id)
            if entry is None:
                progress[exercise.exercise_id] = StrengthProgress(
                    exercise_id=exercise.exercise_id,
                    name=exercise.exercise_name,
                    start_weight=best,
                    current_weight=best,
                )
            else:
                entry.current_weight = max(entry.current_weight, best)

    improved = [p for p in progress.values() if p.current_weight > p.start_weight]
    improved.sort(key=lambda p: p.gain, reverse=True)
    return improved[:limit]


def recent_records(
    workouts: list[CompletedWorkout],
    records: dict[str, float],
    now: datetime,
    limit: int = 3,
) -> list[RecentRecord]:
    """Sessions among the 10 newest workouts where a current PR was lifted."""
    recent = sorted(workouts, key=lambda w: w.date, reverse=True)[:10]
    found = []
    for workout in recent:
        for exercise in workout.exercises:
            best = exercise.max_weight
            if best > 0 and best == records.get(exercise.exercise_id):
                found.append(
                    RecentRecord(
                        exercise_id=exercise.exercise_id,
                        name=exercise.exercise_name,
                        weight=best,
                        when=relative_day_label(_days_between(workout.date, now)),
                    )
                )
    return found[:limit]
