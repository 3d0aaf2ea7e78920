"""Weight goals and their reconciliation against personal records."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone

from ..db.repositories import GoalRepository, PersonalRecordRepository
from ..errors import StorageError, ValidationError
from ..models.goal import Goal, compute_progress
from ..utils.ids import timestamp_id

logger = logging.getLogger(__name__)

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


@dataclass(frozen=True)
class GoalAchieved:
    """Emitted once, when a goal first reaches its target."""

    goal_id: str
    exercise_id: str
    exercise_name: str
    weight: float

    def to_dict(self) -> dict:
        return {
            "goalId": self.goal_id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "weight": self.weight,
        }


def format_deadline(day: date) -> str:
    """Deadline display string, e.g. ``5 March 2027``."""
    return f"{day.day} {MONTHS[day.month - 1]} {day.year}"


def parse_deadline(deadline: str) -> date | None:
    """Inverse of ``format_deadline``; None for free-form deadlines."""
    parts = deadline.split()
    if len(parts) < 3:
        return None
    month_names = [m.lower() for m in MONTHS]
    try:
        day = int(parts[0])
        month = month_names.index(parts[1].lower()) + 1
        year = int(parts[2])
        return date(year, month, day)
    except ValueError:
        return None


def deadline_countdown(deadline: str, today: date | None = None) -> tuple[str, bool]:
    """Human countdown to a deadline.

    Returns:
        (text, is_overdue). Deadlines that cannot be parsed are echoed back.
    """
    due = parse_deadline(deadline)
    if due is None:
        return deadline, False

    today = today or date.today()
    days = (due - today).days
    if days < 0:
        return "Overdue", True
    if days == 0:
        return "Today", False
    if days < 7:
        return f"{days} day{'s' if days != 1 else ''} left", False
    weeks = days // 7
    return f"{weeks} week{'s' if weeks != 1 else ''} left", False


def _parse_weight(value, label: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{label} must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{label} is required")
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be a number, got {value!r}") from None
    if not math.isfinite(weight):
        raise ValidationError(f"{label} must be a finite number")
    return weight


def reconcile_goals(
    goals: list[Goal], records: dict[str, float]
) -> tuple[list[GoalAchieved], bool]:
    """Apply personal records to goals in place.

    Completed goals are left alone, so running this again with the same
    records emits nothing.

    Returns:
        The goals achieved by this pass, and whether any goal changed
    """
    achieved = []
    changed = False
    for goal in goals:
        if goal.completed:
            continue
        best = records.get(goal.exercise_id) or goal.current_weight
        before = (goal.current_weight, goal.progress)
        if goal.record_weight(best):
            achieved.append(
                GoalAchieved(
                    goal_id=goal.id,
                    exercise_id=goal.exercise_id,
                    exercise_name=goal.exercise_name,
                    weight=goal.current_weight,
                )
            )
            changed = True
        elif (goal.current_weight, goal.progress) != before:
            changed = True
    return achieved, changed


class GoalService:
    """Creates, lists, deletes and reconciles goals."""

    def __init__(self, goals: GoalRepository, records: PersonalRecordRepository):
        self.goals = goals
        self.records = records

    async def list_goals(self) -> list[Goal]:
        try:
            return await self.goals.list_all()
        except StorageError as e:
            logger.error("Error loading goals: %s", e)
            return []

    async def create_goal(
        self,
        exercise_id: str,
        exercise_name: str,
        current_weight,
        target_weight,
        deadline: str | date,
        now: datetime | None = None,
    ) -> Goal:
        """Validate and store a new goal.

        Weights may be given as numbers or numeric strings. The target must be
        positive; a current weight already at the target creates a completed
        goal.
        """
        if not exercise_id:
            raise ValidationError("An exercise is required")
        current = _parse_weight(current_weight, "Current weight")
        target = _parse_weight(target_weight, "Target weight")
        if current < 0:
            raise ValidationError("Current weight must be >= 0")
        if target <= 0:
            raise ValidationError("Target weight must be greater than 0")
        if isinstance(deadline, date):
            deadline = format_deadline(deadline)

        now = now or datetime.now(timezone.utc)
        progress = compute_progress(current, target)
        try:
            goals = await self.goals.list_all()
        except StorageError as e:
            logger.error("Error loading goals: %s", e)
            goals = None

        goal = Goal(
            id=timestamp_id("goal", now, {g.id for g in goals or []}),
            exercise_id=exercise_id,
            exercise_name=exercise_name or exercise_id,
            current_weight=current,
            target_weight=target,
            deadline=deadline,
            progress=progress,
            completed=progress >= 100,
        )

        if goals is None:
            return goal
        try:
            await self.goals.save_all(goals + [goal])
            logger.info("Created goal %s: %s -> %s", goal.id, exercise_id, target)
        except StorageError as e:
            logger.error("Error saving goals: %s", e)
        return goal

    async def delete_goal(self, goal_id: str) -> bool:
        """Delete a goal.

        Returns:
            True if a goal was removed
        """
        try:
            goals = await self.goals.list_all()
            remaining = [g for g in goals if g.id != goal_id]
            if len(remaining) == len(goals):
                return False
            await self.goals.save_all(remaining)
            return True
        except StorageError as e:
            logger.error("Error deleting goal %s: %s", goal_id, e)
            return False

    async def reconcile(self, records: dict[str, float] | None = None) -> list[GoalAchieved]:
        """Bring stored goals up to date with personal records.

        Args:
            records: Records to apply; the stored map is used when omitted

        Returns:
            Goals that were achieved by this call
        """
        try:
            if records is None:
                records = await self.records.get_all()
            goals = await self.goals.list_all()
            if not goals:
                return []

            achieved, changed = reconcile_goals(goals, records)
            if changed:
                await self.goals.save_all(goals)
            for event in achieved:
                logger.info("Goal achieved: %s at %s", event.exercise_name, event.weight)
            return achieved
        except StorageError as e:
            logger.error("Error validating goals: %s", e)
            return []
