"""Weight goal model."""

from dataclasses import dataclass

from .workout import round_half_up


def compute_progress(current: float, target: float) -> int:
    """Progress towards a target as a whole percentage capped at 100."""
    if current >= target:
        return 100
    return min(100, round_half_up(current / target * 100))


@dataclass
class Goal:
    """A target weight for one exercise.

    ``completed`` only ever moves from False to True; once set, the goal is
    frozen at 100% progress.
    """

    id: str
    exercise_id: str
    exercise_name: str
    current_weight: float
    target_weight: float
    deadline: str
    progress: int = 0
    completed: bool = False

    def __post_init__(self):
        if self.completed:
            self.progress = 100

    def record_weight(self, weight: float) -> bool:
        """Apply a lifted weight to the goal.

        Returns:
            True if this call completed the goal, False otherwise
        """
        if self.completed:
            return False

        if weight >= self.target_weight:
            self.completed = True
            self.progress = 100
            self.current_weight = weight
            return True

        if weight > self.current_weight:
            self.current_weight = weight
            self.progress = compute_progress(weight, self.target_weight)
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "currentWeight": self.current_weight,
            "targetWeight": self.target_weight,
            "deadline": self.deadline,
            "progress": self.progress,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Goal":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            exercise_id=data["exerciseId"],
            exercise_name=data.get("exerciseName", data["exerciseId"]),
            current_weight=float(data["currentWeight"]),
            target_weight=float(data["targetWeight"]),
            deadline=data.get("deadline", ""),
            progress=int(data.get("progress", 0)),
            completed=bool(data.get("completed", False)),
        )
