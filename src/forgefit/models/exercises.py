"""Exercise definitions and the built-in catalog."""

from dataclasses import dataclass, field
from enum import Enum


class ExerciseCategory(str, Enum):
    """Training style an exercise belongs to."""

    BOXING = "boxing"
    MMA = "mma"
    POWERLIFTING = "powerlifting"
    RUNNING = "running"
    CALISTHENICS = "calisthenics"
    COMMERCIAL_GYM = "commercial_gym"
    STREET_GYM = "street_gym"
    EXTRAS = "extras"


class MuscleGroup(str, Enum):
    """Muscle groups used for volume breakdowns."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    GLUTES = "glutes"
    FULL_BODY = "full_body"


class Difficulty(str, Enum):
    """Exercise difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class Exercise:
    """A catalog entry. Immutable once created."""

    id: str
    name: str
    category: ExerciseCategory
    muscle_group: MuscleGroup
    primary_muscle: str = ""
    equipment: str | None = None
    difficulty: Difficulty | None = None
    secondary_muscles: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_custom(self) -> bool:
        return self.id.startswith("custom_")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "muscleGroup": self.muscle_group.value,
            "primaryMuscle": self.primary_muscle,
        }
        if self.equipment is not None:
            data["equipment"] = self.equipment
        if self.difficulty is not None:
            data["difficulty"] = self.difficulty.value
        if self.secondary_muscles:
            data["secondaryMuscles"] = list(self.secondary_muscles)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        difficulty = data.get("difficulty")
        return cls(
            id=data["id"],
            name=data["name"],
            category=ExerciseCategory(data["category"]),
            muscle_group=MuscleGroup(data["muscleGroup"]),
            primary_muscle=data.get("primaryMuscle", ""),
            equipment=data.get("equipment"),
            difficulty=Difficulty(difficulty) if difficulty else None,
            secondary_muscles=tuple(data.get("secondaryMuscles", [])),
        )


def _ex(
    id: str,
    name: str,
    category: ExerciseCategory,
    muscle_group: MuscleGroup,
    primary_muscle: str,
    equipment: str | None = None,
    difficulty: Difficulty | None = None,
    secondary: tuple[str, ...] = (),
) -> Exercise:
    return Exercise(
        id=id,
        name=name,
        category=category,
        muscle_group=muscle_group,
        primary_muscle=primary_muscle,
        equipment=equipment,
        difficulty=difficulty,
        secondary_muscles=secondary,
    )


C = ExerciseCategory
M = MuscleGroup
D = Difficulty

BUILTIN_EXERCISES: list[Exercise] = [
    # Powerlifting
    _ex("bench_press", "Bench Press", C.POWERLIFTING, M.CHEST, "Pectorals",
        "Barbell", D.INTERMEDIATE, ("Triceps", "Front delts")),
    _ex("low_bar_squat", "Low Bar Squat", C.POWERLIFTING, M.LEGS, "Quadriceps",
        "Barbell", D.ADVANCED, ("Glutes", "Hamstrings", "Lower back")),
    _ex("deadlift", "Deadlift", C.POWERLIFTING, M.BACK, "Spinal erectors",
        "Barbell", D.ADVANCED, ("Glutes", "Hamstrings", "Traps")),
    _ex("sumo_deadlift", "Sumo Deadlift", C.POWERLIFTING, M.LEGS, "Adductors",
        "Barbell", D.ADVANCED, ("Glutes", "Quadriceps")),
    _ex("overhead_press", "Overhead Press", C.POWERLIFTING, M.SHOULDERS, "Front delts",
        "Barbell", D.INTERMEDIATE, ("Triceps", "Upper chest")),
    # Commercial gym
    _ex("incline_bench_press", "Incline Bench Press", C.COMMERCIAL_GYM, M.CHEST,
        "Upper chest", "Barbell", D.INTERMEDIATE, ("Front delts", "Triceps")),
    _ex("lat_pulldown", "Lat Pulldown", C.COMMERCIAL_GYM, M.BACK, "Lats",
        "Cable", D.BEGINNER, ("Biceps", "Rear delts")),
    _ex("seated_cable_row", "Seated Cable Row", C.COMMERCIAL_GYM, M.BACK, "Mid back",
        "Cable", D.BEGINNER, ("Lats", "Biceps")),
    _ex("leg_press", "Leg Press", C.COMMERCIAL_GYM, M.LEGS, "Quadriceps",
        "Machine", D.BEGINNER, ("Glutes",)),
    _ex("leg_curl", "Leg Curl", C.COMMERCIAL_GYM, M.LEGS, "Hamstrings",
        "Machine", D.BEGINNER),
    _ex("hip_thrust", "Hip Thrust", C.COMMERCIAL_GYM, M.GLUTES, "Glutes",
        "Barbell", D.INTERMEDIATE, ("Hamstrings",)),
    _ex("lateral_raise", "Lateral Raise", C.COMMERCIAL_GYM, M.SHOULDERS, "Side delts",
        "Dumbbell", D.BEGINNER),
    _ex("barbell_curl", "Barbell Curl", C.COMMERCIAL_GYM, M.ARMS, "Biceps",
        "Barbell", D.BEGINNER, ("Forearms",)),
    _ex("tricep_pushdown", "Tricep Pushdown", C.COMMERCIAL_GYM, M.ARMS, "Triceps",
        "Cable", D.BEGINNER),
    _ex("cable_crunch", "Cable Crunch", C.COMMERCIAL_GYM, M.CORE, "Abs",
        "Cable", D.BEGINNER),
    # Street gym
    _ex("dumbbell_row", "Dumbbell Row", C.STREET_GYM, M.BACK, "Lats",
        "Dumbbell", D.BEGINNER, ("Biceps",)),
    _ex("goblet_squat", "Goblet Squat", C.STREET_GYM, M.LEGS, "Quadriceps",
        "Dumbbell", D.BEGINNER, ("Glutes", "Core")),
    _ex("hammer_curl", "Hammer Curl", C.STREET_GYM, M.ARMS, "Brachialis",
        "Dumbbell", D.BEGINNER, ("Forearms",)),
    # Calisthenics
    _ex("pull_up", "Pull Up", C.CALISTHENICS, M.BACK, "Lats",
        "Pull-up bar", D.INTERMEDIATE, ("Biceps",)),
    _ex("parallel_bar_dip", "Parallel Bar Dip", C.CALISTHENICS, M.CHEST, "Lower chest",
        "Parallel bars", D.INTERMEDIATE, ("Triceps",)),
    _ex("push_up", "Push Up", C.CALISTHENICS, M.CHEST, "Pectorals",
        None, D.BEGINNER, ("Triceps", "Core")),
    _ex("hanging_leg_raise", "Hanging Leg Raise", C.CALISTHENICS, M.CORE, "Lower abs",
        "Pull-up bar", D.INTERMEDIATE),
    # Combat sports
    _ex("heavy_bag_rounds", "Heavy Bag Rounds", C.BOXING, M.FULL_BODY, "Shoulders",
        "Heavy bag", D.INTERMEDIATE, ("Core",)),
    _ex("medicine_ball_slam", "Medicine Ball Slam", C.MMA, M.FULL_BODY, "Core",
        "Medicine ball", D.BEGINNER, ("Shoulders", "Lats")),
    _ex("sprawl", "Sprawl", C.MMA, M.FULL_BODY, "Hips",
        None, D.INTERMEDIATE, ("Core",)),
    # Running
    _ex("walking_lunge", "Walking Lunge", C.RUNNING, M.LEGS, "Quadriceps",
        "Dumbbell", D.BEGINNER, ("Glutes",)),
    _ex("calf_raise", "Calf Raise", C.RUNNING, M.LEGS, "Calves",
        "Machine", D.BEGINNER),
    # Extras
    _ex("farmer_carry", "Farmer Carry", C.EXTRAS, M.FULL_BODY, "Grip",
        "Dumbbell", D.BEGINNER, ("Traps", "Core")),
    _ex("face_pull", "Face Pull", C.EXTRAS, M.SHOULDERS, "Rear delts",
        "Cable", D.BEGINNER, ("Traps",)),
]

del C, M, D
