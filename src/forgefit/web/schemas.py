"""Request bodies for the JSON API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.exercises import Difficulty, ExerciseCategory, MuscleGroup


class ApiModel(BaseModel):
    """Accepts both camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddExerciseRequest(ApiModel):
    exercise_id: str


class UpdateSetRequest(ApiModel):
    reps: int | None = Field(default=None, ge=0)
    weight: float | None = Field(default=None, ge=0)


class GoalCreate(ApiModel):
    exercise_id: str
    current_weight: float | str
    target_weight: float | str
    deadline: str = Field(description="YYYY-MM-DD or free text")


class CustomExerciseCreate(ApiModel):
    name: str = Field(min_length=1)
    category: ExerciseCategory = ExerciseCategory.EXTRAS
    muscle_group: MuscleGroup = MuscleGroup.FULL_BODY
    primary_muscle: str = ""
    equipment: str | None = None
    difficulty: Difficulty | None = None
