"""Exercise catalog routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...context import AppContext
from ...models.exercises import ExerciseCategory
from ..deps import get_context
from ..schemas import CustomExerciseCreate

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    q: str = "",
    category: ExerciseCategory | None = None,
    app: AppContext = Depends(get_context),
):
    """Built-in and custom exercises, optionally filtered."""
    return [e.to_dict() for e in app.exercises.search(q, category)]


@router.post("", status_code=201)
async def add_custom_exercise(
    body: CustomExerciseCreate, app: AppContext = Depends(get_context)
):
    exercise = await app.exercises.add_custom(
        body.name,
        category=body.category,
        muscle_group=body.muscle_group,
        primary_muscle=body.primary_muscle,
        equipment=body.equipment,
        difficulty=body.difficulty,
    )
    return exercise.to_dict()


@router.delete("/{exercise_id}")
async def delete_custom_exercise(exercise_id: str, app: AppContext = Depends(get_context)):
    """Delete a custom exercise. Built-in ones cannot be removed."""
    if not await app.exercises.delete_custom(exercise_id):
        raise HTTPException(status_code=404, detail=f"No custom exercise '{exercise_id}'")
    return {"status": "deleted", "id": exercise_id}
