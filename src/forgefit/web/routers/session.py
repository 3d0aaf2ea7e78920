"""Workout session routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...context import AppContext
from ..deps import get_context
from ..schemas import AddExerciseRequest, UpdateSetRequest

router = APIRouter(prefix="/session", tags=["session"])


@router.get("")
async def get_session(app: AppContext = Depends(get_context)):
    """Current session state and its exercises."""
    return app.session.to_dict()


@router.post("/exercises")
async def add_exercise(body: AddExerciseRequest, app: AppContext = Depends(get_context)):
    """Add an exercise with one blank set. Adding it twice is a no-op."""
    exercise = app.exercises.get(body.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Unknown exercise '{body.exercise_id}'")

    added = app.session.add_exercise(exercise)
    return {"added": added, "session": app.session.to_dict()}


@router.delete("/exercises/{exercise_id}")
async def remove_exercise(exercise_id: str, app: AppContext = Depends(get_context)):
    app.session.remove_exercise(exercise_id)
    return app.session.to_dict()


@router.post("/exercises/{exercise_id}/sets")
async def add_set(exercise_id: str, app: AppContext = Depends(get_context)):
    app.session.add_set(exercise_id)
    return app.session.to_dict()


@router.post("/exercises/{exercise_id}/sets/duplicate")
async def duplicate_set(exercise_id: str, app: AppContext = Depends(get_context)):
    """Copy the last set's weight and reps into a new, uncompleted set."""
    app.session.duplicate_set(exercise_id)
    return app.session.to_dict()


@router.patch("/exercises/{exercise_id}/sets/{index}")
async def update_set(
    exercise_id: str,
    index: int,
    body: UpdateSetRequest,
    app: AppContext = Depends(get_context),
):
    app.session.update_set(exercise_id, index, reps=body.reps, weight=body.weight)
    return app.session.to_dict()


@router.delete("/exercises/{exercise_id}/sets/{index}")
async def remove_set(exercise_id: str, index: int, app: AppContext = Depends(get_context)):
    app.session.remove_set(exercise_id, index)
    return app.session.to_dict()


@router.post("/exercises/{exercise_id}/sets/{index}/toggle")
async def toggle_set(exercise_id: str, index: int, app: AppContext = Depends(get_context)):
    """Check a set off (or back on) during an active workout."""
    completed = app.session.toggle_set_completed(exercise_id, index)
    return {"completed": completed, "session": app.session.to_dict()}


@router.post("/start")
async def start(app: AppContext = Depends(get_context)):
    app.session.start()
    return app.session.to_dict()


@router.post("/finish")
async def finish(app: AppContext = Depends(get_context)):
    """Save the workout, update records, award XP and check goals."""
    summary = await app.finish_workout()
    data = summary.to_dict()
    data["stats"] = app.user.stats.to_dict()
    return data


@router.post("/cancel")
async def cancel(app: AppContext = Depends(get_context)):
    app.session.cancel()
    return app.session.to_dict()


@router.post("/clear")
async def clear(app: AppContext = Depends(get_context)):
    app.session.clear()
    return app.session.to_dict()
