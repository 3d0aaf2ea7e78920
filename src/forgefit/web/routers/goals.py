"""Goal routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from ...context import AppContext
from ...services.goals import deadline_countdown
from ..deps import get_context
from ..schemas import GoalCreate

router = APIRouter(prefix="/goals", tags=["goals"])


def _goal_response(goal) -> dict:
    data = goal.to_dict()
    countdown, overdue = deadline_countdown(goal.deadline)
    data["countdown"] = countdown
    data["overdue"] = overdue and not goal.completed
    return data


@router.get("")
async def list_goals(app: AppContext = Depends(get_context)):
    return [_goal_response(g) for g in await app.goals.list_goals()]


@router.post("", status_code=201)
async def create_goal(body: GoalCreate, app: AppContext = Depends(get_context)):
    """Create a goal. Progress is computed from the current weight."""
    exercise = app.exercises.get(body.exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Unknown exercise '{body.exercise_id}'")

    try:
        deadline = date.fromisoformat(body.deadline)
    except ValueError:
        deadline = body.deadline

    goal = await app.goals.create_goal(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        current_weight=body.current_weight,
        target_weight=body.target_weight,
        deadline=deadline,
    )
    return _goal_response(goal)


@router.delete("/{goal_id}")
async def delete_goal(goal_id: str, app: AppContext = Depends(get_context)):
    if not await app.goals.delete_goal(goal_id):
        raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")
    return {"status": "deleted", "id": goal_id}


@router.post("/reconcile")
async def reconcile_goals(app: AppContext = Depends(get_context)):
    """Re-check goals against the stored personal records."""
    achieved = await app.goals.reconcile()
    return {"achievedGoals": [a.to_dict() for a in achieved]}
