"""Statistics and personal record routes."""

from datetime import datetime

from fastapi import APIRouter, Depends

from ...context import AppContext
from ...services import stats as stats_service
from ..deps import get_context

router = APIRouter(tags=["stats"])


@router.get("/personal-records")
async def personal_records(app: AppContext = Depends(get_context)):
    """Heaviest completed set per exercise id."""
    return await app.load_records()


@router.get("/stats")
async def get_stats(app: AppContext = Depends(get_context)):
    """Level plus the derived history statistics."""
    workouts = await app.load_history()
    records = await app.load_records()
    now = datetime.now().astimezone()

    summary = stats_service.monthly_summary(workouts, records, now)
    return {
        "user": app.user.stats.to_dict(),
        "month": {
            "workouts": summary.workout_count,
            "totalVolume": summary.total_volume,
            "personalRecords": summary.record_count,
        },
        "week": [
            {"day": d.day, "date": d.date.isoformat(), "volume": d.volume}
            for d in stats_service.weekly_volume(workouts, now)
        ],
        "muscleGroups": [
            {
                "muscleGroup": m.muscle_group.value,
                "volume": m.volume,
                "sessions": m.sessions,
                "percentage": m.percentage,
            }
            for m in stats_service.muscle_volumes(workouts)
        ],
        "progress": [
            {
                "exerciseId": p.exercise_id,
                "name": p.name,
                "startWeight": p.start_weight,
                "currentWeight": p.current_weight,
                "gain": p.gain,
            }
            for p in stats_service.strength_progress(workouts)
        ],
        "recentRecords": [
            {"exerciseId": r.exercise_id, "name": r.name, "weight": r.weight, "when": r.when}
            for r in stats_service.recent_records(workouts, records, now)
        ],
    }
