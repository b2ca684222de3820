from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from workout.api.deps import ActivePlan, get_active_plan, get_log_repository, get_today, require_client
from workout.domain.Caller import Caller
from workout.events.web_observers import get_events
from workout.infra.WorkoutLog_Repository import WorkoutLogRepository
from workout.logic.reporting.progress import weekly_stats, workout_streak
from workout.utilities.dates import week_bounds

router = APIRouter(prefix="/api/client", tags=["workout-stats"])


@router.get("/weekly-stats")
def get_weekly_stats(today: date = Depends(get_today),
                     active: ActivePlan = Depends(get_active_plan),
                     logs: WorkoutLogRepository = Depends(get_log_repository)):
    monday, sunday = week_bounds(today)
    entries = logs.list_for_range(active.client_id, monday, sunday)
    return weekly_stats(active.plan, active.assignment, entries, today)


@router.get("/workout-streak")
def get_workout_streak(today: date = Depends(get_today),
                       active: ActivePlan = Depends(get_active_plan),
                       logs: WorkoutLogRepository = Depends(get_log_repository)):
    entries = logs.list_for_range(active.client_id, date.min, today)
    return {"streak": workout_streak(active.plan, active.assignment, entries, today)}


@router.get("/workout-events")
def get_workout_events(since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
                       caller: Caller = Depends(require_client)):
    """
    Recent set/notes activity for the caller.

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from the response.
        3. Subsequent polls: /api/client/workout-events?since=<next_cursor>
    """
    return get_events(caller.user_id, since)
