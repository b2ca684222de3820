import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from workout.api.deps import require_client, get_log_repository
from workout.domain.Caller import Caller
from workout.events.event_helpers import publish_set_completed, publish_set_unchecked
from workout.infra.WorkoutLog_Repository import WorkoutLogRepository
from workout.utilities.dates import parse_day
from workout.utilities.validators import CompleteAllSetsInput, CompleteSetInput, UncheckSetInput

router = APIRouter(prefix="/api/client", tags=["workout-logs"])
logger = logging.getLogger(__name__)


@router.get("/workout-logs")
def list_workout_logs(date_str: Optional[str] = Query(default=None, alias="date"),
                      plan_exercise_id: Optional[str] = Query(default=None, alias="planExerciseId"),
                      caller: Caller = Depends(require_client),
                      logs: WorkoutLogRepository = Depends(get_log_repository)):
    """Logs for a date, for one plan exercise, for both, or the whole history."""
    if date_str is not None:
        entries = logs.list_for_date(caller.user_id, parse_day(date_str), plan_exercise_id)
    elif plan_exercise_id:
        entries = logs.list_for_exercise(caller.user_id, plan_exercise_id)
    else:
        entries = logs.list_for_client(caller.user_id)
    return [e.to_dict() for e in entries]


@router.post("/complete-set")
def complete_set(payload: CompleteSetInput,
                 caller: Caller = Depends(require_client),
                 logs: WorkoutLogRepository = Depends(get_log_repository)):
    entry, created = logs.complete_set(
        caller.user_id, payload.plan_exercise_id, payload.set_number, payload.day,
        actual_reps=payload.actual_reps, actual_weight=payload.actual_weight,
        actual_duration=payload.actual_duration, notes=payload.notes,
    )
    if created:
        publish_set_completed(entry)
    else:
        logger.debug("Duplicate complete-set ignored for %s", entry.key)
    return JSONResponse(status_code=201 if created else 200,
                        content={"created": created, "workoutLog": entry.to_dict()})


@router.delete("/uncheck-set", status_code=204)
def uncheck_set(payload: UncheckSetInput,
                caller: Caller = Depends(require_client),
                logs: WorkoutLogRepository = Depends(get_log_repository)):
    day = payload.day
    if logs.uncheck_set(caller.user_id, payload.plan_exercise_id, payload.set_number, day):
        publish_set_unchecked(caller.user_id, payload.plan_exercise_id, payload.set_number, day)
    return Response(status_code=204)


@router.post("/complete-exercise-all-sets")
def complete_exercise_all_sets(payload: CompleteAllSetsInput,
                               caller: Caller = Depends(require_client),
                               logs: WorkoutLogRepository = Depends(get_log_repository)):
    created = logs.complete_exercise_all_sets(
        caller.user_id, payload.plan_exercise_id, payload.total_sets, payload.day,
        actual_weight=payload.actual_weight, actual_reps=payload.actual_reps,
        actual_duration=payload.actual_duration, notes=payload.notes,
    )
    for entry in created:
        publish_set_completed(entry)
    return JSONResponse(status_code=201 if created else 200, content={
        "message": "Exercise completed successfully",
        "completedSets": len(created),
        "totalSets": payload.total_sets,
        "workoutLogs": [e.to_dict() for e in created],
    })
