from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from workout.api.deps import (
    ActivePlan, get_active_plan, get_log_repository, get_notes_repository,
    get_plan_repository, get_today, require_client,
)
from workout.domain.Caller import Caller
from workout.infra.Notes_Repository import NotesRepository
from workout.infra.Plan_Repository import PlanRepository
from workout.infra.WorkoutLog_Repository import WorkoutLogRepository
from workout.logic.reporting.progress import exercise_progress
from workout.logic.schedule.resolver import resolve
from workout.utilities.constants import DAY_NAMES, MSG_NO_ACTIVE_PLAN, MSG_PLAN_NOT_FOUND, MSG_REST_DAY
from workout.utilities.dates import format_day, parse_day

router = APIRouter(prefix="/api/client", tags=["workouts"])


def build_workout(active: ActivePlan, day: date, plans: PlanRepository,
                  logs: WorkoutLogRepository, notes: NotesRepository) -> dict:
    """Resolve the day's exercises and merge in the logged sets and saved notes."""
    if active.assignment is None:
        return {"date": format_day(day), "workout": None, "planDetails": None, "message": MSG_NO_ACTIVE_PLAN}
    if active.plan is None:
        return {"date": format_day(day), "workout": None, "planDetails": None, "message": MSG_PLAN_NOT_FOUND}

    schedule = resolve(active.plan, active.assignment, day)
    if schedule.no_active_plan:
        return {"date": format_day(day), "workout": None, "planDetails": None, "message": MSG_NO_ACTIVE_PLAN}

    entries = logs.list_for_date(active.client_id, day) if schedule.exercises else []
    saved_notes = {n.plan_exercise_id: n.notes for n in notes.list_for_date(active.client_id, day)} \
        if schedule.exercises else {}

    exercises = []
    for template in schedule.exercises:
        item = template.to_dict()
        item["exercise"] = plans.get_exercise(template.exercise_id)
        item.update(exercise_progress(template, entries, day))
        item["exerciseNotes"] = saved_notes.get(template.id)
        exercises.append(item)

    response = {
        "date": format_day(day),
        "workout": {
            "planName": active.plan.name,
            "dayOfWeek": schedule.day_of_week,
            "dayName": DAY_NAMES[schedule.day_of_week],
            "week": schedule.week,
            "restDay": schedule.rest_day,
            "exercises": exercises,
        },
        "planDetails": active.plan.to_dict(),
    }
    if schedule.rest_day:
        response["message"] = MSG_REST_DAY
    return response


@router.get("/workout-by-date")
def workout_by_date(date_str: Optional[str] = Query(default=None, alias="date"),
                    active: ActivePlan = Depends(get_active_plan),
                    plans: PlanRepository = Depends(get_plan_repository),
                    logs: WorkoutLogRepository = Depends(get_log_repository),
                    notes: NotesRepository = Depends(get_notes_repository)):
    return build_workout(active, parse_day(date_str), plans, logs, notes)


@router.get("/today-workout")
def today_workout(today: date = Depends(get_today),
                  active: ActivePlan = Depends(get_active_plan),
                  plans: PlanRepository = Depends(get_plan_repository),
                  logs: WorkoutLogRepository = Depends(get_log_repository),
                  notes: NotesRepository = Depends(get_notes_repository)):
    return build_workout(active, today, plans, logs, notes)


@router.get("/assigned-plans")
def assigned_plans(caller: Caller = Depends(require_client),
                   plans: PlanRepository = Depends(get_plan_repository)):
    """Every assignment of the caller, active or not, with its plan summary."""
    result = []
    for assignment in plans.get_client_plans(caller.user_id):
        plan = plans.get_training_plan(assignment.plan_id)
        item = assignment.to_dict()
        item.update({
            "name": plan.name if plan else "Unknown Plan",
            "goal": plan.goal if plan else "",
            "durationWeeks": plan.duration_weeks if plan else 0,
            "weekCycle": plan.week_cycle if plan else 1,
            "sessionsPerWeek": plan.sessions_per_week() if plan else 0,
        })
        result.append(item)
    return result
