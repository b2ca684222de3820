"""Plan builders shared by the test modules."""
import json
from datetime import date
from pathlib import Path

from workout.domain.TrainingPlan import ClientPlanAssignment, PlanExerciseTemplate, TrainingPlan
from workout.domain.WorkoutLogEntry import WorkoutLogEntry

MONDAY = date(2025, 9, 1)  # a Monday; plans in these tests start here


def template(id, day_of_week, sets=3, plan_id="plan-1", exercise_id=None, **kw):
    return PlanExerciseTemplate(id, plan_id, exercise_id or f"ex-{id}", day_of_week, sets=sets, **kw)


def make_plan(templates, week_cycle=1, plan_id="plan-1"):
    return TrainingPlan(plan_id, name="Test Plan", week_cycle=week_cycle, exercises=templates)


def make_assignment(start=MONDAY, active=True, client_id="client-1", plan_id="plan-1"):
    return ClientPlanAssignment("cp-1", client_id, plan_id, start, is_active=active)


def entry(plan_exercise_id, set_number, day, client_id="client-1"):
    return WorkoutLogEntry(client_id, plan_exercise_id, set_number, day)


def write_plan_store(path: Path):
    """Write a plan store with one active client, one inactive client and a catalog."""
    store = {
        "plans": [{
            "id": "plan-1",
            "name": "Strength A",
            "weekCycle": 2,
            "durationWeeks": 0,
            "exercises": [
                {"id": "pe-squat", "exerciseId": "ex-squat", "dayOfWeek": 0, "sets": 3, "reps": 5, "weight": 80},
                {"id": "pe-bench", "exerciseId": "ex-bench", "dayOfWeek": 0, "sets": 2, "reps": 8},
                {"id": "pe-row", "exerciseId": "ex-row", "dayOfWeek": 2, "sets": 4, "reps": 10},
            ],
        }],
        "assignments": [
            {"id": "cp-1", "clientId": "client-1", "planId": "plan-1", "startDate": "2025-09-01T00:00:00Z", "isActive": True},
            {"id": "cp-2", "clientId": "client-3", "planId": "plan-1", "startDate": "2025-09-01", "isActive": False},
            {"id": "cp-3", "clientId": "client-4", "planId": "plan-missing", "startDate": "2025-09-01", "isActive": True},
        ],
        "exercises": [
            {"id": "ex-squat", "name": "Back Squat", "category": "legs"},
            {"id": "ex-bench", "name": "Bench Press", "category": "chest"},
        ],
    }
    path.write_text(json.dumps(store), encoding="utf-8")
    return path
