"""Plan domain entities: training plan, its per-weekday exercise templates and client assignments.

These are read-only snapshots of what the external plan store holds.
"""
from datetime import date, datetime
from typing import List, Optional

from workout.utilities.constants import DATE_FORMAT


def _parse_optional_day(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Plan store may hold full timestamps; only the calendar day matters here
    return datetime.strptime(str(value)[:10], DATE_FORMAT).date()


def _optional_number(value):
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return float(value)


class PlanExerciseTemplate:
    def __init__(self, id: str, plan_id: str, exercise_id: str, day_of_week: int,
                 sets: Optional[int] = None, reps: Optional[int] = None, weight=None,
                 duration: Optional[int] = None, rest_time: Optional[int] = None, notes: str = ""):
        if not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
            raise ValueError(f"day_of_week must be 0..6, got {day_of_week!r}")
        self.id = id
        self.plan_id = plan_id
        self.exercise_id = exercise_id
        self.day_of_week = day_of_week
        self.sets = sets
        self.reps = reps
        self.weight = weight
        self.duration = duration
        self.rest_time = rest_time
        self.notes = notes or ""

    @staticmethod
    def from_dict(data, plan_id: str = ""):
        return PlanExerciseTemplate(
            id=str(data["id"]),
            plan_id=str(data.get("planId") or plan_id),
            exercise_id=str(data.get("exerciseId", "")),
            day_of_week=int(data["dayOfWeek"]),
            sets=_optional_number(data.get("sets")),
            reps=_optional_number(data.get("reps")),
            weight=_optional_number(data.get("weight")),
            duration=_optional_number(data.get("duration")),
            rest_time=_optional_number(data.get("restTime")),
            notes=data.get("notes") or "",
        )

    def to_dict(self):
        return {
            "id": self.id,
            "planId": self.plan_id,
            "exerciseId": self.exercise_id,
            "dayOfWeek": self.day_of_week,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "duration": self.duration,
            "restTime": self.rest_time,
            "notes": self.notes,
        }

    def __repr__(self) -> str:
        return f"PlanExerciseTemplate({self.id!r}, day={self.day_of_week}, sets={self.sets})"


class TrainingPlan:
    def __init__(self, id: str, name: str = "", week_cycle: int = 1, duration_weeks: int = 0,
                 exercises: Optional[List[PlanExerciseTemplate]] = None,
                 description: str = "", goal: str = ""):
        self.id = id
        self.name = name
        # weekCycle is kept for display; templates have no week index
        self.week_cycle = week_cycle if isinstance(week_cycle, int) and week_cycle >= 1 else 1
        self.duration_weeks = duration_weeks or 0
        self.exercises = exercises[:] if exercises else []
        self.description = description or ""
        self.goal = goal or ""

    def exercises_for_day(self, day_of_week: int) -> List[PlanExerciseTemplate]:
        return [t for t in self.exercises if t.day_of_week == day_of_week]

    def sessions_per_week(self) -> int:
        """Number of distinct weekdays with at least one exercise."""
        return len({t.day_of_week for t in self.exercises})

    @staticmethod
    def from_dict(data):
        plan_id = str(data["id"])
        return TrainingPlan(
            id=plan_id,
            name=data.get("name", ""),
            week_cycle=data.get("weekCycle") or 1,
            duration_weeks=data.get("durationWeeks", data.get("duration")) or 0,
            exercises=[PlanExerciseTemplate.from_dict(e, plan_id) for e in data.get("exercises", [])],
            description=data.get("description") or "",
            goal=data.get("goal") or "",
        )

    def to_dict(self, include_exercises: bool = False):
        d = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "goal": self.goal,
            "weekCycle": self.week_cycle,
            "durationWeeks": self.duration_weeks,
        }
        if include_exercises:
            d["exercises"] = [e.to_dict() for e in self.exercises]
        return d


class ClientPlanAssignment:
    def __init__(self, id: str, client_id: str, plan_id: str, start_date: date,
                 is_active: bool = True, end_date: Optional[date] = None):
        self.id = id
        self.client_id = client_id
        self.plan_id = plan_id
        self.start_date = start_date
        self.is_active = bool(is_active)
        self.end_date = end_date

    @staticmethod
    def from_dict(data):
        return ClientPlanAssignment(
            id=str(data["id"]),
            client_id=str(data["clientId"]),
            plan_id=str(data["planId"]),
            start_date=_parse_optional_day(data.get("startDate")),
            is_active=data.get("isActive", True),
            end_date=_parse_optional_day(data.get("endDate")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "clientId": self.client_id,
            "planId": self.plan_id,
            "startDate": self.start_date.strftime(DATE_FORMAT) if self.start_date else None,
            "endDate": self.end_date.strftime(DATE_FORMAT) if self.end_date else None,
            "isActive": self.is_active,
        }
