"""Schedule resolution: which plan exercises are due on a calendar day.

Templates carry a weekday but no week index, so the same set of exercises is
returned for every occurrence of a weekday. weekCycle only feeds the
informational ``week`` number shown to the client.
"""
from datetime import date, datetime
from typing import List, Optional

from workout.domain.TrainingPlan import ClientPlanAssignment, PlanExerciseTemplate, TrainingPlan
from workout.domain.errors import ValidationError


class ScheduleResult:
    def __init__(self, day: date, exercises: Optional[List[PlanExerciseTemplate]] = None,
                 week: Optional[int] = None, no_active_plan: bool = False):
        self.day = day
        self.day_of_week = day.weekday()
        self.exercises = exercises[:] if exercises else []
        self.week = week
        self.no_active_plan = no_active_plan

    @classmethod
    def nothing_assigned(cls, day: date) -> "ScheduleResult":
        return cls(day, no_active_plan=True)

    @property
    def rest_day(self) -> bool:
        return not self.no_active_plan and not self.exercises

    def __repr__(self) -> str:
        if self.no_active_plan:
            return f"ScheduleResult({self.day}, no active plan)"
        return f"ScheduleResult({self.day}, week={self.week}, exercises={len(self.exercises)})"


def cycle_week(plan: TrainingPlan, assignment: ClientPlanAssignment, day: date) -> int:
    """1-based week within the plan's cycle, counted from the assignment start."""
    if assignment.start_date is None:
        return 1
    days_since_start = (day - assignment.start_date).days
    return (days_since_start // 7) % plan.week_cycle + 1


def resolve(plan: Optional[TrainingPlan], assignment: Optional[ClientPlanAssignment], day: date) -> ScheduleResult:
    """Return the exercises due on day, in template order.

    A missing or inactive assignment (or a missing plan) gives a "no active plan"
    result instead of an error. Days outside the assignment window still resolve.
    """
    if isinstance(day, datetime) or not isinstance(day, date):
        raise ValidationError(f"Expected a calendar date, got {day!r}")
    if plan is None or assignment is None or not assignment.is_active:
        return ScheduleResult.nothing_assigned(day)
    return ScheduleResult(
        day,
        exercises=plan.exercises_for_day(day.weekday()),
        week=cycle_week(plan, assignment, day),
    )


__all__ = ["ScheduleResult", "cycle_week", "resolve"]
