"""Completion statistics derived from the workout log and the schedule.

Nothing here writes; every function works on entries already loaded from the
log store.
"""
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Set

from workout.domain.TrainingPlan import ClientPlanAssignment, PlanExerciseTemplate, TrainingPlan
from workout.domain.WorkoutLogEntry import WorkoutLogEntry
from workout.logic.schedule.resolver import resolve
from workout.utilities.dates import iter_days, week_bounds

NOT_STARTED = "not_started"
PARTIALLY_COMPLETED = "partially_completed"
FULLY_COMPLETED = "fully_completed"


def _is_valid_set_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def completed_set_numbers(entries: Iterable[WorkoutLogEntry], plan_exercise_id: str, day: date) -> Set[int]:
    return {e.set_number for e in entries
            if e.plan_exercise_id == plan_exercise_id and e.date == day and _is_valid_set_number(e.set_number)}


def completed_set_count(entries: Iterable[WorkoutLogEntry], plan_exercise_id: str, day: date) -> int:
    return len(completed_set_numbers(entries, plan_exercise_id, day))


def required_sets(total_sets: Optional[int]) -> int:
    # An exercise without a set prescription is done once one set is logged
    if not isinstance(total_sets, (int, float)) or isinstance(total_sets, bool) or total_sets <= 0:
        return 1
    return int(total_sets)


def is_fully_completed(count: int, total_sets: Optional[int]) -> bool:
    return count >= required_sets(total_sets)


def completion_status(count: int, total_sets: Optional[int]) -> str:
    if count <= 0:
        return NOT_STARTED
    if is_fully_completed(count, total_sets):
        return FULLY_COMPLETED
    return PARTIALLY_COMPLETED


def exercise_progress(template: PlanExerciseTemplate, entries: Iterable[WorkoutLogEntry], day: date) -> dict:
    numbers = sorted(completed_set_numbers(entries, template.id, day))
    return {
        "completedSets": numbers,
        "completedCount": len(numbers),
        "totalSets": required_sets(template.sets),
        "status": completion_status(len(numbers), template.sets),
    }


def _index_by_day(entries: Iterable[WorkoutLogEntry]) -> Dict[date, List[WorkoutLogEntry]]:
    by_day = defaultdict(list)
    for e in entries:
        by_day[e.date].append(e)
    return by_day


def _any_fully_completed(templates: List[PlanExerciseTemplate], day_entries: List[WorkoutLogEntry], day: date) -> bool:
    return any(is_fully_completed(completed_set_count(day_entries, t.id, day), t.sets) for t in templates)


def weekly_stats(plan: Optional[TrainingPlan], assignment: Optional[ClientPlanAssignment],
                 entries: Iterable[WorkoutLogEntry], today: date) -> dict:
    """Scheduled vs completed workout days in the Monday-start week containing today."""
    by_day = _index_by_day(entries)
    total = completed = 0
    monday, sunday = week_bounds(today)
    for day in iter_days(monday, sunday):
        schedule = resolve(plan, assignment, day)
        if not schedule.exercises:
            continue
        total += 1
        if _any_fully_completed(schedule.exercises, by_day.get(day, []), day):
            completed += 1
    return {"totalWorkouts": total, "completedWorkouts": completed}


def workout_streak(plan: Optional[TrainingPlan], assignment: Optional[ClientPlanAssignment],
                   entries: Iterable[WorkoutLogEntry], today: date) -> int:
    """Consecutive scheduled days, back from today, with at least one fully completed exercise.

    Days with nothing scheduled are skipped. The first scheduled day without a
    full completion (today included) ends the walk.
    """
    if resolve(plan, assignment, today).no_active_plan:
        return 0
    by_day = _index_by_day(entries)
    if not by_day:
        return 0
    earliest = min(by_day)
    streak = 0
    day = today
    while day >= earliest:
        schedule = resolve(plan, assignment, day)
        if schedule.exercises:
            if not _any_fully_completed(schedule.exercises, by_day.get(day, []), day):
                break
            streak += 1
        day -= timedelta(days=1)
    return streak


__all__ = [
    "NOT_STARTED", "PARTIALLY_COMPLETED", "FULLY_COMPLETED",
    "completed_set_numbers", "completed_set_count", "required_sets", "is_fully_completed",
    "completion_status", "exercise_progress", "weekly_stats", "workout_streak",
]
