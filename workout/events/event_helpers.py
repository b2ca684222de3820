"""Event helper utilities.

Publishing helpers for workout activity on the global event bus. The API layer
calls them only after a store reports an actual change.

Quick import:
    from workout.events.event_helpers import (
        publish_set_completed, publish_set_unchecked, publish_notes_saved
    )
"""
from __future__ import annotations
from datetime import date

from workout.domain.ExerciseNote import ExerciseNote
from workout.domain.WorkoutLogEntry import WorkoutLogEntry
from workout.utilities.constants import DATE_FORMAT
from .Event_Bus import (
    publish_event,
    WORKOUT_SET_COMPLETED, WORKOUT_SET_UNCHECKED, WORKOUT_NOTES_SAVED,
)

__all__ = [
    'publish_set_completed', 'publish_set_unchecked', 'publish_notes_saved',
    'WORKOUT_SET_COMPLETED', 'WORKOUT_SET_UNCHECKED', 'WORKOUT_NOTES_SAVED',
]


def publish_set_completed(entry: WorkoutLogEntry):
    """Publish a workout.set_completed event."""
    publish_event(WORKOUT_SET_COMPLETED, {'entry': entry})


def publish_set_unchecked(client_id: str, plan_exercise_id: str, set_number: int, day: date):
    """Publish a workout.set_unchecked event."""
    publish_event(WORKOUT_SET_UNCHECKED, {
        'clientId': client_id,
        'planExerciseId': plan_exercise_id,
        'setNumber': set_number,
        'date': day.strftime(DATE_FORMAT),
    })


def publish_notes_saved(note: ExerciseNote):
    """Publish a workout.notes_saved event."""
    publish_event(WORKOUT_NOTES_SAVED, {'note': note})
