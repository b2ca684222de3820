from typing import Optional

from fastapi import APIRouter, Depends, Query

from workout.api.deps import require_client, get_notes_repository
from workout.domain.Caller import Caller
from workout.domain.errors import ValidationError
from workout.events.event_helpers import publish_notes_saved
from workout.infra.Notes_Repository import NotesRepository
from workout.utilities.dates import format_day, parse_day
from workout.utilities.validators import SaveNotesInput

router = APIRouter(prefix="/api/client", tags=["exercise-notes"])


@router.post("/save-exercise-notes")
def save_exercise_notes(payload: SaveNotesInput,
                        caller: Caller = Depends(require_client),
                        notes: NotesRepository = Depends(get_notes_repository)):
    note = notes.save_notes(caller.user_id, payload.plan_exercise_id, payload.day, payload.notes)
    publish_notes_saved(note)
    return {"message": "Notes saved successfully", "exerciseNote": note.to_dict()}


@router.get("/exercise-notes")
def get_exercise_notes(plan_exercise_id: Optional[str] = Query(default=None, alias="planExerciseId"),
                       date_str: Optional[str] = Query(default=None, alias="date"),
                       caller: Caller = Depends(require_client),
                       notes: NotesRepository = Depends(get_notes_repository)):
    if not plan_exercise_id:
        raise ValidationError("planExerciseId is required")
    day = parse_day(date_str)
    note = notes.get_notes(caller.user_id, plan_exercise_id, day)
    if note is None:
        return {"planExerciseId": plan_exercise_id, "date": format_day(day), "notes": None}
    return note.to_dict()
