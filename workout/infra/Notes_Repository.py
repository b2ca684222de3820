"""Exercise notes store: one note per (client, plan exercise, date), last write wins."""
import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from workout.domain.ExerciseNote import ExerciseNote, note_key
from workout.infra.json_store import atomic_write, load_json, lock_for
from workout.infra.paths import EXERCISE_NOTES_FILE

logger = logging.getLogger(__name__)


def _storage_key(client_id: str, plan_exercise_id: str, day: date) -> str:
    return json.dumps(list(note_key(client_id, plan_exercise_id, day)))


class NotesRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else EXERCISE_NOTES_FILE
        self._lock = lock_for(self.path)

    def _read(self) -> dict:
        store = load_json(self.path, {})
        return store if isinstance(store, dict) else {}

    def save_notes(self, client_id: str, plan_exercise_id: str, day: date, notes: str) -> ExerciseNote:
        note = ExerciseNote(client_id, plan_exercise_id, day, notes)
        with self._lock:
            store = self._read()
            store[_storage_key(client_id, plan_exercise_id, day)] = note.to_dict()
            atomic_write(self.path, store)
        logger.info("Notes saved client=%s exercise=%s date=%s", client_id, plan_exercise_id, day)
        return note

    def get_notes(self, client_id: str, plan_exercise_id: str, day: date) -> Optional[ExerciseNote]:
        raw = self._read().get(_storage_key(client_id, plan_exercise_id, day))
        return ExerciseNote.from_dict(raw) if raw else None

    def list_for_date(self, client_id: str, day: date) -> List[ExerciseNote]:
        notes = [ExerciseNote.from_dict(raw) for raw in self._read().values()]
        return [n for n in notes if n.client_id == client_id and n.date == day]
