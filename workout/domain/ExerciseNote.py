"""Per-day free-text notes on a plan exercise, independent of set completion."""
from datetime import date, datetime, timezone
from typing import Optional, Tuple

from workout.utilities.constants import DATE_FORMAT

NoteKey = Tuple[str, str, str]


def note_key(client_id: str, plan_exercise_id: str, day: date) -> NoteKey:
    return (client_id, plan_exercise_id, day.strftime(DATE_FORMAT))


class ExerciseNote:
    def __init__(self, client_id: str, plan_exercise_id: str, date: date, notes: str,
                 updated_at: Optional[datetime] = None):
        self.client_id = client_id
        self.plan_exercise_id = plan_exercise_id
        self.date = date
        self.notes = notes
        self.updated_at = updated_at or datetime.now(timezone.utc)

    @property
    def key(self) -> NoteKey:
        return note_key(self.client_id, self.plan_exercise_id, self.date)

    @staticmethod
    def from_dict(data):
        return ExerciseNote(
            client_id=data["clientId"],
            plan_exercise_id=data["planExerciseId"],
            date=datetime.strptime(data["date"], DATE_FORMAT).date(),
            notes=data.get("notes", ""),
            updated_at=datetime.fromisoformat(data["updatedAt"]) if data.get("updatedAt") else None,
        )

    def to_dict(self):
        return {
            "clientId": self.client_id,
            "planExerciseId": self.plan_exercise_id,
            "date": self.date.strftime(DATE_FORMAT),
            "notes": self.notes,
            "updatedAt": self.updated_at.isoformat(),
        }
