"""Workout log entry: one completed set of one plan exercise on one calendar day."""
from datetime import date, datetime, timezone
from typing import Optional, Tuple
from uuid import uuid4

from workout.utilities.constants import DATE_FORMAT

LogKey = Tuple[str, str, int, str]


def log_key(client_id: str, plan_exercise_id: str, set_number: int, day: date) -> LogKey:
    return (client_id, plan_exercise_id, set_number, day.strftime(DATE_FORMAT))


class WorkoutLogEntry:
    def __init__(self, client_id: str, plan_exercise_id: str, set_number: int, date: date,
                 actual_reps: Optional[int] = None, actual_weight=None,
                 actual_duration: Optional[int] = None, notes: Optional[str] = None,
                 completed_at: Optional[datetime] = None, id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.client_id = client_id
        self.plan_exercise_id = plan_exercise_id
        self.set_number = set_number
        self.date = date
        self.actual_reps = actual_reps
        self.actual_weight = actual_weight
        self.actual_duration = actual_duration
        self.notes = notes
        self.completed_at = completed_at or datetime.now(timezone.utc)

    @property
    def key(self) -> LogKey:
        return log_key(self.client_id, self.plan_exercise_id, self.set_number, self.date)

    @staticmethod
    def from_dict(data):
        return WorkoutLogEntry(
            id=data.get("id"),
            client_id=data["clientId"],
            plan_exercise_id=data["planExerciseId"],
            set_number=data.get("setNumber"),
            date=datetime.strptime(data["date"], DATE_FORMAT).date(),
            actual_reps=data.get("actualReps"),
            actual_weight=data.get("actualWeight"),
            actual_duration=data.get("actualDuration"),
            notes=data.get("notes"),
            completed_at=datetime.fromisoformat(data["completedAt"]) if data.get("completedAt") else None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "clientId": self.client_id,
            "planExerciseId": self.plan_exercise_id,
            "setNumber": self.set_number,
            "date": self.date.strftime(DATE_FORMAT),
            "actualReps": self.actual_reps,
            "actualWeight": self.actual_weight,
            "actualDuration": self.actual_duration,
            "notes": self.notes,
            "completedAt": self.completed_at.isoformat(),
        }

    def __repr__(self) -> str:
        return f"WorkoutLogEntry({self.plan_exercise_id!r}, set={self.set_number}, {self.date})"
