"""Completion log store: per-set workout log entries persisted as a JSON object.

Entries are keyed by (client, plan exercise, set number, date), so the key
itself is the uniqueness constraint. complete_set inserts only when the key is
absent and uncheck_set removes it; an entry is never updated in place.
"""
import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from workout.domain.WorkoutLogEntry import LogKey, WorkoutLogEntry, log_key
from workout.domain.errors import ValidationError
from workout.infra.json_store import atomic_write, load_json, lock_for
from workout.infra.paths import WORKOUT_LOGS_FILE
from workout.utilities.constants import MAX_SETS_PER_EXERCISE

logger = logging.getLogger(__name__)


def _storage_key(key: LogKey) -> str:
    # ids may contain any character, including separators
    return json.dumps(list(key))


def validate_set_number(set_number) -> int:
    if isinstance(set_number, bool) or not isinstance(set_number, int) or set_number <= 0:
        raise ValidationError(f"setNumber must be a positive integer, got {set_number!r}")
    return set_number


def validate_total_sets(total_sets) -> int:
    if isinstance(total_sets, bool) or not isinstance(total_sets, int) \
            or not 1 <= total_sets <= MAX_SETS_PER_EXERCISE:
        raise ValidationError(f"totalSets must be an integer between 1 and {MAX_SETS_PER_EXERCISE}")
    return total_sets


class WorkoutLogRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else WORKOUT_LOGS_FILE
        self._lock = lock_for(self.path)

    def _read(self) -> dict:
        store = load_json(self.path, {})
        return store if isinstance(store, dict) else {}

    def _entries(self) -> List[WorkoutLogEntry]:
        return [WorkoutLogEntry.from_dict(raw) for raw in self._read().values()]

    # --- Mutations ---------------------------------------------------------
    def complete_set(self, client_id: str, plan_exercise_id: str, set_number: int, day: date,
                     actual_reps=None, actual_weight=None, actual_duration=None,
                     notes: Optional[str] = None) -> Tuple[WorkoutLogEntry, bool]:
        """Record a completed set. Returns (entry, created); an existing entry is returned untouched."""
        validate_set_number(set_number)
        skey = _storage_key(log_key(client_id, plan_exercise_id, set_number, day))
        with self._lock:
            store = self._read()
            if skey in store:
                return WorkoutLogEntry.from_dict(store[skey]), False
            entry = WorkoutLogEntry(client_id, plan_exercise_id, set_number, day,
                                    actual_reps=actual_reps, actual_weight=actual_weight,
                                    actual_duration=actual_duration, notes=notes)
            store[skey] = entry.to_dict()
            atomic_write(self.path, store)
        logger.info("Set completed client=%s exercise=%s set=%s date=%s",
                    client_id, plan_exercise_id, set_number, day)
        return entry, True

    def uncheck_set(self, client_id: str, plan_exercise_id: str, set_number: int, day: date) -> bool:
        """Delete the entry for the key. Returns False when nothing was there."""
        validate_set_number(set_number)
        skey = _storage_key(log_key(client_id, plan_exercise_id, set_number, day))
        with self._lock:
            store = self._read()
            if skey not in store:
                return False
            del store[skey]
            atomic_write(self.path, store)
        logger.info("Set unchecked client=%s exercise=%s set=%s date=%s",
                    client_id, plan_exercise_id, set_number, day)
        return True

    def complete_exercise_all_sets(self, client_id: str, plan_exercise_id: str, total_sets: int,
                                   day: date, actual_weight=None, actual_reps=None,
                                   actual_duration=None, notes: Optional[str] = None) -> List[WorkoutLogEntry]:
        """Complete sets 1..total_sets, skipping the ones already logged.

        Each set is committed on its own, so an interrupted call can simply be
        repeated to finish the remaining sets. Returns only the newly created entries.
        """
        validate_total_sets(total_sets)
        created_entries = []
        for set_number in range(1, total_sets + 1):
            entry, created = self.complete_set(client_id, plan_exercise_id, set_number, day,
                                               actual_reps=actual_reps, actual_weight=actual_weight,
                                               actual_duration=actual_duration, notes=notes)
            if created:
                created_entries.append(entry)
        return created_entries

    # --- Queries -----------------------------------------------------------
    def list_for_date(self, client_id: str, day: date,
                      plan_exercise_id: Optional[str] = None) -> List[WorkoutLogEntry]:
        return [e for e in self.list_for_range(client_id, day, day)
                if plan_exercise_id is None or e.plan_exercise_id == plan_exercise_id]

    def list_for_range(self, client_id: str, start: date, end: date) -> List[WorkoutLogEntry]:
        entries = [e for e in self._entries() if e.client_id == client_id and start <= e.date <= end]
        return sorted(entries, key=lambda e: (e.date, e.plan_exercise_id, e.set_number))

    def list_for_exercise(self, client_id: str, plan_exercise_id: str) -> List[WorkoutLogEntry]:
        entries = [e for e in self._entries()
                   if e.client_id == client_id and e.plan_exercise_id == plan_exercise_id]
        return sorted(entries, key=lambda e: (e.date, e.set_number), reverse=True)

    def list_for_client(self, client_id: str) -> List[WorkoutLogEntry]:
        entries = [e for e in self._entries() if e.client_id == client_id]
        return sorted(entries, key=lambda e: (e.date, e.plan_exercise_id, e.set_number))
