"""Simple Event Bus / Observer implementation for workout activity.

Event names:
  workout.set_completed -> payload {"entry": WorkoutLogEntry}
  workout.set_unchecked -> payload {"clientId", "planExerciseId", "setNumber", "date"}
  workout.notes_saved -> payload {"note": ExerciseNote}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
WORKOUT_SET_COMPLETED = "workout.set_completed"
WORKOUT_SET_UNCHECKED = "workout.set_unchecked"
WORKOUT_NOTES_SAVED = "workout.notes_saved"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except ValueError:
			logger.debug("Callback %s was not subscribed to %s", callback, event_name)

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not undo a mutation that already committed
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event',
	'WORKOUT_SET_COMPLETED', 'WORKOUT_SET_UNCHECKED', 'WORKOUT_NOTES_SAVED'
]
