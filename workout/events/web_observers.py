"""Web-facing observers for workout activity events.

Subscribes to the GLOBAL_EVENT_BUS for set completion, uncheck and notes
events and keeps a bounded in-memory buffer of recent events that the API
exposes per client, so an open dashboard can poll for changes made from
another device instead of re-fetching everything.

Design:
  * Each event gets an auto-increment integer id (cursor); clients request
    only newer events with since=<last_id_seen>.
  * A Lock guards the buffer since sync handlers run in a thread pool.
    The buffer is per process, which is fine for non-critical notifications.
  * EVENT_BUFFER_SIZE caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from workout.utilities.config import EVENT_BUFFER_SIZE
from .Event_Bus import (
    GLOBAL_EVENT_BUS, WORKOUT_SET_COMPLETED, WORKOUT_SET_UNCHECKED, WORKOUT_NOTES_SAVED
)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    if not isinstance(payload, dict):
        return
    if 'entry' in payload:
        fields = payload['entry'].to_dict()
    elif 'note' in payload:
        fields = payload['note'].to_dict()
    else:
        fields = dict(payload)
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
            'clientId': fields.get('clientId'),
            'planExerciseId': fields.get('planExerciseId'),
            'date': fields.get('date'),
        }
        if 'setNumber' in fields:
            evt['setNumber'] = fields['setNumber']
        _events.append(evt)
        _next_id += 1
        if len(_events) > EVENT_BUFFER_SIZE:
            del _events[: len(_events) - EVENT_BUFFER_SIZE]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (WORKOUT_SET_COMPLETED, WORKOUT_SET_UNCHECKED, WORKOUT_NOTES_SAVED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(client_id: str, since: int | None = None) -> Dict[str, Any]:
    """Return the client's events newer than 'since' (exclusive).

    next_cursor is the newest id in the buffer, so polling with it never
    re-delivers an event.
    """
    with _lock:
        data = [e for e in _events
                if e['clientId'] == client_id and (since is None or e['id'] > since)]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
