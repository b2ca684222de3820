"""JSON file persistence helpers shared by the repositories.

Writes go to a temp file in the same directory and are moved over the target,
so a write either fully commits or leaves the previous content in place.
Read-modify-write cycles are serialised per file with a process-wide lock.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict

from workout.domain.errors import StorageFailure

logger = logging.getLogger(__name__)

_registry_lock = Lock()
_file_locks: Dict[Path, Lock] = {}


def lock_for(path: Path) -> Lock:
    """Return the lock guarding path (one per resolved file)."""
    key = Path(path).resolve()
    with _registry_lock:
        if key not in _file_locks:
            _file_locks[key] = Lock()
        return _file_locks[key]


def load_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Corrupt JSON store %s: %s", path, e)
        raise StorageFailure(f"Could not decode {path.name}") from e
    except OSError as e:
        logger.error("Failed to read %s: %s", path, e)
        raise StorageFailure(f"Could not read {path.name}") from e
    return default if data is None else data


def atomic_write(path: Path, data: Any) -> None:
    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
        tmp_path = None
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise StorageFailure(f"Could not write {path.name}") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
