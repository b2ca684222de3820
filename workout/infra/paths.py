from workout.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIG_DATA_DIR.resolve()
PLANS_FILE = DATA_DIR / 'plans.json'
WORKOUT_LOGS_FILE = DATA_DIR / 'workout_logs.json'
EXERCISE_NOTES_FILE = DATA_DIR / 'exercise_notes.json'

__all__ = ['DATA_DIR', 'PLANS_FILE', 'WORKOUT_LOGS_FILE', 'EXERCISE_NOTES_FILE']
