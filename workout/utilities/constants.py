from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

MAX_SETS_PER_EXERCISE: Final[int] = 100

MSG_NO_ACTIVE_PLAN: Final[str] = "No active training plan assigned"
MSG_PLAN_NOT_FOUND: Final[str] = "Training plan not found"
MSG_REST_DAY: Final[str] = "No workout scheduled for this date"
MSG_STORAGE_RETRY: Final[str] = "Workout storage is temporarily unavailable, please retry"
