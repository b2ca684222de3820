"""Error taxonomy for the workout tracker core."""


class WorkoutError(Exception):
    """Base class for errors raised by the workout tracker."""


class NotAuthorized(WorkoutError):
    """Caller identity is missing."""


class Forbidden(WorkoutError):
    """Caller is authenticated but is not a client."""


class ValidationError(WorkoutError, ValueError):
    """Malformed date, non-positive set number or empty notes."""


class StorageFailure(WorkoutError):
    """Transient failure reading or writing a store. Safe to retry."""
