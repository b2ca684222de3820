"""Calendar-day helpers shared by the resolver, the stores and the API."""
import re
from datetime import date, datetime, timedelta
from typing import Iterator, Tuple

from workout.domain.errors import ValidationError
from workout.utilities.constants import DATE_FORMAT

_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_day(value) -> date:
    """Parse a YYYY-MM-DD string (or pass through a date) into a calendar day."""
    if isinstance(value, datetime):
        raise ValidationError("Expected a calendar date without time of day")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Date is required (YYYY-MM-DD)")
    value = value.strip()
    if not _DAY_PATTERN.match(value):
        raise ValidationError(f"Invalid date '{value}'. Expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date '{value}'. Expected YYYY-MM-DD")


def format_day(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def week_bounds(day: date) -> Tuple[date, date]:
    """Return (monday, sunday) of the week containing day."""
    monday = day - timedelta(days=day.weekday())
    return monday, monday + timedelta(days=6)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
