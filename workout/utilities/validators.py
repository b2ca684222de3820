"""
Input validation schemas using Pydantic for the workout endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing import Optional

from workout.utilities.constants import MAX_SETS_PER_EXERCISE
from workout.utilities.dates import parse_day


class _WorkoutInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plan_exercise_id: str = Field(..., alias="planExerciseId", min_length=1)
    date: str

    @field_validator('plan_exercise_id')
    @classmethod
    def strip_id(cls, v):
        if not v.strip():
            raise ValueError('planExerciseId cannot be blank')
        return v.strip()

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        """Reject anything that is not a YYYY-MM-DD calendar day."""
        parse_day(v)
        return v.strip()

    @property
    def day(self):
        return parse_day(self.date)


class _ActualsInput(_WorkoutInput):
    actual_reps: Optional[StrictInt] = Field(None, alias="actualReps", ge=0)
    actual_weight: Optional[float] = Field(None, alias="actualWeight", ge=0)
    actual_duration: Optional[StrictInt] = Field(None, alias="actualDuration", ge=0)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator('notes')
    @classmethod
    def blank_notes_to_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()


class CompleteSetInput(_ActualsInput):
    """Schema for completing a single set."""
    set_number: StrictInt = Field(..., alias="setNumber", ge=1)


class UncheckSetInput(_WorkoutInput):
    """Schema for unchecking a single set."""
    set_number: StrictInt = Field(..., alias="setNumber", ge=1)


class CompleteAllSetsInput(_ActualsInput):
    """Schema for completing every remaining set of an exercise."""
    total_sets: StrictInt = Field(..., alias="totalSets", ge=1, le=MAX_SETS_PER_EXERCISE)


class SaveNotesInput(_WorkoutInput):
    """Schema for saving per-day exercise notes."""
    notes: str = Field(..., max_length=2000)

    @field_validator('notes')
    @classmethod
    def validate_notes(cls, v):
        if not v or not v.strip():
            raise ValueError('Notes cannot be empty')
        return v.strip()
