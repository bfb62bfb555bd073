# dojo_api/schemas/class_schemas.py
import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from ..models.enums import ClassLevel, ClassType
from .base import RecordSchema, RequestSchema, TimeOfDay, UpdateSchema, to_minutes


class ClassBase(RequestSchema):
    title: str = Field(..., min_length=3, max_length=200)
    description: Optional[str] = None
    instructor_id: int
    level: ClassLevel
    type: ClassType
    max_capacity: Optional[int] = Field(default=None, ge=1)


class ClassCreate(ClassBase):
    pass


class ClassUpdate(UpdateSchema):
    title: Optional[str] = Field(default=None, min_length=3, max_length=200)
    description: Optional[str] = None
    instructor_id: Optional[int] = None
    level: Optional[ClassLevel] = None
    type: Optional[ClassType] = None
    max_capacity: Optional[int] = Field(default=None, ge=1)


class Class(RecordSchema):
    title: str
    description: Optional[str] = None
    instructor_id: int
    level: ClassLevel
    type: ClassType
    max_capacity: Optional[int] = None


# --- Sessions ---

class SessionTimes(RequestSchema):
    date: dt.date
    start_time: TimeOfDay
    end_time: TimeOfDay
    notes: Optional[str] = None

    @model_validator(mode='after')
    def validate_time_window(self):
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError('endTime must be later than startTime')
        return self


class ClassSessionCreate(SessionTimes):
    """Session body for /classes/{class_id}/sessions, where the class comes from the path"""
    pass


class SessionCreate(SessionTimes):
    class_id: int


class RecurringSessionCreate(SessionCreate):
    days_of_week: List[int] = Field(..., min_length=1, description="0 = Sunday ... 6 = Saturday")
    recurrence_end_date: dt.date

    @field_validator('days_of_week')
    @classmethod
    def validate_days(cls, v):
        if any(day < 0 or day > 6 for day in v):
            raise ValueError('daysOfWeek entries must be between 0 (Sunday) and 6 (Saturday)')
        return sorted(set(v))

    @model_validator(mode='after')
    def validate_range(self):
        if self.recurrence_end_date < self.date:
            raise ValueError('recurrenceEndDate must not be before date')
        return self


class SessionUpdate(UpdateSchema):
    class_id: Optional[int] = None
    date: Optional[dt.date] = None
    start_time: Optional[TimeOfDay] = None
    end_time: Optional[TimeOfDay] = None
    notes: Optional[str] = None


class ClassSession(RecordSchema):
    class_id: int
    date: dt.date
    start_time: str
    end_time: str
    notes: Optional[str] = None


class CalendarSession(ClassSession):
    """Session joined with its class template at read time"""
    class_title: str
    class_type: str
    class_level: str
