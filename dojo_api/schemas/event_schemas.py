# dojo_api/schemas/event_schemas.py
import datetime as dt
from typing import Literal, Optional, Union

from pydantic import Field, HttpUrl, field_validator, model_validator

from ..models.enums import EventType
from .base import RecordSchema, RequestSchema, TimeOfDay, UpdateSchema, to_minutes


class EventBase(RequestSchema):
    title: str = Field(..., min_length=3, max_length=200)
    description: str = Field(..., min_length=10)
    event_type: EventType
    date: dt.date
    start_time: TimeOfDay
    end_time: TimeOfDay
    location: str = Field(..., min_length=3, max_length=200)
    max_attendees: Optional[int] = Field(default=None, ge=1)
    registration_required: bool = False
    instructor_id: Optional[int] = None
    external_link: Optional[Union[HttpUrl, Literal[""]]] = None
    cost: Optional[str] = Field(default=None, max_length=50)

    @field_validator('external_link')
    @classmethod
    def normalize_link(cls, v):
        # Stored as text; an empty string means "no link"
        if v is None or v == "":
            return None
        return str(v)

    @model_validator(mode='after')
    def validate_time_window(self):
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError('endTime must be later than startTime')
        return self


class EventCreate(EventBase):
    pass


class EventUpdate(UpdateSchema):
    title: Optional[str] = Field(default=None, min_length=3, max_length=200)
    description: Optional[str] = Field(default=None, min_length=10)
    event_type: Optional[EventType] = None
    date: Optional[dt.date] = None
    start_time: Optional[TimeOfDay] = None
    end_time: Optional[TimeOfDay] = None
    location: Optional[str] = Field(default=None, min_length=3, max_length=200)
    max_attendees: Optional[int] = Field(default=None, ge=1)
    registration_required: Optional[bool] = None
    instructor_id: Optional[int] = None
    external_link: Optional[Union[HttpUrl, Literal[""]]] = None
    cost: Optional[str] = Field(default=None, max_length=50)

    @field_validator('external_link')
    @classmethod
    def normalize_link(cls, v):
        if v is None or v == "":
            return None
        return str(v)


class Event(RecordSchema):
    title: str
    description: str
    event_type: EventType
    date: dt.date
    start_time: str
    end_time: str
    location: str
    max_attendees: Optional[int] = None
    registration_required: bool
    instructor_id: Optional[int] = None
    external_link: Optional[str] = None
    cost: Optional[str] = None
